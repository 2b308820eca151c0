"""
Core data models for slidegen.

Defines the slide segments produced by the prompt splitter and the
request/response shapes exchanged with the image generation backend,
using Pydantic for validation.
"""

import base64
import binascii
from pathlib import Path
from typing import List, Optional, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


IMAGE_SIZES = ("1K", "2K", "4K")
ASPECT_RATIOS = ("1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9")

ImageSize = Literal["1K", "2K", "4K"]
AspectRatio = Literal["1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9"]


# --- Prompt splitter models ---


class SlideSegment(BaseModel):
    """One slide cut out of a Marp markdown document."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1, description="1-based position among retained slides")
    content: str
    heading: Optional[str] = None

    @property
    def stem(self) -> str:
        """Filename without extension: slide_<n> or slide_<n>_<heading>."""
        if self.heading is not None:
            return f"slide_{self.index}_{self.heading}"
        return f"slide_{self.index}"

    @property
    def filename(self) -> str:
        return f"{self.stem}.md"


# --- Image generation models ---


class ReferenceImage(BaseModel):
    """An input image sent ahead of the prompt to steer generation."""

    model_config = ConfigDict(frozen=True)

    path: Path
    mime_type: str = "image/png"
    data: bytes

    @property
    def base64_data(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


class ImageConfig(BaseModel):
    """Output resolution class and aspect ratio."""

    image_size: ImageSize = "2K"
    aspect_ratio: AspectRatio = "16:9"


class GenerationRequest(BaseModel):
    """A single outbound image generation call."""

    model: str
    prompt: str
    reference_images: List[ReferenceImage] = Field(default_factory=list)
    config: ImageConfig = Field(default_factory=ImageConfig)

    def parts(self) -> List[Union[ReferenceImage, str]]:
        """
        Ordered content sequence for the request.

        Reference images come first, in the order given; the prompt text is
        always the last part.
        """
        contents: List[Union[ReferenceImage, str]] = list(self.reference_images)
        contents.append(self.prompt)
        return contents


class ResponsePart(BaseModel):
    """
    One tagged part of a backend reply.

    A part carries either text or image bytes. Image data given as a base64
    string is decoded on validation.
    """

    text: Optional[str] = None
    image_data: Optional[bytes] = None
    mime_type: Optional[str] = None

    @field_validator("image_data", mode="before")
    @classmethod
    def decode_base64(cls, v):
        if isinstance(v, str):
            try:
                return base64.b64decode(v, validate=True)
            except binascii.Error as e:
                raise ValueError(f"Invalid base64 image data: {e}") from e
        return v

    @property
    def has_image(self) -> bool:
        return bool(self.image_data)


class ScanResult(BaseModel):
    """Outcome of scanning response parts: the first image and any text."""

    image_data: Optional[bytes] = None
    mime_type: Optional[str] = None
    messages: List[str] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.image_data is not None


class GenerationResult(BaseModel):
    """What an image generation run produced."""

    output_path: Optional[Path] = None
    messages: List[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.output_path is not None
