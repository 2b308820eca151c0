"""
Single-shot image generation.

Resolves the output location and image config, sends one request through an
ImageBackend and writes the first returned image to disk.
"""

import sys
import time
from pathlib import Path
from typing import Optional, Sequence, Union

from slidegen.config import ImageGenSettings
from slidegen.generator.base import ImageBackend
from slidegen.generator.response import scan_response
from slidegen.models import GenerationRequest, GenerationResult, ReferenceImage


def _log(message: str) -> None:
    print(f"[Image Gen] {message}", file=sys.stderr)


class ImageGenerator:
    """
    Turns a prompt into exactly one image file.

    A reply without image data is a soft failure: nothing is written and the
    returned result has no output path.
    """

    def __init__(self, backend: ImageBackend, settings: Optional[ImageGenSettings] = None):
        self.backend = backend
        self.settings = settings or ImageGenSettings.from_env()

    @staticmethod
    def prepare_output_dir(output_dir: Union[str, Path]) -> Path:
        output_dir = Path(output_dir)
        if not output_dir.is_absolute():
            output_dir = Path.cwd() / output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir

    @staticmethod
    def default_filename() -> str:
        return f"image_{int(time.time() * 1000)}.png"

    def generate(
        self,
        prompt: str,
        output_dir: Union[str, Path],
        filename: Optional[str] = None,
        reference_images: Sequence[ReferenceImage] = (),
        image_size: Optional[str] = None,
        aspect_ratio: Optional[str] = None,
    ) -> GenerationResult:
        """
        Generate one image.

        Args:
            prompt: Prompt text
            output_dir: Target directory, created if missing
            filename: Output filename (default: image_<epoch millis>.png)
            reference_images: Images sent ahead of the prompt
            image_size: 1K, 2K or 4K (default: environment, then 2K)
            aspect_ratio: e.g. 16:9 (default: environment, then 16:9)

        Returns:
            GenerationResult with the written path, or without one if the
            reply carried no image

        Raises:
            ImageGenerationError: The backend call failed
        """
        output_path = self.prepare_output_dir(output_dir) / (filename or self.default_filename())
        config = self.settings.image_config(image_size=image_size, aspect_ratio=aspect_ratio)

        _log("Generating image...")
        _log(f"Model: {self.backend.model}")
        _log(f"Output: {output_path}")
        if reference_images:
            _log(f"Reference images: {len(reference_images)}")
        _log(f"Image Size: {config.image_size}, Aspect Ratio: {config.aspect_ratio}")

        request = GenerationRequest(
            model=self.backend.model,
            prompt=prompt,
            reference_images=list(reference_images),
            config=config,
        )
        parts = self.backend.generate(request)
        scan = scan_response(parts)

        for message in scan.messages:
            _log(f"Model response: {message}")

        if not scan.found:
            _log("Warning: No image data in response")
            dump = ", ".join(p.model_dump_json(exclude_none=True) for p in parts)
            _log(f"Full response: [{dump}]")
            return GenerationResult(messages=scan.messages)

        with open(output_path, "wb") as f:
            f.write(scan.image_data)
        print(f"Generated: {output_path}")

        return GenerationResult(output_path=output_path, messages=scan.messages)
