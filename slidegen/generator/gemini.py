"""
Gemini image generation backend (google-genai).

Sends reference images and the prompt in one ``generate_content`` call with
both TEXT and IMAGE response modalities.
"""

from typing import Any, List, Optional

from google import genai
from google.genai import types

from slidegen.generator.base import ImageBackend, ImageGenerationError
from slidegen.models import GenerationRequest, ReferenceImage, ResponsePart


class GeminiImageBackend(ImageBackend):
    """
    Generate images with a Gemini image model.

    The call blocks until the service answers; there is no timeout and no
    retry.
    """

    def __init__(self, api_key: str, model: str, client: Optional[Any] = None):
        super().__init__(model)
        if client is None:
            if not api_key:
                raise ValueError(
                    "Gemini API key required. Set GEMINI_API_KEY env var or pass api_key parameter."
                )
            client = genai.Client(api_key=api_key)
        self.client = client

    def build_contents(self, request: GenerationRequest) -> List[types.Part]:
        contents = []
        for part in request.parts():
            if isinstance(part, ReferenceImage):
                contents.append(types.Part.from_bytes(data=part.data, mime_type=part.mime_type))
            else:
                contents.append(types.Part.from_text(text=part))
        return contents

    def build_config(self, request: GenerationRequest) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_modalities=["TEXT", "IMAGE"],
            image_config=types.ImageConfig(
                image_size=request.config.image_size,
                aspect_ratio=request.config.aspect_ratio,
            ),
        )

    def generate(self, request: GenerationRequest) -> List[ResponsePart]:
        try:
            response = self.client.models.generate_content(
                model=request.model,
                contents=self.build_contents(request),
                config=self.build_config(request),
            )
        except Exception as e:
            raise ImageGenerationError(str(e)) from e

        return self.parse_response(response)

    @staticmethod
    def parse_response(response: Any) -> List[ResponsePart]:
        """
        Convert the first candidate's content parts into ResponseParts.

        A reply without candidates yields no parts, except for a text part
        describing the block reason when the prompt was rejected.
        """
        candidates = getattr(response, "candidates", None) or []
        content = getattr(candidates[0], "content", None) if candidates else None
        raw_parts = getattr(content, "parts", None) or []

        if not raw_parts:
            feedback = getattr(response, "prompt_feedback", None)
            block_reason = getattr(feedback, "block_reason", None)
            if block_reason:
                return [ResponsePart(text=f"Prompt blocked: {block_reason}")]
            return []

        parts = []
        for raw in raw_parts:
            inline_data = getattr(raw, "inline_data", None)
            data = getattr(inline_data, "data", None) if inline_data else None
            parts.append(
                ResponsePart(
                    text=getattr(raw, "text", None),
                    image_data=data or None,
                    mime_type=getattr(inline_data, "mime_type", None) if inline_data else None,
                )
            )
        return parts
