"""
Image requester: one prompt (plus optional reference images) in, one image out.

Backends:
- Gemini via google-genai (default)
"""

from slidegen.generator.base import ImageBackend, ImageGenerationError
from slidegen.generator.gemini import GeminiImageBackend
from slidegen.generator.image_gen import ImageGenerator
from slidegen.generator.inputs import (
    guess_mime_type,
    load_reference_image,
    load_reference_images,
    parse_reference_paths,
    resolve_prompt,
)
from slidegen.generator.response import scan_response, troubleshooting_hints

__all__ = [
    "ImageBackend",
    "ImageGenerationError",
    "GeminiImageBackend",
    "ImageGenerator",
    "guess_mime_type",
    "load_reference_image",
    "load_reference_images",
    "parse_reference_paths",
    "resolve_prompt",
    "scan_response",
    "troubleshooting_hints",
]
