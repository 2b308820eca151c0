"""
slidegen: turn Marp slide decks into image prompts and prompts into images.

Two small tools: a prompt splitter that writes one prompt file per slide, and
an image requester that sends a prompt (plus optional reference images) to
Gemini and saves the returned image.
"""

__version__ = "0.1.0"
__author__ = "slidegen Team"

from slidegen.models import SlideSegment, ReferenceImage, GenerationRequest, GenerationResult
from slidegen.splitter import MarpPromptSplitter
from slidegen.generator import ImageGenerator, GeminiImageBackend

__all__ = [
    "SlideSegment",
    "ReferenceImage",
    "GenerationRequest",
    "GenerationResult",
    "MarpPromptSplitter",
    "ImageGenerator",
    "GeminiImageBackend",
]
