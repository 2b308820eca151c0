"""
Base image backend interface.
"""

from abc import ABC, abstractmethod
from typing import List

from slidegen.models import GenerationRequest, ResponsePart


class ImageGenerationError(RuntimeError):
    """The image service call failed."""


class ImageBackend(ABC):
    """Abstract base class for image generation services."""

    def __init__(self, model: str):
        self.model = model
        self.name = self.__class__.__name__.replace("ImageBackend", "").lower()

    @abstractmethod
    def generate(self, request: GenerationRequest) -> List[ResponsePart]:
        """
        Send one generation request and return the reply's parts in order.

        Args:
            request: Prompt, reference images and image config

        Returns:
            Text and image parts as returned by the service

        Raises:
            ImageGenerationError: The call failed
        """
        pass
