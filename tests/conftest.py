"""
Shared fixtures: a fake image backend and a clean environment.
"""

from typing import List

import pytest

from slidegen.generator.base import ImageBackend, ImageGenerationError
from slidegen.models import GenerationRequest, ResponsePart


class FakeImageBackend(ImageBackend):
    """Returns canned parts and records every request it receives."""

    def __init__(self, parts: List[ResponsePart] = None, error: str = None, model: str = "fake-model"):
        super().__init__(model)
        self.parts = parts or []
        self.error = error
        self.requests: List[GenerationRequest] = []

    def generate(self, request: GenerationRequest) -> List[ResponsePart]:
        self.requests.append(request)
        if self.error:
            raise ImageGenerationError(self.error)
        return list(self.parts)


@pytest.fixture
def fake_backend():
    return FakeImageBackend


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep real credentials and settings files out of the tests."""
    for key in (
        "GEMINI_API_KEY",
        "NANOBANANA_GEMINI_API_KEY",
        "NANOBANANA_MODEL",
        "NANOBANANA_IMAGE_SIZE",
        "NANOBANANA_ASPECT_RATIO",
    ):
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USERPROFILE", raising=False)
    return home
