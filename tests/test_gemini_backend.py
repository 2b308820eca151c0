"""
Tests for the Gemini backend using a stub client.
"""

from pathlib import Path
from types import SimpleNamespace

import pytest

from slidegen.generator import GeminiImageBackend, ImageGenerationError
from slidegen.models import GenerationRequest, ImageConfig, ReferenceImage


class StubModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return self.response


def stub_client(response=None, error=None):
    return SimpleNamespace(models=StubModels(response, error))


def make_response(*parts):
    content = SimpleNamespace(parts=list(parts))
    return SimpleNamespace(candidates=[SimpleNamespace(content=content)], prompt_feedback=None)


def text_part(text):
    return SimpleNamespace(text=text, inline_data=None)


def image_part(data, mime_type="image/png"):
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def test_requires_api_key():
    with pytest.raises(ValueError, match="API key"):
        GeminiImageBackend(api_key="", model="m")


def test_generate_sends_images_then_prompt():
    client = stub_client(make_response(text_part("ok"), image_part(b"img")))
    backend = GeminiImageBackend(api_key="k", model="gemini-test", client=client)
    request = GenerationRequest(
        model="gemini-test",
        prompt="draw a cat",
        reference_images=[ReferenceImage(path=Path("/r.jpg"), mime_type="image/jpeg", data=b"ref")],
        config=ImageConfig(image_size="4K", aspect_ratio="1:1"),
    )

    parts = backend.generate(request)

    call = client.models.calls[0]
    assert call["model"] == "gemini-test"
    assert len(call["contents"]) == 2
    assert call["contents"][0].inline_data.data == b"ref"
    assert call["contents"][0].inline_data.mime_type == "image/jpeg"
    assert call["contents"][1].text == "draw a cat"
    assert len(call["config"].response_modalities) == 2
    assert call["config"].image_config.image_size == "4K"
    assert call["config"].image_config.aspect_ratio == "1:1"

    assert parts[0].text == "ok"
    assert parts[1].image_data == b"img"
    assert parts[1].mime_type == "image/png"


def test_generate_wraps_errors():
    client = stub_client(error=RuntimeError("model not found"))
    backend = GeminiImageBackend(api_key="k", model="m", client=client)

    with pytest.raises(ImageGenerationError, match="model not found"):
        backend.generate(GenerationRequest(model="m", prompt="p"))


def test_parse_response_without_candidates():
    assert GeminiImageBackend.parse_response(SimpleNamespace(candidates=None)) == []

    blocked = SimpleNamespace(
        candidates=[],
        prompt_feedback=SimpleNamespace(block_reason="SAFETY"),
    )
    parts = GeminiImageBackend.parse_response(blocked)
    assert len(parts) == 1
    assert parts[0].text == "Prompt blocked: SAFETY"


def test_generate_uses_request_model():
    client = stub_client(make_response(image_part(b"img")))
    backend = GeminiImageBackend(api_key="k", model="backend-default", client=client)

    backend.generate(GenerationRequest(model="gemini-3-pro-image-preview", prompt="p"))

    assert client.models.calls[0]["model"] == "gemini-3-pro-image-preview"
