"""
Tests for response scanning and troubleshooting hints.
"""

from slidegen.generator.response import scan_response, troubleshooting_hints
from slidegen.models import ResponsePart


def test_scan_response_first_image_and_all_text():
    parts = [
        ResponsePart(text="Here is your image"),
        ResponsePart(image_data=b"first", mime_type="image/png"),
        ResponsePart(image_data=b"second", mime_type="image/jpeg"),
        ResponsePart(text="Anything else?"),
    ]

    result = scan_response(parts)

    assert result.found
    assert result.image_data == b"first"
    assert result.mime_type == "image/png"
    assert result.messages == ["Here is your image", "Anything else?"]


def test_scan_response_text_only():
    result = scan_response([ResponsePart(text="I can't draw that")])

    assert not result.found
    assert result.image_data is None
    assert result.messages == ["I can't draw that"]


def test_scan_response_empty():
    result = scan_response([])
    assert not result.found
    assert result.messages == []


def test_troubleshooting_hints():
    key_hints = troubleshooting_hints("API key not valid", "m")
    assert any("aistudio.google.com/apikey" in h for h in key_hints)

    model_hints = troubleshooting_hints("model not found", "bad-model")
    assert any("bad-model" in h for h in model_hints)

    assert troubleshooting_hints("connection reset", "m") == []
