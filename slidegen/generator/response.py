"""
Interpreting image service replies and failures.
"""

from typing import Iterable, List

from slidegen.config import KNOWN_MODELS, settings_file_path
from slidegen.models import ResponsePart, ScanResult


def scan_response(parts: Iterable[ResponsePart]) -> ScanResult:
    """
    Pick the first image out of a reply.

    Text parts are kept as messages, in order, wherever they appear. Image
    parts after the first one are ignored.
    """
    result = ScanResult()
    for part in parts:
        if part.has_image and not result.found:
            result.image_data = part.image_data
            result.mime_type = part.mime_type
        if part.text:
            result.messages.append(part.text)
    return result


def troubleshooting_hints(message: str, model: str) -> List[str]:
    """Remediation lines for well-known failure messages."""
    hints = []
    if "API key" in message:
        hints.extend([
            "Troubleshooting:",
            f"1. Check that GEMINI_API_KEY is set in the env field of {settings_file_path()}",
            "2. Check that the API key is valid: https://aistudio.google.com/apikey",
        ])
    if "model" in message:
        hints.extend([
            "Troubleshooting:",
            f"1. Check the model name: {model}",
            f"2. Available models: {', '.join(KNOWN_MODELS)}",
        ])
    return hints
