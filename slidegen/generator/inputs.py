"""
Prompt and reference image loading for the image generator.
"""

import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union

from slidegen.models import ReferenceImage


MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}
DEFAULT_MIME_TYPE = "image/png"


def _absolute(path: Union[str, Path]) -> Path:
    path = Path(path)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def resolve_prompt(prompt: Optional[str], prompt_file: Optional[Union[str, Path]]) -> Optional[str]:
    """
    Pick the prompt text.

    A prompt file, when given, wins over a direct prompt and its full contents
    are used as-is.

    Raises:
        FileNotFoundError: The prompt file doesn't exist
    """
    if prompt_file:
        prompt_path = _absolute(prompt_file)
        if not prompt_path.exists():
            raise FileNotFoundError(f"Prompt file not found: {prompt_path}")
        with open(prompt_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    if prompt:
        return prompt

    return None


def parse_reference_paths(values: Optional[Iterable[str]]) -> List[str]:
    """Flatten repeated and comma-separated reference image arguments."""
    if not values:
        return []
    if isinstance(values, str):
        values = [values]

    paths = []
    for value in values:
        paths.extend(p.strip() for p in value.split(",") if p.strip())
    return paths


def guess_mime_type(path: Union[str, Path]) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


def load_reference_image(path: Union[str, Path]) -> ReferenceImage:
    """
    Load one reference image from disk.

    Raises:
        FileNotFoundError: The image doesn't exist
    """
    absolute_path = _absolute(path)
    if not absolute_path.exists():
        raise FileNotFoundError(f"Reference image not found: {absolute_path}")

    image = ReferenceImage(
        path=absolute_path,
        mime_type=guess_mime_type(absolute_path),
        data=absolute_path.read_bytes(),
    )
    print(
        f"[Image Gen] Reference image loaded: {absolute_path.name} ({image.mime_type})",
        file=sys.stderr,
    )
    return image


def load_reference_images(values: Optional[Iterable[str]]) -> List[ReferenceImage]:
    """Load every reference image; the first missing one aborts the lot."""
    return [load_reference_image(p) for p in parse_reference_paths(values)]
