"""
Configuration for the image generation CLI.

Values come from the process environment. The environment can be seeded from
the ``env`` object of a local ``settings.local.json`` (keys already set in the
environment win) and from a ``.env`` file loaded by the CLI.
"""

import json
import os
import sys
from pathlib import Path
from typing import Dict, MutableMapping, Optional, Mapping

from pydantic import BaseModel

from slidegen.models import ImageConfig


DEFAULT_MODEL = "gemini-2.0-flash-exp"
DEFAULT_IMAGE_SIZE = "2K"
DEFAULT_ASPECT_RATIO = "16:9"

KNOWN_MODELS = ["gemini-2.0-flash-exp", "gemini-3-pro-image-preview"]


def settings_file_path(home: Optional[Path] = None) -> Path:
    """Location of the local settings file (~/.claude/settings.local.json)."""
    if home is None:
        home = Path(os.getenv("USERPROFILE") or os.getenv("HOME") or Path.home())
    return Path(home) / ".claude" / "settings.local.json"


def seed_environment(
    settings_path: Optional[Path] = None,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Copy the settings file's ``env`` entries into the environment.

    Existing variables are never overwritten. A missing file is ignored; a
    file that can't be read or parsed prints a warning and is ignored.

    Returns:
        The entries that were actually applied.
    """
    environ = os.environ if environ is None else environ
    settings_path = settings_path or settings_file_path()

    if not settings_path.exists():
        return {}

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            settings = json.load(f)
    except (OSError, ValueError) as e:
        print(
            f"[Image Gen] Warning: Failed to load {settings_path.name}: {e}",
            file=sys.stderr,
        )
        return {}

    env = settings.get("env") if isinstance(settings, dict) else None
    if not isinstance(env, dict):
        return {}

    applied = {}
    for key, value in env.items():
        if not environ.get(key):
            environ[key] = str(value)
            applied[key] = str(value)
    return applied


class ImageGenSettings(BaseModel):
    """Resolved settings for the image generator."""

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    image_size: Optional[str] = None
    aspect_ratio: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ImageGenSettings":
        """
        Read settings from environment variables.

        GEMINI_API_KEY (or NANOBANANA_GEMINI_API_KEY), NANOBANANA_MODEL,
        NANOBANANA_IMAGE_SIZE and NANOBANANA_ASPECT_RATIO. Size and ratio are
        kept as given; only the value image_config() picks is validated.
        """
        environ = os.environ if environ is None else environ
        return cls(
            api_key=environ.get("GEMINI_API_KEY") or environ.get("NANOBANANA_GEMINI_API_KEY"),
            model=environ.get("NANOBANANA_MODEL") or DEFAULT_MODEL,
            image_size=environ.get("NANOBANANA_IMAGE_SIZE") or None,
            aspect_ratio=environ.get("NANOBANANA_ASPECT_RATIO") or None,
        )

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ValueError(
                "GEMINI_API_KEY is not set. Add it to the env field of "
                f"{settings_file_path()} or export it in your shell."
            )
        return self.api_key

    def image_config(
        self,
        image_size: Optional[str] = None,
        aspect_ratio: Optional[str] = None,
    ) -> ImageConfig:
        """
        Explicit values win over the environment, which wins over defaults.

        Raises:
            pydantic.ValidationError: The chosen size or ratio is not supported
        """
        return ImageConfig(
            image_size=image_size or self.image_size or DEFAULT_IMAGE_SIZE,
            aspect_ratio=aspect_ratio or self.aspect_ratio or DEFAULT_ASPECT_RATIO,
        )


def load_settings(
    environ: Optional[MutableMapping[str, str]] = None,
    settings_path: Optional[Path] = None,
) -> ImageGenSettings:
    """Seed the environment from the settings file, then read it."""
    environ = os.environ if environ is None else environ
    seed_environment(settings_path=settings_path, environ=environ)
    return ImageGenSettings.from_env(environ)
