"""
Prompt splitter: turn a Marp slide deck into one image prompt per slide.
"""

from slidegen.splitter.marp import (
    MarpPromptSplitter,
    PROMPT_TEMPLATE,
    build_prompt,
    extract_heading,
    parse_slides,
    sanitize_filename,
    split_slides,
)

__all__ = [
    "MarpPromptSplitter",
    "PROMPT_TEMPLATE",
    "build_prompt",
    "extract_heading",
    "parse_slides",
    "sanitize_filename",
    "split_slides",
]
