"""
Split a Marp markdown deck into per-slide prompt files.

Slides are separated by lines containing only ``---``. A leading block that
contains ``marp: true`` is front matter and is not a slide.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from slidegen.models import SlideSegment


SEPARATOR_PATTERN = re.compile(r"^---$", re.MULTILINE)
HEADING_PATTERN = re.compile(r"^#+\s+(.+)$", re.MULTILINE)
ILLEGAL_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')

FRONT_MATTER_MARKER = "marp: true"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

PROMPT_TEMPLATE = """Create an easy-to-read presentation slide based on the description below.

- Format
Aspect ratio: 16:9
Resolution: 2K

- Design
Simple white background, black text, blue as the main color, flat colors.
A cute black cat as the mascot character.
Use props such as wine, books, pens and notebooks where appropriate.
Keep the diagrams clean and easy to follow.
Finally, regenerate the image once more to clean up the lettering. Do not change anything other than the text.

- Description
"""


def split_slides(text: str) -> List[str]:
    """Split on separator lines, trimming and dropping empty segments."""
    segments = [s.strip() for s in SEPARATOR_PATTERN.split(text)]
    return [s for s in segments if s]


def is_front_matter(segment: str) -> bool:
    return FRONT_MATTER_MARKER in segment


def extract_heading(segment: str) -> Optional[str]:
    """Text of the first markdown heading line, if any."""
    match = HEADING_PATTERN.search(segment)
    if match:
        return match.group(1)
    return None


def sanitize_filename(title: str) -> str:
    return ILLEGAL_FILENAME_CHARS.sub("_", title).strip()


def parse_slides(text: str) -> List[SlideSegment]:
    """
    Parse a deck into numbered slide segments.

    Only the first segment is checked for front matter; everything after it is
    a slide, numbered from 1.
    """
    segments = split_slides(text)
    if segments and is_front_matter(segments[0]):
        segments = segments[1:]

    slides = []
    for i, content in enumerate(segments, start=1):
        heading = extract_heading(content)
        slides.append(
            SlideSegment(
                index=i,
                content=content,
                heading=sanitize_filename(heading) if heading is not None else None,
            )
        )
    return slides


def build_prompt(segment: SlideSegment, template: str = PROMPT_TEMPLATE) -> str:
    return template + segment.content


class MarpPromptSplitter:
    """
    Writes one prompt file per slide into a fresh timestamped directory.

    Output layout::

        <input dir>/prompts/<YYYY-MM-DD_HH-MM-SS>/slide_<n>[_<heading>].md
    """

    def __init__(self, template: str = PROMPT_TEMPLATE):
        self.template = template

    def output_dir_for(self, input_path: Path, now: Optional[datetime] = None) -> Path:
        now = now or datetime.now()
        return Path(input_path).parent / "prompts" / now.strftime(TIMESTAMP_FORMAT)

    def split(self, input_path: Path, now: Optional[datetime] = None) -> List[Path]:
        """
        Split a deck file and write the prompt files.

        Args:
            input_path: Marp markdown file
            now: Timestamp used for the output directory name (default: now)

        Returns:
            Paths of the written prompt files, in slide order

        Raises:
            OSError: The input can't be read or the output directory already exists
        """
        input_path = Path(input_path)
        with open(input_path, "r", encoding="utf-8", errors="replace") as f:
            content = f.read()

        slides = parse_slides(content)

        output_dir = self.output_dir_for(input_path, now)
        output_dir.parent.mkdir(exist_ok=True)
        output_dir.mkdir()
        print(f"Created output directory: {output_dir}")

        written = []
        for slide in slides:
            output_path = output_dir / slide.filename
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(build_prompt(slide, self.template))
            print(f"Generated: {output_path}")
            written.append(output_path)

        print(f"Successfully generated {len(written)} prompt files.")
        return written
