"""
Command-line interface for slidegen.

Two entry points:
- ``marp-to-prompts``: split a Marp deck into per-slide prompt files
- ``image-gen``: generate one image from a prompt with Gemini
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from slidegen import __version__
from slidegen.config import load_settings, settings_file_path
from slidegen.generator import (
    GeminiImageBackend,
    ImageGenerationError,
    ImageGenerator,
    load_reference_images,
    resolve_prompt,
    troubleshooting_hints,
)
from slidegen.models import ASPECT_RATIOS, IMAGE_SIZES
from slidegen.splitter import MarpPromptSplitter


def split_main(argv: Optional[List[str]] = None) -> int:
    """Prompt splitter entry point."""
    parser = argparse.ArgumentParser(
        prog="marp-to-prompts",
        description="Split a Marp markdown deck into one image prompt file per slide",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Marp markdown file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"slidegen {__version__}",
    )

    args = parser.parse_args(argv)

    if not args.input:
        print("Usage: marp-to-prompts <input_markdown_file>", file=sys.stderr)
        return 1

    try:
        MarpPromptSplitter().split(args.input)
    except OSError as e:
        print(f"Error processing file: {e}", file=sys.stderr)
        return 1

    return 0


def build_image_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-gen",
        description="Generate an image with the Gemini API (Nano Banana Pro)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available Aspect Ratios:
  {", ".join(ASPECT_RATIOS)}

Examples:
  image-gen --prompt "Blue sky and white clouds" --output ./output/assets
  image-gen --prompt-file ./prompt.txt --output ./output/assets --filename office.png
  image-gen --prompt "Make this an oil painting" --ref ./input.png --output ./output/assets

Output:
  {{output}}/{{filename}}

Environment Variables (env field of {settings_file_path()} or .env):
  GEMINI_API_KEY           Google AI Studio API key (required)
  NANOBANANA_MODEL         Model name (default: gemini-2.0-flash-exp)
  NANOBANANA_IMAGE_SIZE    Default image size
  NANOBANANA_ASPECT_RATIO  Default aspect ratio
        """,
    )

    parser.add_argument("--prompt", help="Prompt text")
    parser.add_argument("--prompt-file", type=Path, help="Read the prompt from a file")
    parser.add_argument("--output", "-o", type=Path, help="Output directory")
    parser.add_argument(
        "--filename",
        help="Output filename (default: image_<timestamp>.png)",
    )
    parser.add_argument(
        "--image-size",
        choices=IMAGE_SIZES,
        help="Image size (default: 2K)",
    )
    parser.add_argument(
        "--aspect-ratio",
        choices=ASPECT_RATIOS,
        help="Aspect ratio (default: 16:9)",
    )
    parser.add_argument(
        "--reference-image",
        "--ref",
        dest="reference_images",
        action="append",
        metavar="PATH",
        help="Reference image path; repeat the flag or pass a comma-separated list",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"slidegen {__version__}",
    )
    return parser


def image_main(argv: Optional[List[str]] = None) -> int:
    """Image generator entry point."""
    load_dotenv()  # Load .env file if present

    parser = build_image_parser()
    args = parser.parse_args(argv)

    try:
        prompt = resolve_prompt(args.prompt, args.prompt_file)
        reference_images = load_reference_images(args.reference_images)
    except FileNotFoundError as e:
        print(f"[Image Gen] Error: {e}", file=sys.stderr)
        return 1

    if not prompt or not args.output:
        parser.print_help()
        if not prompt:
            print("\nError: --prompt or --prompt-file is required", file=sys.stderr)
        if not args.output:
            print("\nError: --output is required", file=sys.stderr)
        return 0

    try:
        settings = load_settings()
        config = settings.image_config(image_size=args.image_size, aspect_ratio=args.aspect_ratio)
        backend = GeminiImageBackend(api_key=settings.require_api_key(), model=settings.model)
    except (ValueError, ValidationError) as e:
        print(f"[Image Gen] Error: {e}", file=sys.stderr)
        return 1

    generator = ImageGenerator(backend, settings)

    try:
        generator.generate(
            prompt=prompt,
            output_dir=args.output,
            filename=args.filename,
            reference_images=reference_images,
            image_size=config.image_size,
            aspect_ratio=config.aspect_ratio,
        )
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except ImageGenerationError as e:
        print(f"[Image Gen] Error: {e}", file=sys.stderr)
        hints = troubleshooting_hints(str(e), settings.model)
        if hints:
            print("\n" + "\n".join(hints), file=sys.stderr)
        return 1
    except Exception as e:
        print(f"\n[Image Gen] Error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> int:
    """Dispatch ``python -m slidegen.cli <split|image> ...``."""
    commands = {"split": split_main, "image": image_main}
    if len(sys.argv) < 2 or sys.argv[1] not in commands:
        print("Usage: python -m slidegen.cli {split,image} [args...]", file=sys.stderr)
        return 1
    return commands[sys.argv[1]](sys.argv[2:])


if __name__ == "__main__":
    sys.exit(main())
