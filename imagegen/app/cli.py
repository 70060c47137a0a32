from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..image_job import ImageJobBuilder, ImageSettings, OUTPUT_DIR_ENV_VAR, to_base64


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="image-gen",
        description="Generate a single-color placeholder PNG image.",
    )
    parser.add_argument("width", type=int, help="Width of the image in pixels (1-4096)")
    parser.add_argument("height", type=int, help="Height of the image in pixels (1-4096)")
    parser.add_argument("color", help="Color of the image as hex code (e.g. #FF0000 or #f00)")
    parser.add_argument("filepath", nargs="?", help="Where the PNG should be saved (e.g. /path/to/image.png)")
    parser.add_argument("--base64", action="store_true", help="Print the PNG as base64 instead of writing a file")
    parser.add_argument("--no-mkdir", action="store_true", help="Do not create missing parent directories")
    parser.add_argument("--no-overwrite", action="store_true", help="Fail if the output file already exists")
    parser.add_argument("--verify", action="store_true", help="Decode the written file and check its pixels")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.epilog = f"Relative paths are resolved against ${OUTPUT_DIR_ENV_VAR} (default: current directory)."
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _settings_from_args(args: argparse.Namespace) -> ImageSettings:
    return ImageSettings(
        make_dirs=not args.no_mkdir,
        overwrite=not args.no_overwrite,
        verify=args.verify,
    )


def print_base64(args: argparse.Namespace) -> int:
    builder = ImageJobBuilder(_settings_from_args(args))
    data = builder.build(args.width, args.height, args.color)
    print(to_base64(data))
    return 0


def save_image(args: argparse.Namespace) -> int:
    builder = ImageJobBuilder(_settings_from_args(args))
    result = builder.save(args.width, args.height, args.color, args.filepath)
    print(result.message())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    if not args.base64 and not args.filepath:
        print("Missing file path or --base64. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        if args.base64:
            return print_base64(args)
        return save_image(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
