#!/usr/bin/env python3
"""
lut_encode.py
Encode PNG images as palette-LUT coordinates and write the shared LUT image.

Usage:
  python lut_encode.py TARGET [--verify] [--debug]

Input:
  A single .png file, or a folder scanned recursively for .png files.
  Only PNG is accepted: lossy formats would break exact colour matching.

Output:
  Folder  : <name>_processed/ next to the folder, same sub-folder layout,
            plus <name>_processed/<name>_lut_default.png
  File    : <stem>_processed.png and <stem>_lut_default.png next to the file

Encoding:
  R/G hold the colour's LUT slot (column/width, row/height over 0..255),
  B is 0, alpha is copied from the source. The LUT is 256x1 while the run has
  at most 256 colours, 256x256 otherwise. Unused slots are black.

Exit status:
  0 success (or no TARGET given), 1 run failed, 2 bad TARGET.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from palette_lut.errors import PaletteLutError, TargetError
from palette_lut.run import run_target
from palette_lut.utils import enable_line_buffered_stdout, error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-lut",
        description="Encode PNG colours as LUT coordinates and emit the shared LUT.",
    )
    parser.add_argument(
        "target", nargs="?", type=Path, default=None, help="PNG file or folder"
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Reload outputs and check every pixel decodes back to its source colour",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose per-file details")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point. Exits with 1 on run failure, 2 on a bad target."""
    enable_line_buffered_stdout()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_usage()
        return

    try:
        run_target(args.target, debug=args.debug, verify=args.verify)
    except TargetError as e:
        error(str(e))
        sys.exit(2)
    except (PaletteLutError, OSError) as e:
        error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
