# palette_lut/run.py
from __future__ import annotations

"""
Run driver.

One run = one PaletteRegistry:
  plan_run -> for each file: load -> encode -> save -> materialize + save LUT

Any failure aborts the run. Encoded files written earlier in the same run are
removed and no LUT is written, since they point into a palette that will never
be emitted.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from .constants import LUT_HEIGHT, LUT_WIDTH
from .core_types import U8RGBA
from .decode import count_mismatches
from .encode import count_unique_colours, encode_image
from .errors import PaletteLutError, VerifyError
from .image_io import load_png_rgba, save_png_rgba
from .lut import materialize_lut
from .paths import RunLayout, plan_run
from .registry import PaletteRegistry
from .utils import (
    debug_log,
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)


@dataclass
class RunResult:
    """Outcome of a successful run."""

    layout: RunLayout
    registry: PaletteRegistry
    outputs: List[Path] = field(default_factory=list)
    lut_path: Optional[Path] = None
    lut_size: Tuple[int, int] = (0, 0)  # (width, height)


def process_image(
    src_path: Path,
    out_path: Path,
    registry: PaletteRegistry,
    debug: bool = False,
) -> Path:
    """
    Encode one file against the shared registry and write the result.

    Nothing is written if encoding fails, and a failed save leaves no file.
    """
    t_start = time.perf_counter()
    print_banner(src_path.name)

    rgba = load_png_rgba(src_path)
    t_loaded = time.perf_counter()
    height, width = rgba.shape[0], rgba.shape[1]

    before = registry.count
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{width}x{height}"),
                    ("Uniques", count_unique_colours(rgba)),
                    ("Palette", before),
                ]
            )
        )

    encoded = encode_image(rgba, registry)
    t_encoded = time.perf_counter()

    out_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        written = save_png_rgba(out_path, encoded)
    except OSError:
        # A half-written file must not survive as a stale output.
        out_path.unlink(missing_ok=True)
        raise
    t_saved = time.perf_counter()

    log(
        f"Wrote {written} | size={width}x{height} | new colours={registry.count - before:,}"
        f" | palette={registry.count:,}/{registry.capacity:,}"
    )
    if debug:
        debug_log(
            f"Total {format_total_duration_compact(t_saved - t_start)}  "
            f"(load={format_seconds_compact(t_loaded - t_start)}, "
            f"encode={format_seconds_compact(t_encoded - t_loaded)}, "
            f"save={format_seconds_compact(t_saved - t_encoded)})"
        )
    return written


def _remove_outputs(paths: List[Path]) -> None:
    for p in paths:
        try:
            p.unlink()
            warn(f"removed partial output {p}")
        except FileNotFoundError:
            pass


def verify_outputs(result: RunResult, debug: bool = False) -> None:
    """
    Reload every output plus the LUT and check each pixel decodes to its source.

    Raises VerifyError on the first file that does not round-trip.
    """
    if result.lut_path is None:
        raise ValueError("run produced no LUT to verify against")
    lut: U8RGBA = load_png_rgba(result.lut_path)
    width, height = result.registry.width, result.registry.height
    for src_path, out_path in zip(result.layout.files, result.outputs):
        source = load_png_rgba(src_path)
        encoded = load_png_rgba(out_path)
        mismatches = count_mismatches(source, encoded, lut, width, height)
        if mismatches:
            raise VerifyError(out_path, mismatches)
        if debug:
            pixels = int(np.prod(source.shape[:2]))
            debug_log(f"verified {out_path.name}: {pixels:,} px")
    log(f"Verified {len(result.outputs)} file(s) against {result.lut_path.name}")


def run_target(
    target: Path,
    *,
    width: int = LUT_WIDTH,
    height: int = LUT_HEIGHT,
    debug: bool = False,
    verify: bool = False,
) -> RunResult:
    """
    Process a PNG file or a directory tree of PNGs with a fresh registry.

    Raises TargetError, ImageReadError, CapacityExceeded or VerifyError.
    Outputs written before the failure are removed.
    """
    t_start = time.perf_counter()
    layout = plan_run(target)
    registry = PaletteRegistry(width, height)

    print_config_line(
        "run",
        [
            (
                "Target",
                layout.source_root.name
                if layout.is_directory
                else layout.files[0].name,
            ),
            ("Mode", "directory" if layout.is_directory else "file"),
            ("Files", len(layout.files)),
            ("LUT", f"{width}x{height}"),
        ],
        debug=False,
    )
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Output root", str(layout.output_root)),
                    ("LUT path", str(layout.lut_path)),
                ]
            )
        )
    if not layout.files:
        warn(f"no .png files under {layout.source_root}")

    result = RunResult(layout=layout, registry=registry)
    try:
        for src_path in layout.files:
            out_path = layout.output_path_for(src_path)
            result.outputs.append(process_image(src_path, out_path, registry, debug))
    except (PaletteLutError, OSError):
        _remove_outputs(result.outputs)
        raise

    lut = materialize_lut(registry)
    layout.lut_path.parent.mkdir(parents=True, exist_ok=True)
    result.lut_path = save_png_rgba(layout.lut_path, lut)
    result.lut_size = (lut.shape[1], lut.shape[0])

    print_banner(result.lut_path.name)
    log(
        f"Saved {result.lut_path} | size={lut.shape[1]}x{lut.shape[0]}"
        f" | colours={registry.count:,}/{registry.capacity:,}"
    )
    log(f"Total time {format_total_duration_compact(time.perf_counter() - t_start)}")

    if verify:
        verify_outputs(result, debug)
    return result


__all__ = ["RunResult", "process_image", "verify_outputs", "run_target"]
