# palette_lut/paths.py
from __future__ import annotations

"""
Input discovery and output layout.

Directory target  photos/            -> photos_processed/<same relative paths>
                                        photos_processed/photos_lut_default.png
Single file       photos/a.png       -> photos/a_processed.png
                                        photos/a_lut_default.png
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .constants import LUT_SUFFIX, PNG_SUFFIX, PROCESSED_SUFFIX
from .errors import ImageReadError, TargetError
from .utils import warn


@dataclass(frozen=True)
class RunLayout:
    """Where a run reads from and writes to."""

    source_root: Path
    output_root: Path
    files: List[Path]
    lut_path: Path
    is_directory: bool

    def output_path_for(self, src: Path) -> Path:
        """Output path for one source file (parent folders not created)."""
        if not self.is_directory:
            return src.with_name(f"{src.stem}{PROCESSED_SUFFIX}{PNG_SUFFIX}")
        return self.output_root / src.relative_to(self.source_root)


def is_output_artifact(path: Path) -> bool:
    """True for files this tool wrote on an earlier run."""
    stem = path.stem
    return stem.endswith(PROCESSED_SUFFIX) or stem.endswith(LUT_SUFFIX)


def find_png_files(root: Path) -> List[Path]:
    """
    All *.png files under root, recursively, skipping earlier outputs.
    Sorted by relative path (case-insensitive) so runs are reproducible.
    """
    candidates = sorted(
        (p for p in root.rglob("*") if p.is_file() and p.suffix.lower() == PNG_SUFFIX),
        key=lambda p: p.relative_to(root).as_posix().lower(),
    )
    files: List[Path] = []
    for p in candidates:
        if is_output_artifact(p):
            rel = p.relative_to(root).as_posix()
            warn(f"skipped {rel} (name looks like an earlier output)")
            continue
        files.append(p)
    return files


def plan_run(target: Path) -> RunLayout:
    """
    Resolve a CLI target into a RunLayout.

    Raises TargetError if the target does not exist or is neither a file nor a
    directory, and ImageReadError for a single file without a .png suffix.
    """
    target = target.expanduser().resolve()
    if not target.exists():
        raise TargetError(target, "not found")

    name = target.stem if target.is_file() else target.name

    if target.is_dir():
        output_root = target.parent / f"{name}{PROCESSED_SUFFIX}"
        return RunLayout(
            source_root=target,
            output_root=output_root,
            files=find_png_files(target),
            lut_path=output_root / f"{name}{LUT_SUFFIX}{PNG_SUFFIX}",
            is_directory=True,
        )

    if target.is_file():
        if target.suffix.lower() != PNG_SUFFIX:
            raise ImageReadError(target, "only .png files are supported")
        return RunLayout(
            source_root=target.parent,
            output_root=target.parent,
            files=[target],
            lut_path=target.parent / f"{name}{LUT_SUFFIX}{PNG_SUFFIX}",
            is_directory=False,
        )

    raise TargetError(target, "neither a file nor a directory")


__all__ = ["RunLayout", "is_output_artifact", "find_png_files", "plan_run"]
