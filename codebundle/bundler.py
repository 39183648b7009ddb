# codebundle/bundler.py
"""
Bundling pipeline
=================

validate output -> collect -> order -> write

Each source file's lines are written as one block followed by a line
terminator. Output is truncated on open; a failure mid-way leaves the
partial bundle on disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from tqdm import tqdm

from codebundle.collector import collect_files, is_excluded
from codebundle.errors import BundleIOError, InvalidOutputPath


SORT_NAME = "name"
SORT_TYPE = "type"
SORT_MODES = (SORT_NAME, SORT_TYPE)

ENCODING = "utf-8"


# ============================================================
# Ordering
# ============================================================

def sort_mode(values: Optional[Iterable[str]]) -> str:
    values = [v.strip().lower() for v in (values or [])]
    for v in values:
        if v not in SORT_MODES:
            raise ValueError(f"unknown sort mode {v!r} (expected name or type)")
    return SORT_TYPE if SORT_TYPE in values else SORT_NAME


def order_files(files: Iterable[Path], mode: str = SORT_NAME) -> List[Path]:
    if mode == SORT_TYPE:
        return sorted(files, key=lambda p: (Path(p).suffix, str(p)))
    return sorted(files, key=str)


# ============================================================
# Output validation
# ============================================================

def validate_output_path(output) -> Path:
    """
    Return the absolute output path, or raise InvalidOutputPath when it
    is empty or lies under a reserved build-artifact directory.
    """
    if output is None or str(output).strip() == "":
        raise InvalidOutputPath(output)
    full = Path(output).expanduser().absolute()
    if is_excluded(full):
        raise InvalidOutputPath(output)
    return full


# ============================================================
# Writing
# ============================================================

def read_lines(path: Path) -> List[str]:
    # utf-8-sig drops a BOM; universal newlines fold \r\n and \r to \n
    with open(path, "r", encoding="utf-8-sig") as fh:
        text = fh.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def display_path(path: Path, root=None) -> str:
    if root is not None:
        try:
            return Path(path).relative_to(root).as_posix()
        except ValueError:
            pass
    return str(path)


def write_bundle(files: Iterable[Path], output, note: bool = False,
                 remove_empty_lines: bool = False, author: Optional[str] = None,
                 root=None, progress: bool = False) -> int:
    """
    Concatenate `files` into `output`, in the given order.

    Returns the number of files written.
    """
    files = list(files)

    try:
        out = open(output, "w", encoding=ENCODING)
    except OSError as e:
        raise BundleIOError(output, e) from e

    with out:
        try:
            if author:
                out.write(f"# Author: {author}\n")

            for path in tqdm(files, desc="bundling", unit="file",
                             disable=None if progress else True):
                try:
                    lines = read_lines(path)
                except (OSError, UnicodeDecodeError) as e:
                    raise BundleIOError(path, e) from e

                if note:
                    out.write(f"# Source: {display_path(path, root)}\n")
                if remove_empty_lines:
                    lines = [line for line in lines if line.strip()]
                out.write("\n".join(lines) + "\n")
        except OSError as e:
            raise BundleIOError(output, e) from e

    return len(files)


# ============================================================
# Pipeline
# ============================================================

@dataclass
class BundleRequest:
    extensions: List[str]
    output: Path
    root: Path
    note: bool = False
    sort: str = SORT_NAME
    remove_empty_lines: bool = False
    author: Optional[str] = None


@dataclass
class BundleResult:
    output: Path
    files: List[Path]
    count: int


def bundle(req: BundleRequest, progress: bool = False) -> BundleResult:
    output = validate_output_path(req.output)
    root = Path(req.root).resolve()

    found = collect_files(req.extensions, root, exclude=[output])
    files = order_files(found, req.sort)

    count = write_bundle(
        files, output,
        note=req.note,
        remove_empty_lines=req.remove_empty_lines,
        author=req.author,
        root=root,
        progress=progress,
    )
    return BundleResult(output, files, count)
