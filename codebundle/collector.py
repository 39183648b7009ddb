# codebundle/collector.py
"""
Recursive source file discovery.

Reserved build-artifact directories are matched by whole path segment,
case-sensitively, so `bindings/` or `Debug/` are still walked.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional

from codebundle.errors import TraversalError


EXCLUDED_DIRS = ("bin", "debug")


def is_excluded(path, root=None) -> bool:
    """
    True if any directory segment of `path` is a reserved name.

    With `root`, only the part of the path below the root is inspected.
    """
    path = Path(path)
    if root is not None:
        try:
            path = path.relative_to(root)
        except ValueError:
            pass
    return any(part in EXCLUDED_DIRS for part in path.parent.parts)


def collect_files(extensions: Iterable[str], root,
                  exclude: Optional[Iterable] = None) -> List[Path]:
    """
    Walk `root` and return absolute paths of files whose name ends with one
    of `extensions`. Files listed in `exclude` are skipped.
    """
    exts = tuple(extensions)
    root = Path(root).resolve()
    skip = {Path(p).resolve() for p in (exclude or [])}

    if not root.is_dir():
        raise TraversalError(root, NotADirectoryError(f"not a directory: {root}"))

    def _raise(err: OSError):
        raise TraversalError(err.filename or root, err)

    found = {}
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDED_DIRS)
        for name in filenames:
            if not exts or not name.endswith(exts):
                continue
            path = Path(dirpath) / name
            if path in skip:
                continue
            found[path] = None

    return list(found)
