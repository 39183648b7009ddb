# codebundle/rsp.py
"""
Response files: one reusable `bundle` command line, written next to the
intended output as <output>.rsp. Replay with `codebundle @<output>.rsp`.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Iterable, Optional

from codebundle.bundler import SORT_NAME
from codebundle.errors import BundleIOError, InvalidOutputPath


RSP_SUFFIX = ".rsp"


def rsp_path(output) -> Path:
    try:
        return Path(output).with_suffix(RSP_SUFFIX)
    except ValueError:
        # no file name to replace the suffix of, e.g. "." or "/"
        raise InvalidOutputPath(output) from None


def _q(value) -> str:
    return shlex.quote(str(value))


def format_command(languages: Iterable[str], output, note: bool = False,
                   sort: Optional[Iterable[str]] = None,
                   remove_empty_lines: bool = False,
                   author: Optional[str] = None) -> str:
    sort = list(sort or []) or [SORT_NAME]
    return (
        f"bundle --language {_q(','.join(languages))}"
        f" --output {_q(output)}"
        f" --note {bool(note)}"
        f" --sort {_q(','.join(sort))}"
        f" --remove-empty-lines {bool(remove_empty_lines)}"
        f" --author {_q(author or '')}"
    )


def write_rsp(languages: Iterable[str], output, note: bool = False,
              sort: Optional[Iterable[str]] = None,
              remove_empty_lines: bool = False,
              author: Optional[str] = None) -> Path:
    """
    Write the response file for a bundle request and return its path.
    Values are not validated here; the replayed `bundle` does that.
    """
    path = rsp_path(output)
    line = format_command(languages, output, note, sort,
                          remove_empty_lines, author)
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(line + "\n")
    except OSError as e:
        raise BundleIOError(path, e) from e
    return path
