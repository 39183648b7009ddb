# codebundle/languages.py
"""
Language token -> file extension resolution.
"""

from __future__ import annotations

from typing import Iterable, List

from codebundle.errors import UnsupportedLanguage


ALL_LANGUAGES = "all"

LANGUAGE_EXTENSIONS = {
    "csharp": ".cs",
    "java": ".java",
    "python": ".py",
    "javascript": ".js",
    "cpp": ".cpp",
}


def split_csv(values: Iterable[str] | None) -> List[str]:
    """
    Flatten repeated and comma-separated option values.

        ["python,java", " cpp "] -> ["python", "java", "cpp"]
    """
    out = []
    for v in values or []:
        for part in v.split(","):
            part = part.strip()
            if part:
                out.append(part)
    return out


def get_extension(token: str) -> str:
    try:
        return LANGUAGE_EXTENSIONS[token.strip().lower()]
    except KeyError:
        raise UnsupportedLanguage(token) from None


def resolve_extensions(tokens: Iterable[str]) -> List[str]:
    """
    Resolve language tokens to extensions.

    `all` anywhere in the list yields every known extension. Otherwise each
    token is resolved in order; duplicates are dropped and the first bad
    token aborts the whole resolution.
    """
    tokens = list(tokens)
    if not tokens:
        raise UnsupportedLanguage("")

    if any(t.strip().lower() == ALL_LANGUAGES for t in tokens):
        return list(LANGUAGE_EXTENSIONS.values())

    exts = []
    for t in tokens:
        ext = get_extension(t)
        if ext not in exts:
            exts.append(ext)
    return exts
