# codebundle/errors.py
"""
Error kinds raised by the bundling pipeline.

The CLI catches CodeBundleError at the command boundary; library code
only raises.
"""

from __future__ import annotations


class CodeBundleError(Exception):
    """Base class for every failure the CLI reports to the user."""


class UnsupportedLanguage(CodeBundleError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unsupported language: {token!r}")


class InvalidOutputPath(CodeBundleError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Invalid output path: {path}")


class TraversalError(CodeBundleError):
    def __init__(self, path, cause: BaseException | None = None):
        self.path = path
        self.cause = cause
        msg = f"Cannot read directory {path}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class BundleIOError(CodeBundleError):
    def __init__(self, path, cause: BaseException | None = None):
        self.path = path
        self.cause = cause
        msg = f"I/O error on {path}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)
