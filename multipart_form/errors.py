from __future__ import annotations

from pathlib import Path


class MultipartFormError(Exception):
    """Base error for multipart_form."""


class FileReadError(MultipartFormError, OSError):
    """Raised when a registered file cannot be read while building a body."""

    def __init__(self, path: Path, form_name: str, reason: str) -> None:
        super().__init__(f"cannot read file {str(path)!r} for field {form_name!r}: {reason}")
        self.path = path
        self.form_name = form_name
