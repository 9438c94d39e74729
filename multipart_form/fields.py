from __future__ import annotations

import os
from pathlib import Path


class TextField:
    """A named text value, sent as its UTF-8 bytes."""

    __slots__ = ("_name", "_value", "_content_type")

    def __init__(self, name: str, value: str, content_type: str = "text/plain") -> None:
        self._name = name
        self._value = value
        self._content_type = content_type

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def content_type(self) -> str:
        return self._content_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextField):
            return NotImplemented
        return (self._name, self._value, self._content_type) == (
            other._name,
            other._value,
            other._content_type,
        )

    def __hash__(self) -> int:
        return hash((self._name, self._value, self._content_type))

    def __repr__(self) -> str:
        return f"<TextField {self._name!r} ({len(self._value)} chars)>"


class FileField:
    """
    A file upload. Only the path is kept here; the bytes are read when the
    body is built, so the file may change (or appear) after registration.
    """

    __slots__ = ("_form_name", "_file_name", "_content_type", "_source_path")

    def __init__(
        self,
        form_name: str,
        file_name: str,
        content_type: str,
        source_path: str | os.PathLike[str],
    ) -> None:
        self._form_name = form_name
        self._file_name = file_name
        self._content_type = content_type
        self._source_path = Path(source_path)

    @property
    def form_name(self) -> str:
        return self._form_name

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def source_path(self) -> Path:
        return self._source_path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileField):
            return NotImplemented
        return (
            self._form_name,
            self._file_name,
            self._content_type,
            self._source_path,
        ) == (
            other._form_name,
            other._file_name,
            other._content_type,
            other._source_path,
        )

    def __hash__(self) -> int:
        return hash((self._form_name, self._file_name, self._content_type, self._source_path))

    def __repr__(self) -> str:
        return f"<FileField {self._form_name!r} {self._file_name!r} from {str(self._source_path)!r}>"
