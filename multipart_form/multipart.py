from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Callable
from email.message import Message

from multipart_form.errors import FileReadError
from multipart_form.fields import FileField, TextField

logger = logging.getLogger(__name__)

CONTENT_TYPE = "Content-Type"


def default_boundary() -> str:
    # Canonical hyphenated form, e.g. 3fa85f64-5717-4562-b3fc-2c963f66afa6
    return str(uuid.uuid4())


def boundary_from_header(value: str) -> str:
    """
    Return the boundary parameter of a multipart Content-Type header value.
    Raises ValueError if the header carries no boundary.
    """
    message = Message()
    message["content-type"] = value
    boundary = message.get_param("boundary")
    if isinstance(boundary, tuple):
        boundary = boundary[-1]
    if not boundary:
        raise ValueError(f"no boundary in Content-Type {value!r}")
    return str(boundary)


def _part_head(boundary: str, disposition: str, content_type: str, length: int) -> bytes:
    return (
        f"--{boundary}\r\n"
        f"Content-Disposition: {disposition}\r\n"
        f"Content-Type: {content_type}\r\n"
        f"Content-Length: {length}\r\n\r\n"
    ).encode("utf-8")


def encode_text_part(boundary: str, field: TextField) -> bytes:
    data = field.value.encode("utf-8")
    disposition = f'form-data; name="{field.name}"'
    return _part_head(boundary, disposition, field.content_type, len(data)) + data + b"\r\n"


def encode_file_part(boundary: str, field: FileField, content: bytes) -> bytes:
    disposition = f'form-data; name="{field.form_name}"; filename="{field.file_name}"'
    return _part_head(boundary, disposition, field.content_type, len(content)) + content + b"\r\n"


def _read_file(field: FileField) -> bytes:
    try:
        return field.source_path.read_bytes()
    except OSError as exc:
        logger.warning("Failed to read %s for field %r: %s", field.source_path, field.form_name, exc)
        raise FileReadError(field.source_path, field.form_name, exc.strerror or str(exc)) from exc


class MultiPartFormDataBuilder:
    """
    Accumulates text and file fields and serializes them into a
    multipart/form-data body for test requests.

    Files are always written before texts; each group keeps the order in
    which its fields were added. Every call to ``build`` picks a new
    boundary and leaves the builder untouched, so it can be built again.

    Example::

        builder = MultiPartFormDataBuilder()
        builder.add_file("tests/sample.png", "sample", "image/png", "sample.png")
        builder.add_text("name", "some_name")
        (name, value), body = builder.build()
    """

    def __init__(self, boundary_factory: Callable[[], str] | None = None) -> None:
        self.boundary_factory = boundary_factory or default_boundary
        self._files: list[FileField] = []
        self._texts: list[TextField] = []

    @property
    def files(self) -> tuple[FileField, ...]:
        return tuple(self._files)

    @property
    def texts(self) -> tuple[TextField, ...]:
        return tuple(self._texts)

    def add_text(
        self, name: str, value: str, content_type: str = "text/plain"
    ) -> MultiPartFormDataBuilder:
        """Add a text field. Returns the builder for chaining."""
        self._texts.append(TextField(name, value, content_type))
        logger.debug("Added text field %r (%d chars)", name, len(value))
        return self

    def add_file(
        self,
        path: str | os.PathLike[str],
        form_name: str,
        content_type: str,
        file_name: str,
    ) -> MultiPartFormDataBuilder:
        """
        Add a file field. The file is not touched until ``build`` runs.
        Returns the builder for chaining.
        """
        field = FileField(form_name, file_name, content_type, path)
        self._files.append(field)
        logger.debug("Added file field %r from %s", form_name, field.source_path)
        return self

    def build(self) -> tuple[tuple[str, str], bytes]:
        """
        Build the request.

        Returns:
            ``((header_name, header_value), body)`` where header_name is
            ``"Content-Type"`` and header_value is
            ``"multipart/form-data; boundary=..."``.

        Raises:
            FileReadError: A registered file is missing or unreadable.
        """
        boundary = self.boundary_factory()
        logger.debug(
            "Building multipart body with boundary %s (%d files, %d texts)",
            boundary,
            len(self._files),
            len(self._texts),
        )
        body_chunks: list[bytes] = []
        for field in self._files:
            body_chunks.append(encode_file_part(boundary, field, _read_file(field)))
        for field in self._texts:
            body_chunks.append(encode_text_part(boundary, field))
        body_chunks.append(f"--{boundary}--\r\n".encode("utf-8"))
        body = b"".join(body_chunks)
        logger.debug("Built multipart body of %d bytes", len(body))
        header = (CONTENT_TYPE, f"multipart/form-data; boundary={boundary}")
        return header, body

    def __len__(self) -> int:
        return len(self._files) + len(self._texts)

    def __repr__(self) -> str:
        return f"<MultiPartFormDataBuilder {len(self._files)} files, {len(self._texts)} texts>"
