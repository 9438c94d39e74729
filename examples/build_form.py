"""
Example: Build a multipart/form-data request body for a test.

Writes a small file, registers it together with two text fields and prints
the resulting header and body. Pass the pair to whatever test client you use,
for example with Flask's test client:

    client.post("/upload", headers=[header], data=body)
"""

import logging
import tempfile
from pathlib import Path

import click
from multipart_form import MultiPartFormDataBuilder, FileReadError


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "hello.txt"
        path.write_bytes(b"hello multipart")

        builder = MultiPartFormDataBuilder()
        builder.add_file(path, "file", "text/plain", "hello.txt")
        builder.add_text("name", "some_name").add_text("lang", "python")
        header, body = builder.build()

        click.secho(f"{header[0]}: {header[1]}", fg="green")
        click.echo(body.decode("utf-8"))

    # The temporary directory is gone, so building again fails.
    try:
        builder.build()
    except FileReadError as exc:
        click.secho(f"Build failed: {exc}", fg="red")


if __name__ == "__main__":
    main()
