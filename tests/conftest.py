"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from multipart_form import MultiPartFormDataBuilder

SAMPLE_PNG = Path(__file__).parent / "sample.png"


@pytest.fixture
def sample_png():
    """Path to the PNG fixture shipped with the tests."""
    return SAMPLE_PNG


@pytest.fixture
def text_file(tmp_path):
    """Create a small text file on disk."""
    path = tmp_path / "notes.txt"
    path.write_bytes(b"hello\r\nworld")
    return path


@pytest.fixture
def fixed_builder():
    """Builder with a constant boundary so bodies can be compared exactly."""
    return MultiPartFormDataBuilder(boundary_factory=lambda: "BOUNDARY")
