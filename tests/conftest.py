"""Pytest configuration and fixtures for neo-uploads tests."""

import os

# Leave log capture to pytest instead of the package's console handler
os.environ.setdefault("NEO_UPLOADS_CONFIGURE_LOGGING", "false")

from pathlib import Path
from typing import List

import pytest
from starlette.requests import Request

from neo_uploads.core.entities import UploadedPart
from neo_uploads.infrastructure import LocalFileStore


MULTIPART_CONTENT_TYPE = "multipart/form-data; boundary=----neo-boundary"


class StaticParser:
    """Multipart parser returning a fixed list of parts."""

    def __init__(self, parts: List[UploadedPart]):
        self.parts = parts
        self.calls = 0

    async def parse(self, request: Request) -> List[UploadedPart]:
        self.calls += 1
        return list(self.parts)


def build_request(content_type=MULTIPART_CONTENT_TYPE, path="/upload", method="POST") -> Request:
    """Build a bare Starlette request with the given content-type."""
    headers = []
    if content_type is not None:
        headers.append((b"content-type", content_type.encode("latin-1")))
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": headers,
        "scheme": "http",
        "server": ("testserver", 80),
    }
    return Request(scope)


@pytest.fixture
def base_dir(tmp_path) -> Path:
    """Root directory the upload path is resolved against."""
    root = tmp_path / "app"
    root.mkdir()
    return root


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Directory holding spooled part files."""
    spool = tmp_path / "spool"
    spool.mkdir()
    return spool


@pytest.fixture
def make_part(temp_dir):
    """Factory creating an uploaded part backed by a temporary file."""
    counter = {"n": 0}

    def _make_part(field_name: str, original_name: str, size: int = 3, content: bytes = None) -> UploadedPart:
        counter["n"] += 1
        data = content if content is not None else b"x" * size
        temp_path = temp_dir / f"part-{counter['n']}.tmp"
        temp_path.write_bytes(data)
        return UploadedPart(field_name=field_name, original_name=original_name, temp_path=temp_path)

    return _make_part


@pytest.fixture
def store() -> LocalFileStore:
    return LocalFileStore()


@pytest.fixture
def sequential_ids():
    """Deterministic replacement for uuid4 in stored names."""
    counter = {"n": 0}

    def _next_id():
        counter["n"] += 1
        return f"id{counter['n']}"

    return _next_id


@pytest.fixture
def static_parser():
    """Factory for a parser that yields the given parts."""
    return StaticParser


@pytest.fixture
def make_request():
    """Factory for bare multipart requests."""
    return build_request
