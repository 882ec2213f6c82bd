"""Tests for StarletteMultipartParser against raw multipart bodies."""

import pytest
from starlette.requests import Request

from neo_uploads.core.exceptions import MalformedMultipartError
from neo_uploads.infrastructure import StarletteMultipartParser

BOUNDARY = "neo-boundary"


def multipart_body(*sections) -> bytes:
    chunks = []
    for disposition, content in sections:
        chunks.append(f"--{BOUNDARY}\r\n".encode())
        chunks.append(f"Content-Disposition: form-data; {disposition}\r\n".encode())
        if "filename" in disposition:
            chunks.append(b"Content-Type: application/octet-stream\r\n")
        chunks.append(b"\r\n")
        chunks.append(content)
        chunks.append(b"\r\n")
    chunks.append(f"--{BOUNDARY}--\r\n".encode())
    return b"".join(chunks)


def request_with_body(body: bytes) -> Request:
    sent = {"done": False}

    async def receive():
        if sent["done"]:
            return {"type": "http.disconnect"}
        sent["done"] = True
        return {"type": "http.request", "body": body, "more_body": False}

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/upload",
        "root_path": "",
        "query_string": b"",
        "headers": [
            (b"content-type", f"multipart/form-data; boundary={BOUNDARY}".encode()),
            (b"content-length", str(len(body)).encode()),
        ],
        "scheme": "http",
        "server": ("testserver", 80),
    }
    return Request(scope, receive)


@pytest.fixture
def parser(temp_dir):
    return StarletteMultipartParser(temp_dir=temp_dir)


async def test_spools_file_parts_in_order(parser, temp_dir):
    body = multipart_body(
        ('name="doc"; filename="report.pdf"', b"%PDF-data"),
        ('name="title"', b"quarterly"),
        ('name="doc"; filename="notes.txt"', b"notes"),
    )

    parts = await parser.parse(request_with_body(body))

    assert [(p.field_name, p.original_name) for p in parts] == [
        ("doc", "report.pdf"),
        ("doc", "notes.txt"),
    ]
    assert parts[0].temp_path.parent == temp_dir
    assert parts[0].temp_path.read_bytes() == b"%PDF-data"
    assert parts[1].temp_path.read_bytes() == b"notes"
    assert parts[0].temp_path != parts[1].temp_path


async def test_ignores_empty_file_inputs(parser):
    body = multipart_body(('name="avatar"; filename=""', b""))

    assert await parser.parse(request_with_body(body)) == []


async def test_text_only_body_has_no_parts(parser):
    body = multipart_body(('name="title"', b"hello"))

    assert await parser.parse(request_with_body(body)) == []


async def test_too_many_files_is_malformed(temp_dir):
    parser = StarletteMultipartParser(temp_dir=temp_dir, max_files=1)
    body = multipart_body(
        ('name="a"; filename="a.txt"', b"a"),
        ('name="b"; filename="b.txt"', b"b"),
    )

    with pytest.raises(MalformedMultipartError):
        await parser.parse(request_with_body(body))


async def test_spool_failure_removes_spooled_parts(parser, temp_dir, mocker):
    spool = StarletteMultipartParser._spool
    spooled = []

    async def spool_then_fail(self, upload):
        if spooled:
            raise OSError("disk full")
        path = await spool(self, upload)
        spooled.append(path)
        return path

    mocker.patch.object(StarletteMultipartParser, "_spool", spool_then_fail)
    body = multipart_body(
        ('name="a"; filename="a.txt"', b"a"),
        ('name="b"; filename="b.txt"', b"b"),
    )

    with pytest.raises(OSError):
        await parser.parse(request_with_body(body))

    assert len(spooled) == 1
    assert not spooled[0].exists()
    assert list(temp_dir.iterdir()) == []


async def test_interrupted_spool_leaves_no_file(parser, temp_dir, mocker):
    upload = mocker.Mock()
    upload.seek = mocker.AsyncMock()
    upload.read = mocker.AsyncMock(side_effect=[b"partial", OSError("connection reset")])

    with pytest.raises(OSError):
        await parser._spool(upload)

    assert list(temp_dir.iterdir()) == []
