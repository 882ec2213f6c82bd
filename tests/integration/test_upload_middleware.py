"""Integration tests for UploadMiddleware."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from neo_uploads import UploadMiddleware, get_upload_result, require_upload_result
from neo_uploads.core.exceptions import UploadConfigurationError
from neo_uploads.infrastructure import StarletteMultipartParser


@pytest.fixture
def client(base_dir, temp_dir):
    app = FastAPI()
    app.add_middleware(
        UploadMiddleware,
        path="uploads",
        options={"maxFileSize": 5, "randomName": False},
        include_paths=["/files"],
        base_dir=base_dir,
        parser=StarletteMultipartParser(temp_dir=temp_dir),
    )

    @app.post("/files")
    async def receive(request: Request):
        return require_upload_result(request).to_dict()

    @app.post("/other")
    async def other(request: Request):
        return {"uploads": get_upload_result(request) is not None}

    @app.get("/files")
    async def list_files(request: Request):
        return {"uploads": get_upload_result(request) is not None}

    return TestClient(app)


def test_result_reaches_next_handler(client, base_dir):
    response = client.post(
        "/files",
        files=[
            ("a", ("a.txt", b"abc", "text/plain")),
            ("b", ("b.txt", b"0123456789", "text/plain")),
        ],
    )

    assert response.status_code == 200
    body = response.json()
    assert [f["fileName"] for f in body["files"]] == ["a.txt"]
    assert body["errors"][0]["file"] == "b.txt"
    assert (base_dir / "uploads" / "a.txt").exists()


def test_wrong_content_type_is_plain_text_422(client, base_dir):
    response = client.post("/files", content=b"{}", headers={"content-type": "application/json"})

    assert response.status_code == 422
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Request content-type must be multipart/form-data with a boundary"
    assert not (base_dir / "uploads").exists()


def test_no_files_is_422(client):
    response = client.post("/files", data={"field": "value"}, files={"empty": ("", b"", "application/octet-stream")})

    assert response.status_code == 422
    assert response.text == "No files were uploaded with this request"


def test_other_paths_pass_through(client):
    response = client.post("/other", json={})
    assert response.json() == {"uploads": False}


def test_other_methods_pass_through(client):
    response = client.get("/files")
    assert response.json() == {"uploads": False}


def test_include_paths_is_required():
    with pytest.raises(TypeError):
        UploadMiddleware(FastAPI())


def test_empty_include_paths_rejected():
    with pytest.raises(UploadConfigurationError):
        UploadMiddleware(FastAPI(), include_paths=[])


def test_single_path_string(tmp_path):
    middleware = UploadMiddleware(FastAPI(), include_paths="/files", base_dir=tmp_path)
    assert middleware.include_paths == ("/files",)


def test_unlisted_json_endpoint_untouched(client):
    response = client.post("/other", json={"name": "value"})
    assert response.status_code == 200
