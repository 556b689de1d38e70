import pytest
from fastapi.testclient import TestClient

from app.services import upload_service


@pytest.fixture(name="uploads")
def uploads_fixture(monkeypatch):
    calls: list[dict] = []

    def fake_upload(path: str, file_bytes: bytes, content_type: str) -> str:
        calls.append({"path": path, "size": len(file_bytes), "content_type": content_type})
        return f"https://cdn.example.com/storage/v1/object/public/assets/{path}"

    monkeypatch.setattr(upload_service, "upload_to_storage", fake_upload)
    return calls


def test_upload_image(client: TestClient, uploads):
    response = client.post(
        "/api/upload",
        files={"file": ("photo.png", b"\x89PNG fake bytes", "image/png")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["publicId"].startswith("computer-accessories/product-")
    assert body["imageUrl"].endswith(f"{body['publicId']}.png")
    assert uploads == [
        {"path": f"{body['publicId']}.png", "size": 15, "content_type": "image/png"}
    ]


def test_upload_without_file_is_rejected(client: TestClient, uploads):
    response = client.post("/api/upload")

    assert response.status_code == 400
    assert response.json()["detail"] == "No file provided"
    assert uploads == []


def test_upload_rejects_unsupported_type(client: TestClient, uploads):
    response = client.post(
        "/api/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert uploads == []


def test_upload_rejects_oversized_file(client: TestClient, uploads, monkeypatch):
    monkeypatch.setattr(
        "app.routers.upload.service", upload_service.UploadService(max_bytes=4)
    )

    response = client.post(
        "/api/upload",
        files={"file": ("big.jpg", b"12345", "image/jpeg")},
    )

    assert response.status_code == 413
    assert uploads == []


def test_storage_failure_returns_500(client: TestClient, monkeypatch):
    def broken_upload(path, file_bytes, content_type):
        raise RuntimeError("bucket not found")

    monkeypatch.setattr(upload_service, "upload_to_storage", broken_upload)

    response = client.post(
        "/api/upload",
        files={"file": ("photo.webp", b"data", "image/webp")},
    )

    assert response.status_code == 500
    assert response.json()["detail"] == {
        "message": "Failed to upload image",
        "details": "bucket not found",
    }


def test_oversized_upload_is_read_only_up_to_the_limit(client: TestClient, uploads, monkeypatch):
    received: list[int] = []

    class RecordingUploadService(upload_service.UploadService):
        def upload_image(self, content_type, file_bytes):
            received.append(len(file_bytes))
            return super().upload_image(content_type, file_bytes)

    monkeypatch.setattr(
        "app.routers.upload.service", RecordingUploadService(max_bytes=4)
    )

    response = client.post(
        "/api/upload",
        files={"file": ("huge.png", b"x" * 1_000_000, "image/png")},
    )

    assert response.status_code == 413
    assert received == [5]
    assert uploads == []
