import pytest
from aiohttp.test_utils import TestClient, TestServer

from filesync.handlers import create_app, default_upload_directory, path_is_valid

BOUNDARY = "testboundary"


def _client(upload_dir):
    return TestClient(TestServer(create_app(upload_dir)))


def _multipart(filename, content=b"hello", name="file"):
    disposition = f'form-data; name="{name}"'
    if filename is not None:
        disposition += f'; filename="{filename}"'
    body = (
        f"--{BOUNDARY}\r\n"
        f"Content-Disposition: {disposition}\r\n"
        "Content-Type: application/octet-stream\r\n\r\n"
    ).encode() + content + f"\r\n--{BOUNDARY}--\r\n".encode()
    headers = {"Content-Type": f"multipart/form-data; boundary={BOUNDARY}"}
    return body, headers


@pytest.mark.parametrize(
    "path, expected",
    [
        ("file.txt", True),
        ("dir/", True),
        ("a/b", False),
        ("../x", False),
        ("/etc/passwd", False),
        ("", False),
        ("..", False),
        (".", False),
        ("./file.txt", False),
    ],
)
def test_path_is_valid(path, expected):
    assert path_is_valid(path) is expected


def test_default_upload_directory_is_named_after_app():
    assert default_upload_directory().name == "filesync"


@pytest.mark.asyncio
async def test_base_url_has_no_route(tmp_path):
    async with _client(tmp_path) as client:
        response = await client.get("/")
        assert response.status == 404


@pytest.mark.asyncio
async def test_not_found_handler(tmp_path):
    async with _client(tmp_path) as client:
        response = await client.get("/not-found-error")
        assert response.status == 404
        assert await response.json() == {
            "success": False,
            "message": "The requested resource does not exist on this server!",
        }


@pytest.mark.asyncio
async def test_health_check(tmp_path):
    async with _client(tmp_path) as client:
        response = await client.get("/health")
        assert response.status == 200
        assert await response.json() == {
            "success": True,
            "message": "Server is ready to accept connection",
        }


@pytest.mark.asyncio
@pytest.mark.parametrize("route", ["/upload", "/health"])
async def test_upload_saves_file(tmp_path, route):
    upload_dir = tmp_path / "uploads"
    body, headers = _multipart("greeting.txt", b"hello there")
    async with _client(upload_dir) as client:
        response = await client.post(route, data=body, headers=headers)
        assert response.status == 200
        assert await response.json() == {"Success": True, "message": "file saved"}
    assert (upload_dir / "greeting.txt").read_bytes() == b"hello there"


@pytest.mark.asyncio
@pytest.mark.parametrize("filename", ["..", "a/b.txt"])
async def test_upload_rejects_traversal(tmp_path, filename):
    upload_dir = tmp_path / "uploads"
    body, headers = _multipart(filename)
    async with _client(upload_dir) as client:
        response = await client.post("/upload", data=body, headers=headers)
        assert response.status == 400
        assert await response.text() == "Invalid path"
    assert not upload_dir.exists()


@pytest.mark.asyncio
async def test_upload_skips_fields_without_file_name(tmp_path):
    upload_dir = tmp_path / "uploads"
    body, headers = _multipart(None, b"just a note", name="note")
    async with _client(upload_dir) as client:
        response = await client.post("/upload", data=body, headers=headers)
        assert response.status == 200
    assert not upload_dir.exists()


@pytest.mark.asyncio
async def test_get_file_streams_download(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"line one\nline two\n")
    async with _client(tmp_path / "uploads") as client:
        response = await client.get("/api/file", params={"file_path": str(source)})
        assert response.status == 200
        assert await response.read() == b"line one\nline two\n"
        assert response.headers["Content-Type"] == "text/plain"
        assert response.headers["Content-Disposition"] == 'attachment; filename=""notes.txt""'


@pytest.mark.asyncio
async def test_get_file_missing(tmp_path):
    async with _client(tmp_path) as client:
        response = await client.get(
            "/api/file", params={"file_path": str(tmp_path / "absent.txt")}
        )
        assert response.status == 404
        assert await response.text() == "File not found:"


@pytest.mark.asyncio
async def test_get_file_unknown_mime(tmp_path):
    source = tmp_path / "blob.zzqq"
    source.write_bytes(b"\x00\x01")
    async with _client(tmp_path) as client:
        response = await client.get("/api/file", params={"file_path": str(source)})
        assert response.status == 400
        assert await response.text() == "MIME Type couldn't be determined"


@pytest.mark.asyncio
async def test_get_file_requires_query(tmp_path):
    async with _client(tmp_path) as client:
        response = await client.get("/api/file")
        assert response.status == 400