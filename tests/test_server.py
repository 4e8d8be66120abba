import asyncio
import contextlib
import ipaddress
import socket

import aiohttp
import pytest
from aiohttp.test_utils import TestClient, TestServer

from filesync.server import DEFAULT_PORT, HttpServer, local_ip, main


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_local_ip_is_ipv4_address():
    assert ipaddress.ip_address(local_ip()).version == 4


def test_address_uses_given_host_and_default_port():
    server = HttpServer(host="127.0.0.1")
    assert server.address() == ("127.0.0.1", 18005)
    assert DEFAULT_PORT == server.port


def test_address_falls_back_to_local_ip():
    host, port = HttpServer(port=4000).address()
    assert host == local_ip()
    assert port == 4000


@pytest.mark.asyncio
async def test_build_app_adds_cors_headers(tmp_path):
    app = HttpServer(upload_dir=tmp_path).build_app()
    async with TestClient(TestServer(app)) as client:
        response = await client.get("/health")
        assert response.status == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"


@pytest.mark.asyncio
async def test_build_app_answers_preflight(tmp_path):
    app = HttpServer(upload_dir=tmp_path).build_app()
    async with TestClient(TestServer(app)) as client:
        response = await client.options(
            "/upload",
            headers={"Origin": "http://localhost", "Access-Control-Request-Method": "POST"},
        )
        assert response.status == 200
        assert "POST" in response.headers["Access-Control-Allow-Methods"]


@pytest.mark.asyncio
async def test_build_app_rejects_oversized_body(tmp_path):
    upload_dir = tmp_path / "uploads"
    app = HttpServer(upload_dir=upload_dir, max_body_size=10).build_app()
    async with TestClient(TestServer(app)) as client:
        response = await client.post("/upload", data=b"x" * 100)
        assert response.status == 413
    assert not upload_dir.exists()


@pytest.mark.asyncio
async def test_build_app_keeps_not_found_fallback(tmp_path):
    app = HttpServer(upload_dir=tmp_path).build_app()
    async with TestClient(TestServer(app)) as client:
        response = await client.get("/missing")
        assert response.status == 404
        assert (await response.json())["success"] is False


@pytest.mark.asyncio
async def test_run_serves_until_cancelled(tmp_path):
    port = _free_port()
    server = HttpServer(host="127.0.0.1", port=port, upload_dir=tmp_path)
    task = asyncio.create_task(server.run())
    status = None
    payload = None
    try:
        async with aiohttp.ClientSession() as session:
            for _ in range(100):
                try:
                    async with session.get(f"http://127.0.0.1:{port}/health") as response:
                        status = response.status
                        payload = await response.json()
                        break
                except aiohttp.ClientConnectionError:
                    await asyncio.sleep(0.05)
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
    assert status == 200
    assert payload["message"] == "Server is ready to accept connection"


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit) as excinfo:
        main(["--port", "not-a-number"])
    assert excinfo.value.code == 2