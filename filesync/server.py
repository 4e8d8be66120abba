"""The file-transfer HTTP server bound to the device's local network address."""

from __future__ import annotations

import argparse
import asyncio
import logging
import socket
from dataclasses import dataclass
from pathlib import Path

from aiohttp import web

from filesync.handlers import create_app

DEFAULT_PORT = 18005
DEFAULT_MAX_BODY_SIZE = 10 * 1024 * 1024 * 1024
UNSPECIFIED_ADDRESS = "0.0.0.0"

_ALLOWED_METHODS = "GET, POST"
_PROBE_ADDRESS = ("10.255.255.255", 1)

logger = logging.getLogger(__name__)


def local_ip() -> str:
    """The address of this machine on its local network, or the unspecified address."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
            probe.connect(_PROBE_ADDRESS)
            address = probe.getsockname()[0]
    except OSError:
        return UNSPECIFIED_ADDRESS
    return address or UNSPECIFIED_ADDRESS


async def _add_cors_headers(request: web.Request, response: web.StreamResponse) -> None:
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = _ALLOWED_METHODS
    response.headers["Access-Control-Allow-Headers"] = "*"


@web.middleware
async def _preflight(request: web.Request, handler) -> web.StreamResponse:
    if request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers:
        return web.Response(status=200)
    return await handler(request)


def _body_limit(max_size: int):
    @web.middleware
    async def limit(request: web.Request, handler) -> web.StreamResponse:
        length = request.content_length
        if length is not None and length > max_size:
            return web.Response(status=413, text="length limit exceeded")
        return await handler(request)

    return limit


@dataclass
class HttpServer:
    """Serves uploads and downloads to peers on the local network."""

    host: str | None = None
    port: int = DEFAULT_PORT
    upload_dir: Path | None = None
    max_body_size: int = DEFAULT_MAX_BODY_SIZE

    def address(self) -> tuple[str, int]:
        """The host and port the server binds to."""
        return (self.host or local_ip(), self.port)

    def build_app(self) -> web.Application:
        """The routed application with CORS and request-size limits applied."""
        app = create_app(self.upload_dir)
        app.middlewares.append(_preflight)
        app.middlewares.append(_body_limit(self.max_body_size))
        app.on_response_prepare.append(_add_cors_headers)
        return app

    async def run(self) -> None:
        """Serve until cancelled."""
        host, port = self.address()
        runner = web.AppRunner(self.build_app())
        await runner.setup()
        try:
            site = web.TCPSite(runner, host, port)
            await site.start()
            shown = f"[{host}]" if ":" in host else host
            print(f"my local ip is {shown}:{port}")
            logger.debug("the server port is http://%s:%s", shown, port)
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()


def main(argv: list[str] | None = None) -> int:
    """Start the server from the command line."""
    parser = argparse.ArgumentParser(prog="filesync-server")
    parser.add_argument("--host", default=None, help="address to bind (default: local IP)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--upload-dir", type=Path, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG)
    server = HttpServer(host=args.host, port=args.port, upload_dir=args.upload_dir)
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        pass
    return 0