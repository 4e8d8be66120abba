"""HTTP handlers for receiving and serving files, and the application that routes to them."""

from __future__ import annotations

import mimetypes
import os
from pathlib import Path

from aiohttp import BodyPartReader, web
from platformdirs import user_downloads_dir

UPLOAD_DIR = web.AppKey("upload_dir", Path)

UPLOAD_FOLDER_NAME = "filesync"
_CHUNK_SIZE = 64 * 1024


def path_is_valid(path: str) -> bool:
    """Whether ``path`` is exactly one plain file-name component.

    Guards against directory traversal: absolute paths, ``.`` and ``..``
    and anything with more than one component are rejected.
    """
    if not path or path.startswith("/"):
        return False
    parts = path.split("/")
    if parts[0] == ".":
        return False
    components = [part for part in parts if part not in ("", ".")]
    return len(components) == 1 and components[0] != ".."


def default_upload_directory() -> Path:
    """The directory inside the user's downloads folder where received files go."""
    return Path(user_downloads_dir()) / UPLOAD_FOLDER_NAME


def _save_part_error(status: int, message: str) -> web.Response:
    return web.Response(status=status, text=message)


async def _stream_to_file(upload_dir: Path, file_name: str, part: BodyPartReader) -> None:
    upload_dir.mkdir(parents=True, exist_ok=True)
    with open(upload_dir / file_name, "wb") as destination:
        while chunk := await part.read_chunk(_CHUNK_SIZE):
            destination.write(chunk)


async def accept_file_upload(request: web.Request) -> web.Response:
    """Save every file field of a multipart upload into the upload directory."""
    upload_dir = request.app[UPLOAD_DIR]
    try:
        reader = await request.multipart()
    except (AssertionError, KeyError, ValueError):
        return _save_part_error(400, "Invalid multipart request")

    while True:
        part = await reader.next()
        if part is None:
            break
        if not isinstance(part, BodyPartReader):
            continue
        file_name = part.filename
        if file_name is None:
            continue
        if not path_is_valid(file_name):
            return _save_part_error(400, "Invalid path")
        try:
            await _stream_to_file(upload_dir, file_name, part)
        except OSError as error:
            return _save_part_error(500, str(error))

    return web.json_response({"Success": True, "message": "file saved"})


async def health_check(request: web.Request) -> web.Response:
    """Report that the server accepts connections."""
    return web.json_response(
        {"success": True, "message": "Server is ready to accept connection"}
    )


async def handle_404(request: web.Request) -> web.Response:
    """Answer requests for paths that have no route."""
    return web.json_response(
        {
            "success": False,
            "message": "The requested resource does not exist on this server!",
        },
        status=404,
    )


def _debug_quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


async def get_file(request: web.Request) -> web.StreamResponse:
    """Stream the file named by the ``file_path`` query parameter as a download."""
    file_path = request.query.get("file_path")
    if file_path is None:
        return web.Response(
            status=400,
            text="Failed to deserialize query string: missing field `file_path`",
        )

    try:
        handle = open(file_path, "rb")
    except OSError:
        return web.Response(status=404, text="File not found:")

    with handle:
        content_type, _ = mimetypes.guess_type(file_path, strict=False)
        if content_type is None:
            return web.Response(status=400, text="MIME Type couldn't be determined")

        file_name = Path(os.fspath(file_path)).name
        if not file_name:
            return web.Response(status=400, text="File name couldn't be determined")

        response = web.StreamResponse(
            headers={
                "Content-Type": content_type,
                "Content-Disposition": f'attachment; filename="{_debug_quote(file_name)}"',
            }
        )
        await response.prepare(request)
        while chunk := handle.read(_CHUNK_SIZE):
            await response.write(chunk)
        await response.write_eof()
        return response


@web.middleware
async def _fallback(request: web.Request, handler) -> web.StreamResponse:
    try:
        return await handler(request)
    except web.HTTPNotFound:
        return await handle_404(request)


def create_app(upload_dir: str | os.PathLike[str] | None = None) -> web.Application:
    """Build the application with its routes; uploads are saved into ``upload_dir``."""
    app = web.Application(middlewares=[_fallback])
    app[UPLOAD_DIR] = Path(upload_dir) if upload_dir is not None else default_upload_directory()
    app.router.add_post("/upload", accept_file_upload)
    app.router.add_post("/health", accept_file_upload)
    app.router.add_get("/health", health_check)
    app.router.add_get("/api/file", get_file)
    return app