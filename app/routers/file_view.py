# =============================================================================
# app/routers/file_view.py - Public File Access
# =============================================================================
# Serves shared files by slug, either inline (preview) or as a download.
# =============================================================================

from urllib.parse import quote

from fastapi import APIRouter, FastAPI, Query
from fastapi.responses import Response

from app.dependencies import FileServiceDep

router = APIRouter(tags=["File View"])


def _file_response(content: bytes, filename: str, mimetype: str, disposition: str) -> Response:
    return Response(
        content=content,
        media_type=mimetype,
        headers={
            "Content-Disposition": f"{disposition}; filename*=UTF-8''{quote(filename)}",
        },
    )


@router.get("/api/file-view/{slug}")
async def view_file(
    slug: str,
    files: FileServiceDep,
    password: str | None = Query(default=None),
):
    """Serve a file inline. Counts one view."""
    record, content = files.open_file(slug, password)
    return _file_response(content, record.filename, record.mimetype, "inline")


@router.get("/api/file-download/{slug}")
async def download_file(
    slug: str,
    files: FileServiceDep,
    password: str | None = Query(default=None),
):
    """Serve a file as an attachment. Counts one view."""
    record, content = files.open_file(slug, password)
    return _file_response(content, record.filename, record.mimetype, "attachment")


def register_file_view_routes(app: FastAPI) -> None:
    app.include_router(router)
