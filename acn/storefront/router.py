"""
Static asset serving and single-page app fallback.

Registered last, so every path not claimed by an API route lands here:

- ``/api/...`` paths get a JSON 404.
- ``header.html`` is served with its user menu filled in.
- a path naming a file under ``public_dir`` is served as that file;
  HTML is sent with ``no-store`` so header/footer changes show up at
  once, everything else is cacheable for a week.
- any other path gets the app's ``index.html``; if that cannot be read
  the request ends in a 404.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, HTMLResponse, Response

from ..config import Settings, get_settings
from .header import SignedOut, render_header

logger = logging.getLogger(__name__)

router = APIRouter(tags=["storefront"])

INDEX_DOCUMENT = "index.html"
HEADER_DOCUMENT = "header.html"
HTML_CACHE_CONTROL = "no-store, max-age=0"
ASSET_CACHE_CONTROL = "public, max-age=604800"


def resolve_asset(public_dir: Path, request_path: str) -> Optional[Path]:
    """Map a URL path to a file inside ``public_dir``.

    Returns ``None`` for directories, missing files, paths the OS
    rejects (embedded NUL, over-long names) and anything that would
    escape ``public_dir``.
    """
    root = public_dir.resolve()
    try:
        candidate = (root / request_path.lstrip("/")).resolve()
        if candidate != root and root not in candidate.parents:
            return None
        return candidate if candidate.is_file() else None
    except (ValueError, OSError):
        return None


def _file_response(path: Path) -> FileResponse:
    cache = HTML_CACHE_CONTROL if path.suffix == ".html" else ASSET_CACHE_CONTROL
    return FileResponse(path, headers={"Cache-Control": cache})


def _header_response(path: Path) -> HTMLResponse:
    # no server-side session: the header always starts signed out
    template = path.read_text(encoding="utf-8")
    return HTMLResponse(
        render_header(template, SignedOut()),
        headers={"Cache-Control": HTML_CACHE_CONTROL},
    )


@router.get("/{full_path:path}", include_in_schema=False)
def serve_storefront(full_path: str, settings: Settings = Depends(get_settings)) -> Response:
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not Found")

    asset = resolve_asset(settings.public_dir, full_path)
    if asset is not None and asset.name == HEADER_DOCUMENT:
        return _header_response(asset)
    if asset is not None:
        return _file_response(asset)

    index = resolve_asset(settings.public_dir, INDEX_DOCUMENT)
    if index is None:
        logger.warning("Entry document missing from %s", settings.public_dir)
        raise HTTPException(status_code=404, detail="Not Found")
    return _file_response(index)
