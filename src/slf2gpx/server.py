"""FastAPI server for single-file SLF to GPX conversion."""

from __future__ import annotations

import io
import re
from pathlib import Path
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Query, UploadFile
from fastapi.responses import Response

from .mapper import to_gpx
from .reader import load_document
from .schema_registry import DocumentKind
from .writer import serialize_gpx

app = FastAPI(title="slf2gpx", version="0.1.0")

GPX_MEDIA_TYPE = "application/gpx+xml"


@app.post("/convert")
async def convert_slf(
    file: UploadFile,
    format: str = Query("gpx", pattern="^(gpx|json)$"),
    name: str | None = Query(None),
):
    """Convert an uploaded SLF document and return it as GPX.

    The track name defaults to the uploaded file's stem. With ``format=json``
    the GPX document model is returned instead of XML.
    """
    content = await file.read()
    result = load_document(io.BytesIO(content), DocumentKind.SLF)
    if result.failure is not None:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid SLF document ({result.failure.kind.value}): {result.failure.message}",
        )

    track_name = name if name is not None else Path(file.filename or "track").stem
    gpx = to_gpx(result.document, track_name)

    if format == "json":
        return gpx

    return Response(
        content=serialize_gpx(gpx),
        media_type=GPX_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(f"{track_name}.gpx")},
    )


def content_disposition(filename: str) -> str:
    """Attachment header carrying ``filename`` as RFC 5987 UTF-8 plus an ASCII fallback."""
    fallback = re.sub(r"[^A-Za-z0-9._ -]", "_", filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
