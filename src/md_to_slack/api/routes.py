"""API routes: convert markdown bodies and uploaded files to Slack blocks."""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from ..models import ConvertRequest, ConvertResponse, HealthResponse
from ..services.block_converter import parse_markdown
from ..services.input_layer import decode_markdown

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/health", response_model=HealthResponse)
async def api_health():
    return HealthResponse()


@router.post("/convert", response_model=ConvertResponse)
async def api_convert(body: ConvertRequest):
    """Convert a markdown string. Returns the block list, or {text, blocks} when text is set."""
    logger.info("Converting %d characters of markdown", len(body.markdown))
    return parse_markdown(body.markdown, text=body.text, header=body.header)


@router.post("/upload", response_model=ConvertResponse)
async def api_upload(
    file: UploadFile = File(...),
    text: str | None = None,
    header: str | None = None,
):
    """Convert an uploaded .md or .txt file."""
    if not file.filename or not (file.filename.endswith(".md") or file.filename.endswith(".txt")):
        raise HTTPException(400, "File must be .md or .txt")
    markdown = decode_markdown(await file.read())
    logger.info("Converting uploaded file %s", file.filename)
    return parse_markdown(markdown, text=text, header=header)
