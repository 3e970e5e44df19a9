"""
HTTP API: single and batch conversion, plus a listing of the active
shortcut table.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .config import configured_shortcuts, settings
from .converter import InputFormat, parse_math_string
from .parsers.format_parser import OutputFormat

logger = logging.getLogger(__name__)

app = FastAPI(title="Math String Normalizer")


class ConvertRequest(BaseModel):
    text: str
    format: Optional[InputFormat] = None


class ConvertResponse(BaseModel):
    format: OutputFormat
    latex: str


class BatchConvertRequest(BaseModel):
    items: list[str]
    format: Optional[InputFormat] = None


class BatchConvertResponse(BaseModel):
    results: list[ConvertResponse]


def _check_length(text: str) -> None:
    if len(text) > settings.max_input_length:
        raise HTTPException(
            status_code=413,
            detail=f"Input longer than {settings.max_input_length} characters",
        )


def _convert(text: str, fmt: Optional[InputFormat]) -> ConvertResponse:
    detected, latex = parse_math_string(
        text,
        format=fmt or settings.default_format,
        shortcuts=configured_shortcuts(),
    )
    return ConvertResponse(format=detected, latex=latex)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/convert")
async def convert(data: ConvertRequest) -> ConvertResponse:
    _check_length(data.text)
    result = _convert(data.text, data.format)
    logger.info("Converted %d chars as %s", len(data.text), result.format)
    return result


@app.post("/api/convert/batch")
async def convert_batch(data: BatchConvertRequest) -> BatchConvertResponse:
    for item in data.items:
        _check_length(item)
    results = [_convert(item, data.format) for item in data.items]
    logger.info("Converted batch of %d items", len(results))
    return BatchConvertResponse(results=results)


@app.get("/api/shortcuts")
async def shortcuts() -> dict[str, str]:
    return dict(configured_shortcuts())
