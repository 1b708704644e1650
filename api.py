"""
Numerizer — FastAPI Server
==========================

HTTP front end for the number-phrase parser.

Endpoints:
    POST /parse             Convert one phrase
    POST /parse/batch       Convert many phrases with one profile
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Configuration (environment or .env):
    NUMERIZER_LOG_LEVEL     logging level (default WARNING)
    NUMERIZER_MAX_BATCH     max phrases per batch request (default 100)
"""

from __future__ import annotations

import logging
import os
from enum import Enum

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numerizer import PROFILES, __version__
from numerizer.models import ParseResult
from numerizer.pipeline import try_convert

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logging.basicConfig(level=os.getenv("NUMERIZER_LOG_LEVEL", "WARNING").upper())
logger = logging.getLogger(__name__)

MAX_BATCH = int(os.getenv("NUMERIZER_MAX_BATCH", "100"))


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numerizer API",
    description=(
        "Strict conversion of English number phrases to integers. "
        "Plain integers or dollar/cent amounts (returned in cents)."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ProfileName(str, Enum):
    PLAIN = "plain"
    CURRENCY = "currency"


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    text: str = Field(
        ...,
        max_length=1_000,
        description="The number phrase to convert.",
        json_schema_extra={"example": "two hundred four dollars and eighteen cents"},
    )
    profile: ProfileName = ProfileName.PLAIN


class BatchRequest(BaseModel):
    """Request body for the /parse/batch endpoint."""

    texts: list[str] = Field(..., min_length=1)
    profile: ProfileName = ProfileName.PLAIN


class BatchResponse(BaseModel):
    results: list[ParseResult]
    error_count: int


class HealthResponse(BaseModel):
    status: str
    version: str
    profiles: list[str]


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Convert a number phrase",
    tags=["Parsing"],
)
def parse_phrase(request: ParseRequest) -> ParseResult:
    """Convert one phrase.

    Parse failures are part of a normal response: `value` is null and
    `error` carries the machine-readable code, the offending word and the
    word it followed.
    """
    return try_convert(request.text, PROFILES[request.profile.value])


@app.post(
    "/parse/batch",
    summary="Convert several number phrases",
    tags=["Parsing"],
    responses={413: {"description": "Too many phrases in one request"}},
)
def parse_batch(request: BatchRequest) -> BatchResponse:
    """Convert every phrase in `texts` with the same profile, in order."""
    if len(request.texts) > MAX_BATCH:
        raise HTTPException(
            status_code=413,
            detail=f"Batch too large (max {MAX_BATCH} phrases)",
        )

    profile = PROFILES[request.profile.value]
    results = [try_convert(text, profile) for text in request.texts]
    error_count = sum(1 for r in results if r.error is not None)
    if error_count:
        logger.info("Batch of %d phrases had %d failures", len(results), error_count)
    return BatchResponse(results=results, error_count=error_count)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        profiles=sorted(PROFILES),
    )
