"""
English Numerals: FastAPI Server
================================

HTTP access to the cardinal-words converter.

Endpoints:
    GET  /cardinal/{number}   Convert a single integer
    POST /cardinal            Convert a batch of integers
    GET  /health              Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictInt

from numerals import I64_MAX, I64_MIN, NumeralError, __version__
from numerals.models import CardinalResult

logger = logging.getLogger(__name__)

# Upper bound on numbers accepted in one POST /cardinal request
MAX_BATCH_SIZE = 1_000


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="English Numerals API",
    description=(
        "Converts signed 64-bit integers to English cardinal words, "
        "e.g. 12345 → 'twelve thousand three hundred and forty-five'."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class BatchRequest(BaseModel):
    """Request body for POST /cardinal."""

    numbers: list[StrictInt] = Field(
        ...,
        min_length=1,
        max_length=MAX_BATCH_SIZE,
        description=(
            "JSON integers to convert, each within the signed 64-bit range. "
            "Booleans, strings and floats are rejected."
        ),
        json_schema_extra={"example": [0, 17, 105, -12345]},
    )


class BatchResponse(BaseModel):
    """Conversions in the same order as the request."""

    count: int
    results: list[CardinalResult]


class HealthResponse(BaseModel):
    status: str
    version: str
    min_supported: int
    max_supported: int


# ─── Error Mapping ──────────────────────────────────────────────────


@app.exception_handler(NumeralError)
async def numeral_error_handler(request: Request, exc: NumeralError) -> JSONResponse:
    """Report out-of-domain input as 422 with the machine-readable code."""
    logger.warning("Rejected %s: [%s] %s", request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=422,
        content={
            "detail": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details,
            }
        },
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.get(
    "/cardinal/{number}",
    summary="Convert one integer to words",
    tags=["Conversion"],
    responses={422: {"description": "Number outside the signed 64-bit range"}},
)
def convert_number(number: int) -> CardinalResult:
    """Return the English cardinal wording of `number`."""
    return CardinalResult.from_number(number)


@app.post(
    "/cardinal",
    summary="Convert a batch of integers to words",
    tags=["Conversion"],
    responses={422: {"description": "Empty batch, too many numbers, or a number out of range"}},
)
def convert_batch(request: BatchRequest) -> BatchResponse:
    """Convert every number in the request.

    The whole batch is rejected if any single number is out of range.
    """
    results = [CardinalResult.from_number(n) for n in request.numbers]
    return BatchResponse(count=len(results), results=results)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and the supported input range."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        min_supported=I64_MIN,
        max_supported=I64_MAX,
    )
