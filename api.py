"""
Word Validator — FastAPI Server
================================

Tells you whether a word is real: local word list first, then three
external dictionary APIs in order.

Endpoints:
    GET /                   Service info and dictionary size
    GET /word?word=<text>   Validate a word
    GET /health             Health check / readiness probe

Run:
    python main.py                          # Uses PORT (default 8080)
    uvicorn api:app --reload                # Dev (http://localhost:8000)

Docs:
    http://localhost:8080/docs              # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from word_validator import __version__
from word_validator.config import Settings
from word_validator.exceptions import MissingParameterError
from word_validator.models import Source, ValidationResult
from word_validator.pipeline import WordValidationPipeline

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (load word list once) ─────────────────────

_pipeline: WordValidationPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the word list and open the provider client on startup."""
    global _pipeline  # noqa: PLW0603
    _pipeline = WordValidationPipeline.from_settings(Settings.from_env())
    size = _pipeline.dictionary_size
    if size is None:
        logger.info("Word list will be scanned on demand")
    else:
        logger.info("Loaded %d words from dictionary", size)
    yield
    _pipeline.close()
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Word Validator API",
    description=(
        "Checks whether a word is known. Local word list first, then "
        "Free Dictionary, Datamuse and Merriam-Webster in that order."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Response Schemas ────────────────────────────────────────────────


class WordResponse(BaseModel):
    """Public shape of a ValidationResult."""

    word: str = Field(description="The normalized word that was looked up")
    found: bool
    source: Source

    model_config = {"json_schema_extra": {"example": {
        "word": "hello",
        "found": True,
        "source": "local",
    }}}


class ErrorResponse(BaseModel):
    error: str


class ServiceInfo(BaseModel):
    service: str
    version: str
    usage: str
    dictionary_size: Union[int, str]


class HealthResponse(BaseModel):
    status: str
    version: str
    word_list_strategy: str
    providers: list[str]


# ─── Error Handling ──────────────────────────────────────────────────


@app.exception_handler(MissingParameterError)
async def missing_parameter_handler(request: Request, exc: MissingParameterError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> WordValidationPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _build_response(result: ValidationResult) -> WordResponse:
    return WordResponse(word=result.word, found=result.found, source=result.source)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.get("/", summary="Service info", tags=["System"])
def index() -> ServiceInfo:
    pipeline = _get_pipeline()
    size = pipeline.dictionary_size
    return ServiceInfo(
        service="Word Validator API",
        version=__version__,
        usage="/word?word=<word_to_validate>",
        dictionary_size="on-demand" if size is None else size,
    )


@app.get(
    "/word",
    summary="Validate a word",
    tags=["Validation"],
    responses={
        400: {"model": ErrorResponse, "description": "Missing 'word' query parameter"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
def validate_word(word: Optional[str] = None) -> WordResponse:
    """Check the local word list, then the external providers.

    Returns:
    - **word**: the normalized form that was looked up
    - **found**: `true` if any source recognised it
    - **source**: `local`, `external` or `none`
    """
    pipeline = _get_pipeline()
    result = pipeline.validate(word)
    return _build_response(result)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    pipeline = _get_pipeline()
    return HealthResponse(
        status="healthy",
        version=__version__,
        word_list_strategy=pipeline.word_list.strategy,
        providers=pipeline.chain.provider_names,
    )
