"""
API route definitions.

Endpoints:
    GET      /health                          Health check
    POST     /api/sage                        Chat query (GET tolerated)
    OPTIONS  /api/sage                        CORS probe, empty 200
    POST     /api/v1/chat/message             Alias of /api/sage
    GET      /api/research                    Browse the research library
    GET      /api/research/export             Download papers (json/csv/bibtex/ris)
    GET      /api/research/collections/{id}   Curated paper collection
    GET      /metrics                         Prometheus metrics
"""

from __future__ import annotations

import json

from fastapi import APIRouter, Query as QueryParam, Request, Response
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import AliasChoices, BaseModel, Field, ValidationError

from sage.api.metrics import metrics_response, record_error, record_intent
from sage.config import (
    DEFAULT_EXPERIENCE_LEVEL,
    DEFAULT_QUERY,
    MAX_QUERY_LENGTH,
    STUDIES_PER_PAGE,
    STRICT_ERRORS,
    get_logger,
)
from sage.core.library import CATEGORIES, COLLECTIONS, SORT_OPTIONS
from sage.core.models import ExperienceLevel, LibraryFilters, Query
from sage.services.chat import fallback_response, handle_chat
from sage.services.research import browse_library, export_library, get_collection

logger = get_logger(__name__)

router = APIRouter()

# Allow-Origin is added per request from the configured origins
CORS_HEADERS = {
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


# ---------------------------------------------------------------------------
# Root redirect
# ---------------------------------------------------------------------------


@router.get("/", include_in_schema=False)
async def root():
    """Redirect root to Swagger UI."""
    return RedirectResponse(url="/docs")


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ChatRequest(BaseModel):
    """Body of a chat request. ``text`` is accepted as an alias of ``query``."""

    query: str | None = Field(
        None,
        max_length=MAX_QUERY_LENGTH,
        validation_alias=AliasChoices("query", "text"),
        description="Free-text question",
    )
    experience_level: str | None = Field(
        None, description="new, casual or experienced (unknown values read as casual)"
    )
    session_id: str | None = Field(None, description="Opaque client session id")

    def to_query(self) -> Query:
        """Normalize into a domain Query, filling in defaults."""
        text = (self.query or "").strip() or DEFAULT_QUERY
        level = ExperienceLevel.parse(
            self.experience_level, ExperienceLevel(DEFAULT_EXPERIENCE_LEVEL)
        )
        return Query(text=text, experience_level=level, session_id=self.session_id)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    status: str
    catalog: str
    catalog_size: int


class ErrorResponse(BaseModel):
    """Structured error response (not stack traces)."""

    error: str


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """Liveness probe. The catalog is static, so loaded means healthy."""
    catalog = request.app.state.catalog
    return {
        "status": "healthy" if catalog else "degraded",
        "catalog": request.app.state.catalog_name,
        "catalog_size": len(catalog),
    }


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------


def _cors_headers(request: Request) -> dict[str, str]:
    """CORS headers for chat responses, honouring the app's allowed origins.

    Unlisted origins get no ``Access-Control-Allow-Origin`` header.
    """
    headers = dict(CORS_HEADERS)
    origins = request.app.state.cors_origins
    if "*" in origins:
        headers["Access-Control-Allow-Origin"] = "*"
    else:
        origin = request.headers.get("origin")
        if origin in origins:
            headers["Access-Control-Allow-Origin"] = origin
    return headers


def _chat_response(request: Request, body: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body, headers=_cors_headers(request))


def _fallback(
    request: Request, error_type: str, status_code: int, session_id: str | None = None
) -> JSONResponse:
    """Fallback body; status stays 200 unless strict errors are enabled."""
    record_error(error_type)
    return _chat_response(
        request,
        fallback_response(session_id).to_dict(),
        status_code if STRICT_ERRORS else 200,
    )


def _answer(payload, request: Request) -> JSONResponse:
    """Validate a decoded payload and run the chat pipeline.

    Never raises: every failure becomes the fallback response.
    """
    try:
        if payload is None:
            payload = {}
        chat_request = ChatRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid chat request: %s", e.errors(include_url=False))
        return _fallback(request, "invalid_request", 400)

    query = chat_request.to_query()
    try:
        response = handle_chat(query, request.app.state.catalog)
    except Exception:
        logger.exception("Chat pipeline failed for query: %s", query.text)
        return _fallback(request, "internal_error", 500, query.session_id)

    record_intent(response.intent.value)
    return _chat_response(request, response.to_dict())


@router.post(
    "/api/sage",
    responses={405: {"model": ErrorResponse}},
)
@router.post("/api/v1/chat/message", include_in_schema=False)
async def chat(request: Request):
    """Answer a chat query with products, explanation and research.

    The body is read raw so that malformed JSON reaches the fallback path
    instead of FastAPI's 422.
    """
    raw = await request.body()
    if not raw.strip():
        return _answer({}, request)
    try:
        payload = json.loads(raw)
    except (ValueError, UnicodeDecodeError, RecursionError):
        # RecursionError: nesting deeper than the decoder's stack allows
        logger.warning("Malformed JSON body (%d bytes)", len(raw))
        return _fallback(request, "invalid_request", 400)
    return _answer(payload, request)


@router.get("/api/sage")
@router.get("/api/v1/chat/message", include_in_schema=False)
async def chat_get(request: Request):
    """Query-string variant of the chat endpoint."""
    return _answer(dict(request.query_params), request)


@router.options("/api/sage", include_in_schema=False)
@router.options("/api/v1/chat/message", include_in_schema=False)
async def chat_options(request: Request):
    """CORS probe: empty body, CORS headers."""
    return Response(status_code=200, headers=_cors_headers(request))


@router.api_route(
    "/api/sage", methods=["PUT", "PATCH", "DELETE"], include_in_schema=False
)
@router.api_route(
    "/api/v1/chat/message", methods=["PUT", "PATCH", "DELETE"], include_in_schema=False
)
async def chat_method_not_allowed(request: Request):
    return _chat_response(request, {"error": "Method not allowed"}, 405)


# ---------------------------------------------------------------------------
# Research library
# ---------------------------------------------------------------------------


def _library_filters(
    search: str,
    category: str,
    study_type: list[str] | None,
    min_credibility: float | None,
    max_credibility: float | None,
    min_year: int | None,
    max_year: int | None,
    sort_by: str,
) -> LibraryFilters:
    return LibraryFilters(
        search_term=search,
        category=category,
        study_types=study_type or [],
        min_credibility=min_credibility,
        max_credibility=max_credibility,
        min_year=min_year,
        max_year=max_year,
        sort_by=sort_by,
    )


_CATEGORY_PATTERN = "^(" + "|".join(CATEGORIES) + ")$"
_SORT_PATTERN = "^(" + "|".join(SORT_OPTIONS) + ")$"


@router.get("/api/research")
async def research(
    query: str | None = QueryParam(None, max_length=MAX_QUERY_LENGTH),
    search: str = QueryParam("", description="Search in title and abstract"),
    category: str = QueryParam("all", pattern=_CATEGORY_PATTERN),
    study_type: list[str] | None = QueryParam(None),
    min_credibility: float | None = QueryParam(None, ge=0, le=10),
    max_credibility: float | None = QueryParam(None, ge=0, le=10),
    min_year: int | None = QueryParam(None),
    max_year: int | None = QueryParam(None),
    sort_by: str = QueryParam("relevance", pattern=_SORT_PATTERN),
    page: int = QueryParam(1, ge=1),
    per_page: int = QueryParam(STUDIES_PER_PAGE, ge=1, le=100),
):
    """Browse research papers for a query (or the whole library)."""
    filters = _library_filters(
        search, category, study_type, min_credibility, max_credibility,
        min_year, max_year, sort_by,
    )
    return browse_library(query, filters, page, per_page)


@router.get(
    "/api/research/export",
    responses={400: {"model": ErrorResponse}},
)
async def research_export(
    fmt: str = QueryParam("json", alias="format", description="json, csv, bibtex or ris"),
    query: str | None = QueryParam(None, max_length=MAX_QUERY_LENGTH),
    include_abstracts: bool = QueryParam(True),
    search: str = QueryParam(""),
    category: str = QueryParam("all", pattern=_CATEGORY_PATTERN),
    study_type: list[str] | None = QueryParam(None),
    min_credibility: float | None = QueryParam(None, ge=0, le=10),
    max_credibility: float | None = QueryParam(None, ge=0, le=10),
    min_year: int | None = QueryParam(None),
    max_year: int | None = QueryParam(None),
    sort_by: str = QueryParam("relevance", pattern=_SORT_PATTERN),
):
    """Download the filtered papers as an attachment."""
    filters = _library_filters(
        search, category, study_type, min_credibility, max_credibility,
        min_year, max_year, sort_by,
    )
    try:
        body, media_type, filename = export_library(
            query, fmt, filters, include_abstracts=include_abstracts
        )
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    return Response(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/api/research/collections/{collection_id}",
    responses={404: {"model": ErrorResponse}},
)
async def research_collection(collection_id: str):
    """Papers in a curated collection."""
    try:
        papers = get_collection(collection_id)
    except ValueError as e:
        return JSONResponse(status_code=404, content={"error": str(e)})
    return {
        "id": collection_id,
        **COLLECTIONS[collection_id],
        "papers": [p.to_dict() for p in papers],
    }


# ---------------------------------------------------------------------------
# Prometheus metrics
# ---------------------------------------------------------------------------


@router.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    body, content_type = metrics_response()
    return Response(content=body, media_type=content_type)
