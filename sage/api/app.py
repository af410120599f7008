"""
FastAPI application factory.

The catalog is static, so it is resolved once in ``create_app`` and shared
read-only across requests via ``app.state``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from sage import __version__
from sage.api.middleware import LatencyMiddleware, PreflightCORSMiddleware
from sage.api.routes import router
from sage.config import CATALOG_NAME, CORS_ORIGINS, STRICT_ERRORS, get_logger
from sage.data.catalog import get_catalog

logger = get_logger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    logger.info(
        "Sage API ready",
        extra={
            "catalog": app.state.catalog_name,
            "products": len(app.state.catalog),
            "strict_errors": STRICT_ERRORS,
        },
    )
    yield
    logger.info("Sage API shutting down")


def create_app(
    catalog_name: str | None = None,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Application factory.

    Args:
        catalog_name: Catalog to serve. Defaults to ``SAGE_CATALOG``.
        cors_origins: Allowed browser origins. Defaults to ``CORS_ORIGINS``.

    Raises:
        ValueError: If the catalog name is unknown.
    """
    catalog_name = (catalog_name or CATALOG_NAME).lower()
    cors_origins = list(cors_origins if cors_origins is not None else CORS_ORIGINS)

    app = FastAPI(
        title="Sage",
        description="Cannabis product chat and research library API",
        version=__version__,
        lifespan=_lifespan,
    )
    app.state.catalog_name = catalog_name
    app.state.catalog = get_catalog(catalog_name)
    app.state.cors_origins = cors_origins

    app.add_middleware(LatencyMiddleware)
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(router)
    return app
