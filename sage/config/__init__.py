"""
Sage configuration module.

Central configuration for the chat backend.
Loads settings from environment variables with sensible defaults.
"""

import os

from dotenv import load_dotenv

load_dotenv()


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

CATALOG_NAME = os.getenv("SAGE_CATALOG", "premo")  # "premo" or "hemp"
MAX_PRODUCTS = 3  # Products per response (never fewer than one)


# ---------------------------------------------------------------------------
# Request Defaults
# ---------------------------------------------------------------------------

DEFAULT_QUERY = "popular products"
DEFAULT_EXPERIENCE_LEVEL = "casual"
MAX_QUERY_LENGTH = int(os.getenv("MAX_QUERY_LENGTH", "500"))


# ---------------------------------------------------------------------------
# Research Library
# ---------------------------------------------------------------------------

MAX_RESEARCH_PAPERS = 4  # Base papers + per-topic papers, capped
HIGH_CREDIBILITY_THRESHOLD = 8.0  # Papers at or above count as high credibility
STUDIES_PER_PAGE = 10


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]

# When true, malformed requests answer 400 and internal failures 500.
# The fallback body is sent either way so the widget always renders.
STRICT_ERRORS = os.getenv("SAGE_STRICT_ERRORS", "false").lower() in ("1", "true", "yes")


# ---------------------------------------------------------------------------
# Response Copy
# ---------------------------------------------------------------------------

DISCLAIMER = os.getenv(
    "SAGE_DISCLAIMER",
    "Must be 21+ with valid ID. NJ law limits: 1oz flower, 5g concentrates, "
    "or 1000mg edibles per day.",
)
STATUS_MESSAGE = os.getenv(
    "SAGE_STATUS_MESSAGE", "Powered by Premo Cannabis - Keyport, NJ"
)


from sage.config.queries import DEMO_QUERIES, INTENT_QUERIES  # noqa: E402


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

from sage.config.logging import (  # noqa: E402
    get_logger,
    configure_logging,
    log_banner,
    log_section,
    log_kv,
    LOG_LEVEL,
    LOG_FORMAT,
)


# ---------------------------------------------------------------------------
# All exports
# ---------------------------------------------------------------------------

__all__ = [
    # Catalog
    "CATALOG_NAME",
    "MAX_PRODUCTS",
    # Request defaults
    "DEFAULT_QUERY",
    "DEFAULT_EXPERIENCE_LEVEL",
    "MAX_QUERY_LENGTH",
    # Research
    "MAX_RESEARCH_PAPERS",
    "HIGH_CREDIBILITY_THRESHOLD",
    "STUDIES_PER_PAGE",
    # HTTP
    "CORS_ORIGINS",
    "STRICT_ERRORS",
    # Copy
    "DISCLAIMER",
    "STATUS_MESSAGE",
    # Queries
    "DEMO_QUERIES",
    "INTENT_QUERIES",
    # Logging
    "get_logger",
    "configure_logging",
    "log_banner",
    "log_section",
    "log_kv",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
