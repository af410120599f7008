"""
Sage: cannabis and hemp product chat widget backend

Classifies a shopper's question into an intent, scores a small static
catalog against it and answers with up to three products, a templated
explanation, follow-up suggestions and mock research context.

Architecture:
    sage.core       - Pure domain logic (models, intent, scoring, research library)
    sage.data       - Static product catalogs and research papers
    sage.services   - Orchestration layer (chat pipeline, research browsing/export)
    sage.api        - FastAPI app, routes, middleware and metrics
    sage.config     - Configuration settings and logging
"""

__version__ = "0.1.0"

# Expose key public API for convenience imports
from sage.core import (
    # Models
    IntentCategory,
    ExperienceLevel,
    Query,
    Product,
    ScoredProduct,
    SageResponse,
    # Functions
    classify_intent,
    classify_and_score,
    generate_research,
)

from sage.services import (
    # Chat
    handle_chat,
    fallback_response,
    # Research library
    browse_library,
    export_library,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "IntentCategory",
    "ExperienceLevel",
    "Query",
    "Product",
    "ScoredProduct",
    "SageResponse",
    # Core functions
    "classify_intent",
    "classify_and_score",
    "generate_research",
    # Services
    "handle_chat",
    "fallback_response",
    "browse_library",
    "export_library",
]
