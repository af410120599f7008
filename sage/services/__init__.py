"""
Sage services layer.

Orchestration that turns core domain functions into request-sized answers:
the chat pipeline and the research library.
"""

# Chat pipeline
from sage.services.chat import (
    FALLBACK_PRODUCTS,
    fallback_response,
    handle_chat,
)

# Research library
from sage.services.research import (
    browse_library,
    export_library,
    get_collection,
    papers_for_query,
)

__all__ = [
    # Chat
    "FALLBACK_PRODUCTS",
    "fallback_response",
    "handle_chat",
    # Research
    "browse_library",
    "export_library",
    "get_collection",
    "papers_for_query",
]
