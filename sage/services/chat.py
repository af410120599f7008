"""
Chat pipeline: normalize, classify, filter/score, assemble.

``handle_chat`` is a pure function of the query and the static catalog.
The HTTP layer owns the error boundary and swaps in ``fallback_response``
when anything goes wrong, so the widget always has products to show.
"""

from __future__ import annotations

import time
from dataclasses import asdict

from sage.config import (
    CATALOG_NAME,
    DISCLAIMER,
    MAX_PRODUCTS,
    STATUS_MESSAGE,
    get_logger,
)
from sage.core.models import (
    IntentCategory,
    Product,
    Query,
    ResearchResult,
    SageResponse,
    ScoredProduct,
)
from sage.core.research import generate_research
from sage.core.scoring import classify_and_score
from sage.core.templates import build_explanation, build_suggestions, educational_copy
from sage.data.catalog import get_catalog

logger = get_logger(__name__)


# Served when the request cannot be parsed or the pipeline raises.
# Independent of the configured catalog.
FALLBACK_PRODUCTS: tuple[Product, ...] = (
    Product(
        id=1,
        name="Purple Punch (Indica)",
        description="22.5% THC. Perfect for relaxation.",
        price="$55/eighth",
        category="Flower",
    ),
    Product(
        id=2,
        name="Sour Diesel (Sativa)",
        description="24.8% THC. Great for energy.",
        price="$60/eighth",
        category="Flower",
    ),
)
FALLBACK_EXPLANATION = "Welcome to Premo Cannabis! Here are some of our popular products:"
FALLBACK_SUGGESTIONS = ["Ask about our deals", "Tell me what you need help with"]


def new_session_id() -> str:
    return f"sage-{int(time.time() * 1000)}"


def fallback_response(session_id: str | None = None) -> SageResponse:
    """The hardcoded two-product response used on any failure."""
    return SageResponse(
        session_id=session_id or new_session_id(),
        explanation=FALLBACK_EXPLANATION,
        products=[ScoredProduct(product=p) for p in FALLBACK_PRODUCTS],
        suggestions=list(FALLBACK_SUGGESTIONS),
    )


def _educational_resources(query: Query, intent: IntentCategory, research: ResearchResult) -> dict:
    credibility = asdict(research.credibility)
    return {
        "research_studies": {
            "papers": [p.to_dict() for p in research.papers],
            "total_found": len(research.papers),
            "summary": {
                "evidence_strength": research.evidence_strength,
                "compounds": research.compounds_researched,
            },
            "quality_analysis": credibility,
        },
        "key_compounds": educational_copy(intent)["key_compounds"],
        "source_credibility": credibility,
        "educational_level": query.experience_level.value,
    }


def _educational_summary(query: Query, intent: IntentCategory, research: ResearchResult) -> dict:
    copy = educational_copy(intent)
    return {
        "query": query.text,
        "compounds_researched": research.compounds_researched,
        "evidence_strength": research.evidence_strength,
        "key_findings": research.key_findings,
        "research_gaps": research.research_gaps,
        "confidence_level": research.confidence_level,
        "key_points": copy["key_points"],
        "dosage_guidance": copy["dosage_guidance"],
        "safety_notes": copy["safety_notes"],
    }


def handle_chat(
    query: Query,
    catalog: tuple[Product, ...] | list[Product] | None = None,
    k: int = MAX_PRODUCTS,
) -> SageResponse:
    """
    Answer one chat query.

    Args:
        query: Normalized query.
        catalog: Products to choose from. Defaults to the configured catalog.
        k: Maximum products in the response.

    Returns:
        SageResponse with between one and ``k`` products.
    """
    if catalog is None:
        catalog = get_catalog(CATALOG_NAME)

    lowered = query.lowered
    intent, products = classify_and_score(lowered, catalog, k)
    if not products:
        logger.warning("Empty catalog, serving fallback products")
        products = [ScoredProduct(product=p) for p in FALLBACK_PRODUCTS[:k]]

    research = generate_research(lowered)

    logger.debug(
        "chat_answered",
        extra={
            "intent": intent.value,
            "experience_level": query.experience_level.value,
            "product_ids": [s.product.id for s in products],
        },
    )

    return SageResponse(
        session_id=query.session_id or new_session_id(),
        explanation=build_explanation(intent, query.experience_level),
        products=products,
        suggestions=build_suggestions(query.experience_level),
        educational_resources=_educational_resources(query, intent, research),
        educational_summary=_educational_summary(query, intent, research),
        disclaimer=DISCLAIMER,
        status_message=STATUS_MESSAGE,
        intent=intent,
    )
