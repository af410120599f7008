"""
Sage core domain layer.

Pure domain logic with no web framework dependencies.
Contains models, intent classification, scoring, response copy, mock
research generation and research library helpers.
"""

# Models (all dataclasses)
from sage.core.models import (
    # Query
    ExperienceLevel,
    IntentCategory,
    Query,
    # Catalog
    CANNABINOIDS,
    Product,
    ScoredProduct,
    # Research
    ResearchPaper,
    ResearchResult,
    SourceCredibility,
    # Response
    SageResponse,
    # Library
    LibraryFilters,
    Page,
)

# Intent
from sage.core.intent import (
    INTENT_KEYWORDS,
    classify_intent,
    filter_catalog,
    matched_topics,
)

# Scoring
from sage.core.scoring import (
    classify_and_score,
    rank_products,
    score_product,
)

# Response copy
from sage.core.templates import (
    EXPLANATION_TEMPLATES,
    build_explanation,
    build_suggestions,
    educational_copy,
)

# Mock research
from sage.core.research import (
    generate_research,
    select_papers,
    summarize_credibility,
)

# Research library
from sage.core.library import (
    CATEGORIES,
    COLLECTIONS,
    SORT_OPTIONS,
    browse,
    category_counts,
    collection_papers,
    filter_papers,
    paginate,
    sort_papers,
)

# Export
from sage.core.export import (
    FORMAT_INFO,
    export_papers,
)

__all__ = [
    # Models
    "ExperienceLevel",
    "IntentCategory",
    "Query",
    "CANNABINOIDS",
    "Product",
    "ScoredProduct",
    "ResearchPaper",
    "ResearchResult",
    "SourceCredibility",
    "SageResponse",
    "LibraryFilters",
    "Page",
    # Intent
    "INTENT_KEYWORDS",
    "classify_intent",
    "filter_catalog",
    "matched_topics",
    # Scoring
    "classify_and_score",
    "rank_products",
    "score_product",
    # Copy
    "EXPLANATION_TEMPLATES",
    "build_explanation",
    "build_suggestions",
    "educational_copy",
    # Research
    "generate_research",
    "select_papers",
    "summarize_credibility",
    # Library
    "CATEGORIES",
    "COLLECTIONS",
    "SORT_OPTIONS",
    "browse",
    "category_counts",
    "collection_papers",
    "filter_papers",
    "paginate",
    "sort_papers",
    # Export
    "FORMAT_INFO",
    "export_papers",
]
