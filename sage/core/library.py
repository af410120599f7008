"""
Research library browsing: filter, sort, paginate, group.

Pure functions over lists of ResearchPaper. The HTTP layer builds a
LibraryFilters from query parameters and pipes the paper list through
``browse``.
"""

from __future__ import annotations

from sage.config import STUDIES_PER_PAGE
from sage.core.models import LibraryFilters, Page, ResearchPaper


# Category id -> keywords searched in title and abstract
TOPIC_CATEGORIES: dict[str, tuple[str, ...]] = {
    "sleep": ("sleep", "insomnia"),
    "anxiety": ("anxiety", "stress"),
    "pain": ("pain", "analgesia"),
    "inflammation": ("inflammation", "inflammatory"),
}

# Category id -> keywords searched in study type
STUDY_TYPE_CATEGORIES: dict[str, tuple[str, ...]] = {
    "clinical-trials": ("clinical", "trial"),
    "reviews": ("review", "meta-analysis"),
}

CATEGORIES = ("all",) + tuple(TOPIC_CATEGORIES) + tuple(STUDY_TYPE_CATEGORIES)

SORT_OPTIONS = ("relevance", "date", "credibility", "citations")


def in_category(paper: ResearchPaper, category: str) -> bool:
    """True if ``paper`` belongs to a library category. Unknown ids match all."""
    if category in TOPIC_CATEGORIES:
        text = f"{paper.title} {paper.abstract}".lower()
        return any(k in text for k in TOPIC_CATEGORIES[category])
    if category in STUDY_TYPE_CATEGORIES:
        study_type = paper.study_type.lower()
        return any(k in study_type for k in STUDY_TYPE_CATEGORIES[category])
    return True


def filter_papers(papers: list[ResearchPaper], filters: LibraryFilters) -> list[ResearchPaper]:
    """Apply search term, category, study type, credibility and year filters."""
    result = list(papers)

    term = filters.search_term.strip().lower()
    if term:
        result = [
            p for p in result
            if term in p.title.lower() or term in p.abstract.lower()
        ]

    if filters.category != "all":
        result = [p for p in result if in_category(p, filters.category)]

    if filters.study_types:
        wanted = [t.lower() for t in filters.study_types]
        result = [p for p in result if any(t in p.study_type.lower() for t in wanted)]

    if filters.min_credibility is not None:
        result = [p for p in result if p.credibility_score >= filters.min_credibility]
    if filters.max_credibility is not None:
        result = [p for p in result if p.credibility_score <= filters.max_credibility]

    if filters.min_year is not None:
        result = [p for p in result if p.year >= filters.min_year]
    if filters.max_year is not None:
        result = [p for p in result if p.year <= filters.max_year]

    return result


def sort_papers(papers: list[ResearchPaper], sort_by: str = "relevance") -> list[ResearchPaper]:
    """
    Order papers for display.

    There is no relevance or citation signal in the mock data, so
    "relevance" falls back to credibility and "citations" to year.
    """
    if sort_by in ("date", "citations"):
        return sorted(papers, key=lambda p: p.year, reverse=True)
    return sorted(papers, key=lambda p: p.credibility_score, reverse=True)


def paginate(
    papers: list[ResearchPaper],
    page: int = 1,
    per_page: int = STUDIES_PER_PAGE,
) -> Page:
    """
    Slice one 1-based page out of ``papers``.

    Raises:
        ValueError: If page or per_page is less than 1.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")

    start = (page - 1) * per_page
    return Page(
        items=papers[start:start + per_page],
        page=page,
        per_page=per_page,
        total=len(papers),
    )


def browse(
    papers: list[ResearchPaper],
    filters: LibraryFilters,
    page: int = 1,
    per_page: int = STUDIES_PER_PAGE,
) -> Page:
    """Filter, sort and paginate in one step."""
    return paginate(sort_papers(filter_papers(papers, filters), filters.sort_by), page, per_page)


def category_counts(papers: list[ResearchPaper]) -> dict[str, int]:
    """Number of papers per library category, for the navigation sidebar."""
    return {c: sum(1 for p in papers if in_category(p, c)) for c in CATEGORIES}


# ---------------------------------------------------------------------------
# Curated collections
# ---------------------------------------------------------------------------

COLLECTIONS: dict[str, dict] = {
    "sleep-science": {
        "name": "Sleep Science",
        "description": "Studies on cannabinoids, sleep latency and sleep quality",
        "category": "sleep",
    },
    "anxiety-mood": {
        "name": "Anxiety & Mood",
        "description": "CBD and low-dose THC research on anxiety and stress",
        "category": "anxiety",
    },
    "pain-management": {
        "name": "Pain Management",
        "description": "Evidence for cannabinoids in chronic pain",
        "category": "pain",
    },
    "reviews": {
        "name": "Reviews & Meta-Analyses",
        "description": "Systematic and narrative reviews summarizing the field",
        "category": "reviews",
    },
}


def collection_papers(collection_id: str, papers: list[ResearchPaper]) -> list[ResearchPaper]:
    """
    Resolve a curated collection to its papers, best first.

    Raises:
        ValueError: If the collection id is unknown.
    """
    if collection_id not in COLLECTIONS:
        raise ValueError(
            f"Unknown collection: {collection_id!r} (expected one of {sorted(COLLECTIONS)})"
        )
    category = COLLECTIONS[collection_id]["category"]
    return sort_papers([p for p in papers if in_category(p, category)], "credibility")
