"""
Research library service.

Chooses the paper pool for a query (the mock research bundle when a query
is given, the whole library otherwise) and runs it through the pure
browse/export helpers in ``sage.core``.
"""

from __future__ import annotations

from dataclasses import asdict

from sage.config import STUDIES_PER_PAGE
from sage.core.export import export_papers
from sage.core.library import browse, category_counts, collection_papers, filter_papers, sort_papers
from sage.core.models import LibraryFilters, ResearchPaper
from sage.core.research import generate_research
from sage.data.papers import ALL_PAPERS


def papers_for_query(query: str | None) -> list[ResearchPaper]:
    """Papers the library shows for ``query``; blank queries browse everything."""
    if query and query.strip():
        return generate_research(query.lower()).papers
    return list(ALL_PAPERS)


def browse_library(
    query: str | None,
    filters: LibraryFilters | None = None,
    page: int = 1,
    per_page: int = STUDIES_PER_PAGE,
) -> dict:
    """
    One page of the research library as a serializable dict.

    Raises:
        ValueError: If ``page`` or ``per_page`` is below 1.
    """
    filters = filters or LibraryFilters()
    pool = papers_for_query(query)
    result = browse(pool, filters, page, per_page)
    return {
        "query": query,
        "filters": asdict(filters),
        "papers": [p.to_dict() for p in result.items],
        "page": result.page,
        "per_page": result.per_page,
        "total": result.total,
        "total_pages": result.total_pages,
        "has_next": result.has_next,
        "category_counts": category_counts(pool),
    }


def export_library(
    query: str | None,
    fmt: str,
    filters: LibraryFilters | None = None,
    include_abstracts: bool = True,
) -> tuple[str, str, str]:
    """
    Export every paper matching ``filters`` (unpaginated).

    Returns:
        Tuple of (body, media_type, filename).

    Raises:
        ValueError: If ``fmt`` is not a supported export format.
    """
    filters = filters or LibraryFilters()
    papers = sort_papers(filter_papers(papers_for_query(query), filters), filters.sort_by)
    return export_papers(papers, fmt, query=query, include_abstracts=include_abstracts)


def get_collection(collection_id: str) -> list[ResearchPaper]:
    """Curated collection drawn from the full library.

    Raises:
        ValueError: If the collection id is unknown.
    """
    return collection_papers(collection_id, list(ALL_PAPERS))
