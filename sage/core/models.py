"""
Core domain models for the Sage chat backend.

All dataclasses are consolidated here for:
- Single source of truth for type definitions
- Easy imports across modules
- Clear domain model documentation

Models are organized by domain area.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum


# ============================================================================
# QUERY MODELS
# ============================================================================


class IntentCategory(Enum):
    """Keyword buckets a query is classified into, in priority order."""

    SLEEP = "sleep"
    ENERGY = "energy"
    PAIN = "pain"
    ANXIETY = "anxiety"
    BEGINNER = "beginner"
    DEFAULT = "default"


class ExperienceLevel(Enum):
    """How familiar the user says they are with cannabis products."""

    NEW = "new"
    CASUAL = "casual"
    EXPERIENCED = "experienced"

    @classmethod
    def parse(cls, value: str | None, default: ExperienceLevel | None = None) -> ExperienceLevel:
        """Map a loose string to a level, falling back to ``default`` (casual)."""
        fallback = default or cls.CASUAL
        if not value:
            return fallback
        try:
            return cls(value.strip().lower())
        except ValueError:
            return fallback


@dataclass
class Query:
    """
    A normalized chat query.

    ``text`` keeps the user's wording for echoing back; ``lowered`` is what
    every keyword check runs against.
    """

    text: str
    experience_level: ExperienceLevel = ExperienceLevel.CASUAL
    session_id: str | None = None

    @property
    def lowered(self) -> str:
        return self.text.lower()


# ============================================================================
# CATALOG MODELS
# ============================================================================


CANNABINOIDS = ("thc", "cbd", "cbn", "cbg", "cbc")


@dataclass(frozen=True)
class Product:
    """
    A static catalog entry.

    Cannabinoid content is stored per compound in milligrams (per package),
    with ``thc_percentage`` used instead for flower, vapes and concentrates.
    Catalog entries are created once at import time and never mutated.
    """

    id: int
    name: str
    description: str
    price: str
    category: str
    effects: tuple[str, ...] = ()
    strain_type: str | None = None
    thc_mg: float | None = None
    cbd_mg: float | None = None
    cbn_mg: float | None = None
    cbg_mg: float | None = None
    cbc_mg: float | None = None
    thc_percentage: float | None = None
    terpenes: tuple[tuple[str, float], ...] = ()  # (name, percent) pairs
    in_stock: bool = True
    lab_tested: bool = True

    def cannabinoid_amount(self, name: str) -> float:
        """Return the milligram (or percentage, for THC flower) amount of a cannabinoid."""
        name = name.lower()
        amount = getattr(self, f"{name}_mg", None) or 0.0
        if name == "thc" and not amount:
            amount = self.thc_percentage or 0.0
        return amount

    def contains(self, cannabinoid: str) -> bool:
        """True if the product has a nonzero amount of ``cannabinoid``."""
        return self.cannabinoid_amount(cannabinoid) > 0

    def to_dict(self) -> dict:
        """Serializable dict with empty optional fields dropped."""
        data = asdict(self)
        data["effects"] = list(self.effects)
        data["terpenes"] = dict(self.terpenes)
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class ScoredProduct:
    """A catalog product with the match score computed for one query."""

    product: Product
    match_score: int = 0

    def to_dict(self) -> dict:
        data = self.product.to_dict()
        data["match_score"] = self.match_score
        return data


# ============================================================================
# RESEARCH MODELS
# ============================================================================


@dataclass(frozen=True)
class ResearchPaper:
    """
    A hardcoded research citation shown in the research library.

    ``credibility_score`` is a fixed 0-10 rating, not a peer-review metric.
    """

    title: str
    authors: tuple[str, ...]
    journal: str
    year: int
    abstract: str
    study_type: str
    credibility_score: float
    source: str
    url: str | None = None
    doi: str | None = None
    pmid: str | None = None

    @property
    def key(self) -> str:
        """Identifier used for saved studies and collections."""
        return self.doi or self.title

    def to_dict(self, include_abstract: bool = True) -> dict:
        data = asdict(self)
        data["authors"] = list(self.authors)
        if not include_abstract:
            data.pop("abstract")
        return data


@dataclass
class SourceCredibility:
    """Aggregate credibility of the papers returned for a query."""

    total_papers: int
    average_credibility: float
    high_credibility_count: int
    source_distribution: dict[str, int]
    credibility_level: str


@dataclass
class ResearchResult:
    """
    Output of the mock research generator for a single query.

    Feeds both ``educational_resources`` (papers, credibility) and
    ``educational_summary`` (strength, findings) in the chat response.
    """

    papers: list[ResearchPaper]
    compounds_researched: list[str]
    evidence_strength: str  # "limited", "moderate", "strong"
    confidence_level: str  # "low", "moderate", "high"
    key_findings: list[str]
    research_gaps: list[str]
    credibility: SourceCredibility


# ============================================================================
# RESPONSE MODELS
# ============================================================================


@dataclass
class SageResponse:
    """
    Final chat response, ready for JSON serialization.

    ``products`` always holds between one and three entries.
    """

    session_id: str
    explanation: str
    products: list[ScoredProduct]
    suggestions: list[str]
    educational_resources: dict | None = None
    educational_summary: dict | None = None
    disclaimer: str | None = None
    status_message: str | None = None
    service_status: int = 200
    intent: IntentCategory = IntentCategory.DEFAULT

    def to_dict(self) -> dict:
        """Convert to the wire format consumed by the chat widget."""
        body = {
            "session_id": self.session_id,
            "response": self.explanation,
            "explanation": self.explanation,
            "products": [p.to_dict() for p in self.products],
            "suggestions": list(self.suggestions),
            "educational_resources": self.educational_resources,
            "educational_summary": self.educational_summary,
            "service_status": self.service_status,
        }
        if self.disclaimer:
            body["disclaimer"] = self.disclaimer
        if self.status_message:
            body["status_message"] = self.status_message
        return body


# ============================================================================
# RESEARCH LIBRARY MODELS
# ============================================================================


@dataclass
class LibraryFilters:
    """
    Filter state for browsing the research library.

    Ranges are inclusive; ``None`` bounds mean unbounded.
    """

    search_term: str = ""
    category: str = "all"
    study_types: list[str] = field(default_factory=list)
    min_credibility: float | None = None
    max_credibility: float | None = None
    min_year: int | None = None
    max_year: int | None = None
    sort_by: str = "relevance"


@dataclass
class Page:
    """One page of a filtered paper list."""

    items: list[ResearchPaper]
    page: int
    per_page: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return -(-self.total // self.per_page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
