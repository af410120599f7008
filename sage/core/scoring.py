"""
Additive match scoring for catalog products.

Rubric per product:
    +25  each effect tag that appears in the query
    +20  each cannabinoid named in the query that the product contains
    +30  category match (category equals the detected intent, or the
         category name appears in the query), counted once

Hyphens and underscores are read as spaces on both sides, so "pain-relief"
in a query matches the "pain relief" effect tag. Scores are not normalized
by catalog size or query length; they exist only to order products.
"""

from __future__ import annotations

from sage.config import MAX_PRODUCTS
from sage.core.intent import classify_intent, filter_catalog
from sage.core.models import CANNABINOIDS, IntentCategory, Product, ScoredProduct

EFFECT_POINTS = 25
CANNABINOID_POINTS = 20
CATEGORY_POINTS = 30


def normalize_terms(text: str) -> str:
    """Lower-case and read hyphens/underscores as spaces."""
    return text.lower().replace("-", " ").replace("_", " ")


def score_product(
    product: Product,
    lowered_query: str,
    intent: IntentCategory = IntentCategory.DEFAULT,
) -> int:
    """
    Compute the additive match score of one product for one query.

    Args:
        product: Catalog entry to score.
        lowered_query: Query text, already lower-cased.
        intent: Detected intent, used for the category bonus.

    Returns:
        Non-negative integer score.
    """
    query = normalize_terms(lowered_query)
    score = 0

    for effect in product.effects:
        if normalize_terms(effect) in query:
            score += EFFECT_POINTS

    for name in CANNABINOIDS:
        if name in query and product.contains(name):
            score += CANNABINOID_POINTS

    category = normalize_terms(product.category)
    if category == intent.value or category in query:
        score += CATEGORY_POINTS

    return score


def rank_products(
    products: list[Product] | tuple[Product, ...],
    lowered_query: str,
    intent: IntentCategory = IntentCategory.DEFAULT,
    k: int = MAX_PRODUCTS,
) -> list[ScoredProduct]:
    """
    Score every product and return the top ``k`` by score descending.

    Python's sort is stable, so equal scores keep their catalog order.
    """
    scored = [
        ScoredProduct(product=p, match_score=score_product(p, lowered_query, intent))
        for p in products
    ]
    scored.sort(key=lambda s: s.match_score, reverse=True)
    return scored[:k]


def classify_and_score(
    lowered_query: str,
    catalog: tuple[Product, ...] | list[Product],
    k: int = MAX_PRODUCTS,
) -> tuple[IntentCategory, list[ScoredProduct]]:
    """
    Classify the query, filter the catalog for that intent, then rank.

    The DEFAULT intent skips scoring entirely and returns the first ``k``
    catalog entries with a zero score, as does an intent whose filter
    matches nothing. The product list is empty only if the catalog is.

    Returns:
        Tuple of (intent, ranked products).
    """
    intent = classify_intent(lowered_query)

    if intent is IntentCategory.DEFAULT:
        return intent, _default_slice(catalog, k)

    candidates = filter_catalog(intent, catalog)
    if not candidates:
        return intent, _default_slice(catalog, k)

    return intent, rank_products(candidates, lowered_query, intent, k)


def _default_slice(
    catalog: tuple[Product, ...] | list[Product], k: int
) -> list[ScoredProduct]:
    return [ScoredProduct(product=p) for p in catalog[:k]]
