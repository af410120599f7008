"""
Keyword intent classification and per-intent catalog filters.

Classification is a substring scan over a fixed priority list: the first
category with any keyword present in the lower-cased query wins. There is
no multi-intent handling; "insomnia and anxiety" is a sleep query.
"""

from __future__ import annotations

from typing import Callable

from sage.core.models import IntentCategory, Product


# Priority order matters: earlier categories win ties.
INTENT_KEYWORDS: dict[IntentCategory, tuple[str, ...]] = {
    IntentCategory.SLEEP: ("sleep", "insomnia", "tired"),
    IntentCategory.ENERGY: ("energy", "focus", "productive"),
    IntentCategory.PAIN: ("pain", "hurt", "ache"),
    IntentCategory.ANXIETY: ("anxiety", "stress", "calm"),
    IntentCategory.BEGINNER: ("beginner", "first", "new"),
}


def classify_intent(lowered_query: str) -> IntentCategory:
    """
    Return the first intent category whose keywords appear in the query.

    Args:
        lowered_query: Query text, already lower-cased.

    Returns:
        The matching IntentCategory, or DEFAULT when nothing matches.
    """
    for category, keywords in INTENT_KEYWORDS.items():
        if any(keyword in lowered_query for keyword in keywords):
            return category
    return IntentCategory.DEFAULT


def matched_topics(lowered_query: str, topics: tuple[IntentCategory, ...]) -> list[IntentCategory]:
    """Return every category in ``topics`` whose keywords appear, in order.

    Unlike classify_intent this does not stop at the first hit; the research
    generator uses it to attach one paper per matching topic.
    """
    return [
        topic
        for topic in topics
        if any(keyword in lowered_query for keyword in INTENT_KEYWORDS[topic])
    ]


# ---------------------------------------------------------------------------
# Catalog filters
# ---------------------------------------------------------------------------


def _is_sleep_product(p: Product) -> bool:
    return "sleep" in p.effects or "sedating" in p.effects or p.strain_type == "indica"


def _is_energy_product(p: Product) -> bool:
    return "energy" in p.effects or "focus" in p.effects or p.strain_type == "sativa"


def _is_pain_product(p: Product) -> bool:
    return "pain relief" in p.effects or (p.thc_percentage or 0) > 20


def _is_anxiety_product(p: Product) -> bool:
    return "calm" in p.effects or "balanced" in p.effects or (p.cbd_mg or 0) > 0


def _is_beginner_product(p: Product) -> bool:
    # Low-dose edibles, mild flower, or anything with CBD to take the edge off
    return (
        (p.thc_mg is not None and p.thc_mg <= 100)
        or (p.thc_percentage is not None and p.thc_percentage < 20)
        or (p.cbd_mg or 0) > 0
    )


INTENT_FILTERS: dict[IntentCategory, Callable[[Product], bool]] = {
    IntentCategory.SLEEP: _is_sleep_product,
    IntentCategory.ENERGY: _is_energy_product,
    IntentCategory.PAIN: _is_pain_product,
    IntentCategory.ANXIETY: _is_anxiety_product,
    IntentCategory.BEGINNER: _is_beginner_product,
}


def filter_catalog(
    intent: IntentCategory,
    catalog: tuple[Product, ...] | list[Product],
) -> list[Product]:
    """
    Keep the catalog products that suit ``intent``, preserving catalog order.

    DEFAULT has no filter and returns the whole catalog. The result may be
    empty; callers decide on the fallback slice.
    """
    predicate = INTENT_FILTERS.get(intent)
    if predicate is None:
        return list(catalog)
    return [p for p in catalog if predicate(p)]
