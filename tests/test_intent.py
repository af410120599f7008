"""Tests for sage.core.intent: keyword classification and catalog filters."""

import pytest

from sage.core.intent import classify_intent, filter_catalog, matched_topics
from sage.core.models import IntentCategory
from sage.core.research import RESEARCH_TOPICS
from sage.data.catalog import HEMP_PRODUCTS, PREMO_PRODUCTS


def _ids(products):
    return [p.id for p in products]


class TestClassifyIntent:
    @pytest.mark.parametrize(
        "query,expected",
        [
            ("i can't sleep", IntentCategory.SLEEP),
            ("insomnia again", IntentCategory.SLEEP),
            ("always tired", IntentCategory.SLEEP),
            ("need energy", IntentCategory.ENERGY),
            ("help me focus", IntentCategory.ENERGY),
            ("my knee hurts", IntentCategory.PAIN),
            ("back aches", IntentCategory.PAIN),
            ("stress relief", IntentCategory.ANXIETY),
            ("keep me calm", IntentCategory.ANXIETY),
            ("first time", IntentCategory.BEGINNER),
            ("i'm new here", IntentCategory.BEGINNER),
            ("pre-rolls please", IntentCategory.DEFAULT),
            ("", IntentCategory.DEFAULT),
        ],
    )
    def test_keywords(self, query, expected):
        assert classify_intent(query) is expected

    def test_priority_order(self):
        # sleep outranks anxiety, energy outranks beginner
        assert classify_intent("insomnia and anxiety") is IntentCategory.SLEEP
        assert classify_intent("first time, need focus") is IntentCategory.ENERGY
        assert classify_intent("pain and stress") is IntentCategory.PAIN

    def test_substring_matching(self):
        # "news" contains "new"; classification is plain substring search
        assert classify_intent("any news?") is IntentCategory.BEGINNER


class TestMatchedTopics:
    def test_returns_all_matches_in_order(self):
        topics = matched_topics("anxiety keeps me from sleep", RESEARCH_TOPICS)
        assert topics == [IntentCategory.SLEEP, IntentCategory.ANXIETY]

    def test_no_match(self):
        assert matched_topics("pre-rolls", RESEARCH_TOPICS) == []


class TestFilterCatalog:
    def test_sleep(self):
        assert _ids(filter_catalog(IntentCategory.SLEEP, PREMO_PRODUCTS)) == [1, 5, 8]

    def test_energy(self):
        assert _ids(filter_catalog(IntentCategory.ENERGY, PREMO_PRODUCTS)) == [2]

    def test_pain(self):
        assert _ids(filter_catalog(IntentCategory.PAIN, PREMO_PRODUCTS)) == [1, 2, 4, 5, 6, 7]

    def test_anxiety(self):
        assert _ids(filter_catalog(IntentCategory.ANXIETY, PREMO_PRODUCTS)) == [4, 7]

    def test_beginner(self):
        assert _ids(filter_catalog(IntentCategory.BEGINNER, PREMO_PRODUCTS)) == [3, 7, 8]

    def test_default_keeps_everything(self):
        assert len(filter_catalog(IntentCategory.DEFAULT, PREMO_PRODUCTS)) == 8

    def test_hemp_catalog_can_be_empty(self):
        assert filter_catalog(IntentCategory.PAIN, HEMP_PRODUCTS) == []

    def test_sleep_products_qualify(self):
        for product in filter_catalog(IntentCategory.SLEEP, PREMO_PRODUCTS):
            assert (
                "sleep" in product.effects
                or "sedating" in product.effects
                or product.strain_type == "indica"
            )
