"""Tests for sage.core.models: dataclass construction and methods."""

import dataclasses

import pytest

from sage.core.models import (
    ExperienceLevel,
    IntentCategory,
    Page,
    Product,
    Query,
    ResearchPaper,
    SageResponse,
    ScoredProduct,
)
from sage.data.catalog import PREMO_PRODUCTS


def _paper(**overrides) -> ResearchPaper:
    fields = dict(
        title="A Study",
        authors=("Doe J", "Roe R"),
        journal="Journal",
        year=2020,
        abstract="Abstract text",
        study_type="review",
        credibility_score=8.0,
        source="PubMed",
    )
    fields.update(overrides)
    return ResearchPaper(**fields)


class TestExperienceLevel:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("new", ExperienceLevel.NEW),
            ("Experienced", ExperienceLevel.EXPERIENCED),
            ("  casual ", ExperienceLevel.CASUAL),
        ],
    )
    def test_parse_known_values(self, raw, expected):
        assert ExperienceLevel.parse(raw) is expected

    def test_parse_unknown_falls_back_to_casual(self):
        assert ExperienceLevel.parse("expert") is ExperienceLevel.CASUAL

    def test_parse_none_uses_default(self):
        assert ExperienceLevel.parse(None, ExperienceLevel.NEW) is ExperienceLevel.NEW


class TestQuery:
    def test_lowered(self):
        q = Query(text="Can't SLEEP")
        assert q.lowered == "can't sleep"
        assert q.text == "Can't SLEEP"

    def test_defaults(self):
        q = Query(text="hi")
        assert q.experience_level is ExperienceLevel.CASUAL
        assert q.session_id is None


class TestProduct:
    def test_frozen(self):
        product = PREMO_PRODUCTS[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.name = "Changed"

    def test_thc_percentage_counts_as_thc(self):
        flower = Product(
            id=1, name="F", description="", price="$1", category="Flower",
            thc_percentage=22.5,
        )
        assert flower.contains("thc")
        assert flower.cannabinoid_amount("THC") == 22.5
        assert not flower.contains("cbd")

    def test_milligram_amounts(self):
        tincture = PREMO_PRODUCTS[6]
        assert tincture.cannabinoid_amount("cbd") == 300
        assert tincture.contains("thc")
        assert not tincture.contains("cbn")

    def test_to_dict_drops_unset_fields(self):
        data = PREMO_PRODUCTS[2].to_dict()
        assert data["name"] == "Watermelon THC Gummies"
        assert data["effects"] == ["relaxation", "euphoria", "happy"]
        assert data["thc_mg"] == 100
        assert "thc_percentage" not in data
        assert "strain_type" not in data

    def test_hashable(self):
        products = set(PREMO_PRODUCTS)
        assert len(products) == len(PREMO_PRODUCTS)
        assert PREMO_PRODUCTS[0] in products

    def test_terpenes_serialized_as_mapping(self):
        data = PREMO_PRODUCTS[0].to_dict()
        assert data["terpenes"] == {"myrcene": 0.9, "caryophyllene": 0.4, "limonene": 0.2}


class TestScoredProduct:
    def test_to_dict_includes_score(self):
        data = ScoredProduct(product=PREMO_PRODUCTS[0], match_score=25).to_dict()
        assert data["match_score"] == 25
        assert data["id"] == 1


class TestResearchPaper:
    def test_key_prefers_doi(self):
        assert _paper(doi="10.1/x").key == "10.1/x"
        assert _paper().key == "A Study"

    def test_to_dict_without_abstract(self):
        data = _paper().to_dict(include_abstract=False)
        assert "abstract" not in data
        assert data["authors"] == ["Doe J", "Roe R"]


class TestSageResponse:
    def test_wire_format(self):
        response = SageResponse(
            session_id="sage-1",
            explanation="Hello",
            products=[ScoredProduct(product=PREMO_PRODUCTS[0])],
            suggestions=["a"],
            disclaimer="21+",
            intent=IntentCategory.SLEEP,
        )
        body = response.to_dict()
        assert body["response"] == body["explanation"] == "Hello"
        assert body["service_status"] == 200
        assert body["disclaimer"] == "21+"
        assert "status_message" not in body
        assert "intent" not in body
        assert body["products"][0]["name"] == "Purple Punch (Indica)"


class TestPage:
    def test_total_pages_rounds_up(self):
        page = Page(items=[], page=1, per_page=4, total=6)
        assert page.total_pages == 2
        assert page.has_next

    def test_empty(self):
        page = Page(items=[], page=1, per_page=10, total=0)
        assert page.total_pages == 0
        assert not page.has_next
