"""Tests for sage.api: routes, error boundary, CORS and middleware.

Uses the real application factory; the catalog is static so no state
needs mocking.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from sage.api.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app("premo"))


@pytest.fixture
def hemp_client():
    return TestClient(create_app("hemp"))


def _names(resp):
    return [p["name"] for p in resp.json()["products"]]


class TestAppFactory:
    def test_unknown_catalog_rejected(self):
        with pytest.raises(ValueError, match="Unknown catalog"):
            create_app("nope")

    def test_lifespan_runs(self):
        with TestClient(create_app()) as c:
            assert c.get("/health").status_code == 200


class TestHealthEndpoint:
    def test_healthy(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "catalog": "premo", "catalog_size": 8}

    def test_hemp_catalog(self, hemp_client):
        assert hemp_client.get("/health").json()["catalog_size"] == 3

    def test_root_redirects_to_docs(self, client):
        resp = client.get("/", follow_redirects=False)
        assert resp.status_code in (302, 307)
        assert resp.headers["location"] == "/docs"


class TestChatEndpoint:
    def test_sleep_query(self, client):
        resp = client.post("/api/sage", json={"query": "I can't sleep, what helps?"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["response"].startswith("For better sleep")
        assert _names(resp) == [
            "Purple Punch (Indica)",
            "Wedding Cake Live Resin",
            "Nighttime THC Gummies",
        ]
        assert len(data["suggestions"]) == 4
        assert data["service_status"] == 200
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_text_alias(self, client):
        resp = client.post("/api/sage", json={"text": "need energy"})
        assert _names(resp) == ["Sour Diesel (Sativa)"]

    def test_v1_alias_path(self, client):
        resp = client.post("/api/v1/chat/message", json={"query": "need energy"})
        assert resp.status_code == 200
        assert _names(resp) == ["Sour Diesel (Sativa)"]

    def test_missing_query_uses_default(self, client):
        resp = client.post("/api/sage", json={})
        assert resp.status_code == 200
        assert _names(resp) == [
            "Purple Punch (Indica)",
            "Sour Diesel (Sativa)",
            "Watermelon THC Gummies",
        ]
        assert resp.json()["educational_summary"]["query"] == "popular products"

    def test_empty_body_uses_default(self, client):
        resp = client.post("/api/sage")
        assert resp.status_code == 200
        assert len(resp.json()["products"]) == 3

    def test_experience_level_and_session(self, client):
        resp = client.post(
            "/api/sage",
            json={"query": "pain", "experience_level": "new", "session_id": "s-42"},
        )
        data = resp.json()
        assert data["session_id"] == "s-42"
        assert data["explanation"].startswith("Since you're new to cannabis")

    def test_unknown_experience_level_reads_casual(self, client):
        resp = client.post("/api/sage", json={"query": "pain", "experience_level": "guru"})
        data = resp.json()
        assert data["educational_resources"]["educational_level"] == "casual"

    def test_hemp_catalog(self, hemp_client):
        resp = hemp_client.post("/api/sage", json={"query": "cbd for sleep"})
        products = resp.json()["products"]
        assert len(products) == 1
        assert products[0]["name"] == "Night Time CBD Gummies"
        assert products[0]["match_score"] == 75

    def test_get_tolerated(self, client):
        resp = client.get("/api/sage", params={"query": "something for pain relief?"})
        assert resp.status_code == 200
        assert _names(resp)[:2] == ["Purple Punch (Indica)", "1:1 THC:CBD Tincture"]


class TestChatErrorBoundary:
    def test_malformed_json_gets_fallback(self, client):
        resp = client.post(
            "/api/sage",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 200
        assert _names(resp) == ["Purple Punch (Indica)", "Sour Diesel (Sativa)"]

    def test_deeply_nested_json_gets_fallback(self, client):
        resp = client.post(
            "/api/sage",
            content=b"[" * 100000,
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 200
        assert _names(resp) == ["Purple Punch (Indica)", "Sour Diesel (Sativa)"]
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_wrong_type_gets_fallback(self, client):
        resp = client.post("/api/sage", json={"query": 123})
        assert resp.status_code == 200
        assert len(resp.json()["products"]) == 2

    def test_non_object_body_gets_fallback(self, client):
        resp = client.post("/api/sage", json=["sleep"])
        assert resp.status_code == 200
        assert len(resp.json()["products"]) == 2

    def test_too_long_query_gets_fallback(self, client):
        resp = client.post("/api/sage", json={"query": "sleep " * 200})
        assert resp.status_code == 200
        assert len(resp.json()["products"]) == 2

    def test_pipeline_failure_gets_fallback(self, client):
        with patch("sage.api.routes.handle_chat", side_effect=RuntimeError("boom")):
            resp = client.post("/api/sage", json={"query": "sleep", "session_id": "s-1"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["session_id"] == "s-1"
        assert data["response"].startswith("Welcome to Premo Cannabis")

    def test_strict_mode_invalid_request(self, client):
        with patch("sage.api.routes.STRICT_ERRORS", True):
            resp = client.post(
                "/api/sage",
                content="{not json",
                headers={"Content-Type": "application/json"},
            )
        assert resp.status_code == 400
        assert len(resp.json()["products"]) == 2

    def test_strict_mode_internal_error(self, client):
        with patch("sage.api.routes.STRICT_ERRORS", True), patch(
            "sage.api.routes.handle_chat", side_effect=RuntimeError("boom")
        ):
            resp = client.post("/api/sage", json={"query": "sleep"})
        assert resp.status_code == 500
        assert len(resp.json()["products"]) == 2

    def test_errors_counted(self, client):
        client.post("/api/sage", content="{", headers={"Content-Type": "application/json"})
        body = client.get("/metrics").text
        assert 'sage_errors_total{error_type="invalid_request"}' in body


class TestChatMethods:
    def test_options_empty_body(self, client):
        resp = client.options("/api/sage")
        assert resp.status_code == 200
        assert resp.content == b""
        assert resp.headers["access-control-allow-origin"] == "*"
        assert "POST" in resp.headers["access-control-allow-methods"]

    def test_browser_preflight_empty_body(self, client):
        resp = client.options(
            "/api/sage",
            headers={
                "Origin": "https://shop.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert resp.status_code == 200
        assert resp.content == b""
        assert resp.headers["access-control-allow-origin"] == "*"

    @pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE"])
    def test_other_methods_rejected(self, client, method):
        resp = client.request(method, "/api/sage")
        assert resp.status_code == 405
        assert resp.json() == {"error": "Method not allowed"}


class TestRestrictedOrigins:
    @pytest.fixture
    def shop_client(self):
        return TestClient(create_app("premo", cors_origins=["https://shop.example"]))

    def test_listed_origin_echoed(self, shop_client):
        resp = shop_client.post(
            "/api/sage",
            json={"query": "sleep"},
            headers={"Origin": "https://shop.example"},
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "https://shop.example"

    def test_unlisted_origin_not_allowed(self, shop_client):
        resp = shop_client.post(
            "/api/sage",
            json={"query": "sleep"},
            headers={"Origin": "https://evil.example"},
        )
        assert resp.status_code == 200
        assert "access-control-allow-origin" not in resp.headers

    def test_fallback_respects_origins(self, shop_client):
        resp = shop_client.post(
            "/api/sage",
            content="{not json",
            headers={"Content-Type": "application/json", "Origin": "https://evil.example"},
        )
        assert len(resp.json()["products"]) == 2
        assert "access-control-allow-origin" not in resp.headers

    def test_unlisted_preflight_rejected(self, shop_client):
        resp = shop_client.options(
            "/api/sage",
            headers={
                "Origin": "https://evil.example",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert resp.status_code == 400
        assert "access-control-allow-origin" not in resp.headers


class TestResearchEndpoints:
    def test_browse_all(self, client):
        data = client.get("/api/research").json()
        assert data["total"] == 6
        assert data["page"] == 1
        assert data["category_counts"]["reviews"] == 4
        scores = [p["credibility_score"] for p in data["papers"]]
        assert scores == sorted(scores, reverse=True)

    def test_browse_for_query(self, client):
        data = client.get("/api/research", params={"query": "can't sleep"}).json()
        assert data["total"] == 3

    def test_filters_and_pagination(self, client):
        data = client.get(
            "/api/research",
            params={"category": "reviews", "sort_by": "date", "page": 2, "per_page": 3},
        ).json()
        assert data["total"] == 4
        assert data["total_pages"] == 2
        assert len(data["papers"]) == 1
        assert data["has_next"] is False

    def test_study_type_list(self, client):
        data = client.get(
            "/api/research", params=[("study_type", "consensus"), ("study_type", "case series")]
        ).json()
        assert data["total"] == 2

    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"category": "bogus"}, {"sort_by": "random"}, {"min_credibility": 11}],
    )
    def test_invalid_params_422(self, client, params):
        assert client.get("/api/research", params=params).status_code == 422

    def test_export_csv(self, client):
        resp = client.get("/api/research/export", params={"format": "csv", "query": "sleep"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        disposition = resp.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="sage-research-sleep-')
        assert disposition.endswith('.csv"')
        assert resp.text.startswith('"Title","Authors"')

    def test_export_bibtex(self, client):
        resp = client.get("/api/research/export", params={"format": "bibtex"})
        assert resp.status_code == 200
        assert resp.text.count("@article{") == 6

    def test_export_defaults_to_json(self, client):
        resp = client.get("/api/research/export", params={"category": "pain"})
        assert resp.json()["total_papers"] == 2

    def test_export_unsupported_format(self, client):
        resp = client.get("/api/research/export", params={"format": "docx"})
        assert resp.status_code == 400
        assert "Unsupported export format" in resp.json()["error"]

    def test_collection(self, client):
        data = client.get("/api/research/collections/sleep-science").json()
        assert data["name"] == "Sleep Science"
        assert len(data["papers"]) == 3

    def test_unknown_collection_404(self, client):
        resp = client.get("/api/research/collections/nope")
        assert resp.status_code == 404
        assert "Unknown collection" in resp.json()["error"]


class TestMiddleware:
    def test_latency_and_request_id_headers(self, client):
        resp = client.get("/health")
        assert float(resp.headers["x-response-time-ms"]) >= 0
        assert len(resp.headers["x-request-id"]) == 12

    def test_metrics_endpoint(self, client):
        client.post("/api/sage", json={"query": "sleep"})
        resp = client.get("/metrics")
        assert resp.status_code == 200
        assert "sage_requests_total" in resp.text
        assert 'sage_intent_total{intent="sleep"}' in resp.text
