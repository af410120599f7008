"""
Demo script showing the complete chat pipeline.

For each query, outputs:
- Detected intent and the explanation served to the widget
- Recommended products with match scores
- Follow-up suggestions
- Research context (papers, evidence strength, credibility)

Runs in-process by default. With ``--url`` the same queries are sent to a
running server instead.

Usage:
    python scripts/demo.py
    python scripts/demo.py --query "something for sleep" --experience new
    python scripts/demo.py --all --catalog hemp
    python scripts/demo.py --url http://localhost:8000 --json
"""

import argparse
import json

import httpx

from sage.config import (
    CATALOG_NAME,
    DEMO_QUERIES,
    get_logger,
    log_banner,
    log_kv,
    log_section,
)
from sage.core import ExperienceLevel, Query
from sage.data.catalog import CATALOGS, get_catalog
from sage.services.chat import handle_chat

logger = get_logger(__name__)


def run_local(query: str, experience: str, catalog_name: str) -> dict:
    """Answer a query in-process and return the wire-format dict."""
    response = handle_chat(
        Query(text=query, experience_level=ExperienceLevel.parse(experience)),
        get_catalog(catalog_name),
    )
    body = response.to_dict()
    body["intent"] = response.intent.value
    return body


def run_remote(query: str, experience: str, url: str) -> dict:
    """POST a query to a running server."""
    resp = httpx.post(
        f"{url.rstrip('/')}/api/sage",
        json={"query": query, "experience_level": experience},
        timeout=10.0,
    )
    resp.raise_for_status()
    return resp.json()


def show(query: str, body: dict) -> None:
    log_banner(logger, f'QUERY: "{query}"', width=70)
    if "intent" in body:
        log_kv(logger, "Intent", body["intent"])
    logger.info(body["explanation"])

    log_section(logger, "PRODUCTS", width=70)
    for i, product in enumerate(body["products"], 1):
        logger.info(
            "%d. %s [%s] %s (score %d)",
            i,
            product["name"],
            product["category"],
            product["price"],
            product.get("match_score", 0),
        )

    log_section(logger, "SUGGESTIONS", width=70)
    for suggestion in body["suggestions"]:
        logger.info("  - %s", suggestion)

    summary = body.get("educational_summary") or {}
    studies = (body.get("educational_resources") or {}).get("research_studies", {})
    if studies:
        log_section(logger, "RESEARCH", width=70)
        log_kv(logger, "Papers", studies.get("total_found", 0))
        log_kv(logger, "Evidence strength", summary.get("evidence_strength"))
        log_kv(logger, "Confidence", summary.get("confidence_level"))
        for paper in studies.get("papers", []):
            logger.info("  %s (%s) %.1f", paper["title"], paper["year"], paper["credibility_score"])


def main():
    parser = argparse.ArgumentParser(description="Demo chat pipeline")
    parser.add_argument(
        "--query",
        "-q",
        type=str,
        default="I can't sleep, what helps?",
        help="Query to demonstrate",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Run every standard demo query",
    )
    parser.add_argument(
        "--experience",
        "-e",
        choices=[level.value for level in ExperienceLevel],
        default="casual",
        help="Experience level (default: casual)",
    )
    parser.add_argument(
        "--catalog",
        choices=sorted(CATALOGS),
        default=CATALOG_NAME,
        help="Catalog for in-process runs",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Base URL of a running server (skips the in-process pipeline)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON instead of formatted text",
    )
    args = parser.parse_args()

    queries = DEMO_QUERIES if args.all else [args.query]
    results = []
    for query in queries:
        if args.url:
            body = run_remote(query, args.experience, args.url)
        else:
            body = run_local(query, args.experience, args.catalog)
        results.append({"query": query, "response": body})
        if not args.json:
            show(query, body)

    if args.json:
        print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
