"""
Mock research generator.

Every query gets the two base papers. Each of the sleep, pain and anxiety
topics found in the query adds its paper (all matching topics contribute,
in that order), and the list is capped at MAX_RESEARCH_PAPERS. Evidence
strength and key findings come from the same topic checks. Nothing here
touches a real index.
"""

from __future__ import annotations

from collections import Counter

from sage.config import HIGH_CREDIBILITY_THRESHOLD, MAX_RESEARCH_PAPERS
from sage.core.intent import matched_topics
from sage.core.models import (
    IntentCategory,
    ResearchPaper,
    ResearchResult,
    SourceCredibility,
)
from sage.data.papers import ANXIETY_PAPER, BASE_PAPERS, PAIN_PAPER, SLEEP_PAPER

RESEARCH_TOPICS = (IntentCategory.SLEEP, IntentCategory.PAIN, IntentCategory.ANXIETY)

TOPIC_PAPERS: dict[IntentCategory, ResearchPaper] = {
    IntentCategory.SLEEP: SLEEP_PAPER,
    IntentCategory.PAIN: PAIN_PAPER,
    IntentCategory.ANXIETY: ANXIETY_PAPER,
}

# Per-topic summary: (evidence strength, compounds, findings, gaps)
TOPIC_EVIDENCE: dict[IntentCategory, tuple[str, list[str], list[str], list[str]]] = {
    IntentCategory.SLEEP: (
        "moderate",
        ["THC", "CBN", "CBD"],
        [
            "THC may shorten sleep latency in the short term",
            "Tolerance to sleep effects can develop with nightly use",
            "CBD shows early promise for insomnia",
        ],
        ["Few long-term controlled trials of CBN for sleep"],
    ),
    IntentCategory.PAIN: (
        "strong",
        ["THC", "CBD"],
        [
            "Substantial evidence supports cannabinoids for chronic pain in adults",
            "Balanced THC:CBD ratios reduce psychoactive side effects",
        ],
        ["Optimal dosing for specific pain conditions is not established"],
    ),
    IntentCategory.ANXIETY: (
        "moderate",
        ["CBD", "THC"],
        [
            "Acute CBD dosing reduced anxiety in human experimental studies",
            "Low THC doses may reduce anxiety while higher doses can increase it",
        ],
        ["Chronic CBD dosing for anxiety disorders needs larger trials"],
    ),
}

_GENERAL_FINDINGS = [
    "Cannabinoids show moderate-quality evidence for chronic pain and spasticity",
    "Terpenes may modulate cannabinoid effects (entourage effect)",
]
_GENERAL_GAPS = ["Most studies use pharmaceutical cannabinoids, not retail products"]

_STRENGTH_ORDER = {"limited": 0, "moderate": 1, "strong": 2}
_CONFIDENCE_BY_STRENGTH = {"limited": "low", "moderate": "moderate", "strong": "high"}


def select_papers(lowered_query: str, max_papers: int = MAX_RESEARCH_PAPERS) -> list[ResearchPaper]:
    """Base papers plus one paper per matched topic, capped at ``max_papers``."""
    papers = list(BASE_PAPERS)
    for topic in matched_topics(lowered_query, RESEARCH_TOPICS):
        papers.append(TOPIC_PAPERS[topic])
    return papers[:max_papers]


def summarize_credibility(
    papers: list[ResearchPaper],
    high_threshold: float = HIGH_CREDIBILITY_THRESHOLD,
) -> SourceCredibility:
    """Aggregate credibility scores and source counts for a paper list."""
    if not papers:
        return SourceCredibility(
            total_papers=0,
            average_credibility=0.0,
            high_credibility_count=0,
            source_distribution={},
            credibility_level="low",
        )

    average = sum(p.credibility_score for p in papers) / len(papers)
    high_count = sum(1 for p in papers if p.credibility_score >= high_threshold)

    if average >= 8.5:
        level = "high"
    elif average >= 7.0:
        level = "moderate"
    else:
        level = "low"

    return SourceCredibility(
        total_papers=len(papers),
        average_credibility=round(average, 2),
        high_credibility_count=high_count,
        source_distribution=dict(Counter(p.source for p in papers)),
        credibility_level=level,
    )


def generate_research(lowered_query: str, max_papers: int = MAX_RESEARCH_PAPERS) -> ResearchResult:
    """
    Build the mock research bundle for a query.

    Args:
        lowered_query: Query text, already lower-cased.
        max_papers: Cap on the returned paper list.

    Returns:
        ResearchResult with papers, evidence strength and findings.
    """
    papers = select_papers(lowered_query, max_papers)
    topics = matched_topics(lowered_query, RESEARCH_TOPICS)

    strength = "limited"
    compounds: list[str] = []
    findings: list[str] = []
    gaps: list[str] = []

    for topic in topics:
        topic_strength, topic_compounds, topic_findings, topic_gaps = TOPIC_EVIDENCE[topic]
        if _STRENGTH_ORDER[topic_strength] > _STRENGTH_ORDER[strength]:
            strength = topic_strength
        compounds.extend(c for c in topic_compounds if c not in compounds)
        findings.extend(topic_findings)
        gaps.extend(topic_gaps)

    if not topics:
        compounds = ["THC", "CBD"]
        findings = list(_GENERAL_FINDINGS)
        gaps = list(_GENERAL_GAPS)

    return ResearchResult(
        papers=papers,
        compounds_researched=compounds,
        evidence_strength=strength,
        confidence_level=_CONFIDENCE_BY_STRENGTH[strength],
        key_findings=findings,
        research_gaps=gaps,
        credibility=summarize_credibility(papers),
    )
