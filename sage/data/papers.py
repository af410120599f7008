"""
Hardcoded research papers for the mock research generator.

These are canned summaries for display in the research library. They are
not fetched from any index and no citation is validated at runtime.
"""

from __future__ import annotations

from sage.core.models import ResearchPaper


# Always included, regardless of the query.
BASE_PAPERS: tuple[ResearchPaper, ...] = (
    ResearchPaper(
        title="Cannabinoids for Medical Use: A Systematic Review and Meta-analysis",
        authors=("Whiting PF", "Wolff RF", "Deshpande S", "Di Nisio M"),
        journal="JAMA",
        year=2015,
        abstract=(
            "Systematic review of randomized clinical trials of cannabinoids across "
            "chronic pain, spasticity, nausea, sleep disorders and anxiety. Moderate-quality "
            "evidence supports use for chronic pain and spasticity; evidence for other "
            "conditions is of lower quality."
        ),
        study_type="systematic review and meta-analysis",
        credibility_score=9.5,
        source="PubMed",
        url="https://doi.org/10.1001/jama.2015.6358",
        doi="10.1001/jama.2015.6358",
    ),
    ResearchPaper(
        title="Taming THC: Potential Cannabis Synergy and Phytocannabinoid-Terpenoid Entourage Effects",
        authors=("Russo EB",),
        journal="British Journal of Pharmacology",
        year=2011,
        abstract=(
            "Review of how minor cannabinoids such as CBD, CBG and CBN and terpenoids such as "
            "limonene, myrcene, linalool and pinene may modulate the effects of THC, "
            "proposing a pharmacological basis for the entourage effect."
        ),
        study_type="narrative review",
        credibility_score=8.2,
        source="PubMed",
        url="https://doi.org/10.1111/j.1476-5381.2011.01238.x",
        doi="10.1111/j.1476-5381.2011.01238.x",
    ),
)


SLEEP_PAPER = ResearchPaper(
    title="Cannabis, Cannabinoids, and Sleep: A Review of the Literature",
    authors=("Babson KA", "Sottile J", "Morabito D"),
    journal="Current Psychiatry Reports",
    year=2017,
    abstract=(
        "Review of studies on cannabis and sleep. CBD may have therapeutic potential for "
        "insomnia, and THC may decrease sleep latency in the short term, while long-term "
        "use may lead to tolerance to its sleep-inducing effects."
    ),
    study_type="literature review",
    credibility_score=8.5,
    source="PubMed",
    url="https://doi.org/10.1007/s11920-017-0775-9",
    doi="10.1007/s11920-017-0775-9",
)

PAIN_PAPER = ResearchPaper(
    title="The Health Effects of Cannabis and Cannabinoids: Therapeutic Effects",
    authors=("National Academies of Sciences, Engineering, and Medicine",),
    journal="National Academies Press",
    year=2017,
    abstract=(
        "Consensus report concluding there is conclusive or substantial evidence that "
        "cannabis or cannabinoids are effective for the treatment of chronic pain in "
        "adults, with limited evidence for many other conditions."
    ),
    study_type="consensus report",
    credibility_score=9.0,
    source="National Academies",
    url="https://doi.org/10.17226/24625",
    doi="10.17226/24625",
)

ANXIETY_PAPER = ResearchPaper(
    title="Cannabidiol as a Potential Treatment for Anxiety Disorders",
    authors=("Blessing EM", "Steenkamp MM", "Manzanares J", "Marmar CR"),
    journal="Neurotherapeutics",
    year=2015,
    abstract=(
        "Review of preclinical, human experimental and clinical evidence indicating that "
        "CBD reduces anxiety behaviours relevant to multiple disorders, with acute dosing "
        "studies in humans supporting an anxiolytic effect and stress reduction."
    ),
    study_type="review",
    credibility_score=8.7,
    source="PubMed",
    url="https://doi.org/10.1007/s13311-015-0387-1",
    doi="10.1007/s13311-015-0387-1",
)

# Extra papers only reachable through the research library browse path.
LIBRARY_PAPERS: tuple[ResearchPaper, ...] = (
    ResearchPaper(
        title="Cannabidiol in Anxiety and Sleep: A Large Case Series",
        authors=("Shannon S", "Lewis N", "Lee H", "Hughes S"),
        journal="The Permanente Journal",
        year=2019,
        abstract=(
            "Retrospective case series of adults treated with CBD for anxiety or poor sleep. "
            "Anxiety scores decreased in most patients within the first month; sleep scores "
            "improved initially but fluctuated over time."
        ),
        study_type="clinical case series",
        credibility_score=7.4,
        source="PubMed",
        url="https://doi.org/10.7812/TPP/18-041",
        doi="10.7812/TPP/18-041",
    ),
)


ALL_PAPERS: tuple[ResearchPaper, ...] = (
    BASE_PAPERS + (SLEEP_PAPER, PAIN_PAPER, ANXIETY_PAPER) + LIBRARY_PAPERS
)
