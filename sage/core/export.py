"""
Research library export formats: JSON, CSV, BibTeX, RIS.

Each formatter takes a list of papers and returns the file body as a
string. ``export_papers`` dispatches on a format name and also returns the
media type and a download filename.
"""

from __future__ import annotations

import csv
import io
import json
import re
from datetime import datetime, timezone

from sage.core.models import ResearchPaper

CSV_HEADERS = [
    "Title",
    "Authors",
    "Journal",
    "Year",
    "DOI",
    "PMID",
    "URL",
    "Study Type",
    "Credibility Score",
    "Citation Count",
    "Source",
]

# format -> (media type, file extension)
FORMAT_INFO: dict[str, tuple[str, str]] = {
    "json": ("application/json", "json"),
    "csv": ("text/csv", "csv"),
    "bibtex": ("application/x-bibtex", "bib"),
    "ris": ("application/x-research-info-systems", "ris"),
}


def to_json(
    papers: list[ResearchPaper],
    query: str | None = None,
    include_abstracts: bool = True,
    exported_at: datetime | None = None,
) -> str:
    exported_at = exported_at or datetime.now(timezone.utc)
    return json.dumps(
        {
            "query": query,
            "export_date": exported_at.isoformat(),
            "total_papers": len(papers),
            "papers": [p.to_dict(include_abstract=include_abstracts) for p in papers],
        },
        indent=2,
    )


def to_csv(papers: list[ResearchPaper], include_abstracts: bool = True) -> str:
    """One header row, then one fully quoted row per paper."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    headers = CSV_HEADERS + (["Abstract"] if include_abstracts else [])
    writer.writerow(headers)
    for p in papers:
        row = [
            p.title,
            ", ".join(p.authors),
            p.journal,
            p.year,
            p.doi or "",
            p.pmid or "",
            p.url or "",
            p.study_type,
            p.credibility_score,
            "",  # no citation counts in mock data
            p.source,
        ]
        if include_abstracts:
            row.append(p.abstract)
        writer.writerow(row)
    return buf.getvalue()


def bibtex_key(paper: ResearchPaper, index: int) -> str:
    """Citation key: the DOI with non-alphanumerics stripped, else ``paperN``."""
    if paper.doi:
        return re.sub(r"[^a-zA-Z0-9]", "", paper.doi)
    return f"paper{index + 1}"


def to_bibtex(papers: list[ResearchPaper]) -> str:
    entries = []
    for i, p in enumerate(papers):
        lines = [
            f"@article{{{bibtex_key(p, i)},",
            f"  title={{{p.title}}},",
            f"  author={{{' and '.join(p.authors)}}},",
            f"  journal={{{p.journal}}},",
            f"  year={{{p.year}}},",
        ]
        if p.doi:
            lines.append(f"  doi={{{p.doi}}},")
        if p.url:
            lines.append(f"  url={{{p.url}}},")
        lines.append(f"  note={{Credibility Score: {p.credibility_score}/10}}")
        lines.append("}")
        entries.append("\n".join(lines))
    return "\n\n".join(entries)


def to_ris(papers: list[ResearchPaper], include_abstracts: bool = True) -> str:
    records = []
    for p in papers:
        lines = ["TY  - JOUR", f"TI  - {p.title}"]
        lines.extend(f"AU  - {author}" for author in p.authors)
        lines.append(f"JO  - {p.journal}")
        lines.append(f"PY  - {p.year}")
        if p.doi:
            lines.append(f"DO  - {p.doi}")
        if p.url:
            lines.append(f"UR  - {p.url}")
        if include_abstracts:
            lines.append(f"AB  - {p.abstract}")
        lines.append(f"N1  - Study Type: {p.study_type}")
        lines.append(f"N1  - Credibility Score: {p.credibility_score}/10")
        lines.append("ER  - ")
        records.append("\n".join(lines) + "\n")
    return "\n".join(records)


def export_filename(
    fmt: str,
    query: str | None = None,
    exported_at: datetime | None = None,
) -> str:
    """``sage-research-<query-slug>-<YYYY-MM-DD>.<ext>``"""
    exported_at = exported_at or datetime.now(timezone.utc)
    slug = re.sub(r"[^a-zA-Z0-9]", "-", query) if query else "studies"
    ext = FORMAT_INFO[fmt][1]
    return f"sage-research-{slug}-{exported_at.date().isoformat()}.{ext}"


def export_papers(
    papers: list[ResearchPaper],
    fmt: str,
    query: str | None = None,
    include_abstracts: bool = True,
) -> tuple[str, str, str]:
    """
    Render papers in an export format.

    Args:
        papers: Papers to export, in display order.
        fmt: One of json, csv, bibtex, ris.
        query: Query the papers were found for (JSON header and filename).
        include_abstracts: Include abstracts where the format supports it.

    Returns:
        Tuple of (body, media_type, filename).

    Raises:
        ValueError: If ``fmt`` is not a supported export format.
    """
    fmt = fmt.lower()
    if fmt not in FORMAT_INFO:
        raise ValueError(f"Unsupported export format: {fmt!r} (expected one of {sorted(FORMAT_INFO)})")

    now = datetime.now(timezone.utc)
    if fmt == "json":
        body = to_json(papers, query, include_abstracts, exported_at=now)
    elif fmt == "csv":
        body = to_csv(papers, include_abstracts)
    elif fmt == "bibtex":
        body = to_bibtex(papers)
    else:
        body = to_ris(papers, include_abstracts)

    return body, FORMAT_INFO[fmt][0], export_filename(fmt, query, exported_at=now)
