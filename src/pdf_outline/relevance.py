"""
Keyword relevance ranking of outline sections.

The persona and job description form a bag of keywords; every outline entry
is scored by how many of those keywords appear in its text.
"""

import logging
from typing import List, Sequence, Tuple, Union

from .config import MAX_KEYWORDS, MIN_KEYWORD_CHARS, SUMMARY_TRIGGERS
from .errors import InputValidationError
from .models import DocumentOutline, OutlineEntry, ScoredSection

logger = logging.getLogger(__name__)

OutlineLike = Union[DocumentOutline, Sequence[OutlineEntry]]


def validate_query(persona: str, job: str) -> Tuple[str, str]:
    """
    Trim and check the persona and job description.

    Raises:
        InputValidationError: If either is missing or blank
    """
    persona = (persona or "").strip()
    job = (job or "").strip()
    if not persona or not job:
        raise InputValidationError("Please enter both persona and job description.")
    return persona, job


def is_summary_request(job: str) -> bool:
    job_lower = (job or "").lower()
    return any(trigger in job_lower for trigger in SUMMARY_TRIGGERS)


def extract_keywords(persona: str, job: str) -> List[str]:
    """
    Build the keyword list for a query.

    Tokens are lowercased whitespace-separated words longer than two
    characters, in their original order, without stemming or deduplication.
    At most ``MAX_KEYWORDS`` are kept.
    """
    tokens = f"{persona} {job}".lower().split()
    return [token for token in tokens if len(token) >= MIN_KEYWORD_CHARS][:MAX_KEYWORDS]


def outline_entries(outline: OutlineLike) -> List[OutlineEntry]:
    """Accept either a whole ``DocumentOutline`` or its list of entries."""
    if isinstance(outline, DocumentOutline):
        return list(outline.outline)
    return list(outline)


def score_entry(entry: OutlineEntry, keywords: Sequence[str]) -> int:
    text = entry.text.lower()
    return sum(1 for keyword in keywords if keyword in text)


def rank_sections(entries: Sequence[OutlineEntry], keywords: Sequence[str]) -> List[ScoredSection]:
    """Score entries, drop non-matches and order by descending score."""
    scored = []
    for entry in entries:
        if not entry.text:
            continue
        score = score_entry(entry, keywords)
        if score > 0:
            scored.append(ScoredSection(level=entry.level, text=entry.text, page=entry.page, score=score))

    # sorted() is stable, so equal scores keep document order
    return sorted(scored, key=lambda section: -section.score)


def score_relevance(outline: OutlineLike, persona: str, job: str) -> List[ScoredSection]:
    """
    Rank outline sections against a persona and job description.

    Args:
        outline: The document outline, or its entries
        persona: Who is reading the document
        job: What the reader wants to do with it

    Returns:
        Sections with at least one keyword match, best first

    Raises:
        InputValidationError: If persona or job is blank
    """
    persona, job = validate_query(persona, job)
    keywords = extract_keywords(persona, job)
    entries = outline_entries(outline)
    logger.debug(f"Scoring {len(entries)} sections against keywords {keywords}")
    return rank_sections(entries, keywords)
