"""
Heuristic outline inference.

Reconstructs a title and an H1/H2/H3 outline from a flat stream of text
fragments using only font size, boldness and the shape of the text itself:

1. Document statistics (mean and maximum fragment size)
2. Case-insensitive deduplication of repeated lines (headers, footers)
3. Additive scoring of weak heading signals
4. Level assignment relative to the document statistics, with the first
   suitable H1 promoted to the document title
5. A relaxed fallback pass when the scored pass finds nothing
"""

import re
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np

from .config import (
    ALL_CAPS_MAX_CHARS,
    ALL_CAPS_MIN_CHARS,
    ALL_CAPS_SCORE,
    BOLD_SCORE,
    COLON_SCORE,
    FALLBACK_LEVEL,
    FALLBACK_MAX_CHARS,
    FALLBACK_MIN_CHARS,
    FORM_FIELD_SCORE,
    H1_MAX_SIZE_RATIO,
    H2_SIZE_RATIO,
    LARGE_TEXT_RATIO,
    LARGE_TEXT_SCORE,
    MAX_CANDIDATE_CHARS,
    MAX_OUTLINE_ENTRIES,
    MAX_TITLE_CHARS,
    NUMBERED_SCORE,
    SHORT_LINE_CHARS,
    SHORT_LINE_SCORE,
    STRONG_HEADING_SCORE,
    WEAK_HEADING_SCORE,
)
from .models import DocumentOutline, OutlineEntry, TextFragment

# "1. Scope" or "2 Results"
NUMBERED_PATTERN = re.compile(r'^\d+\.?\s')
# "1." only, used by the fallback pass
NUMBERED_DOT_PATTERN = re.compile(r'^\d+\.')
# "Name:", "Date of birth:"
FORM_FIELD_PATTERN = re.compile(r'^[A-Z][a-z]+.*:')


class HeadingSignals:
    """The independent heading signals computed for one fragment."""

    __slots__ = (
        "is_large_text", "is_bold", "is_short_line", "has_numbers",
        "is_all_caps", "has_colons", "is_form_field",
    )

    def __init__(self, fragment: TextFragment, avg_size: float):
        text = fragment.text
        self.is_large_text = fragment.size > avg_size * LARGE_TEXT_RATIO
        self.is_bold = fragment.bold
        self.is_short_line = len(text) < SHORT_LINE_CHARS
        self.has_numbers = bool(NUMBERED_PATTERN.match(text))
        self.is_all_caps = text == text.upper() and len(text) > ALL_CAPS_MIN_CHARS
        self.has_colons = text.endswith(":")
        self.is_form_field = bool(FORM_FIELD_PATTERN.match(text))

    def score(self, text: str) -> int:
        score = 0
        if self.is_bold:
            score += BOLD_SCORE
        if self.is_large_text:
            score += LARGE_TEXT_SCORE
        if self.has_numbers:
            score += NUMBERED_SCORE
        if self.is_all_caps and len(text) < ALL_CAPS_MAX_CHARS:
            score += ALL_CAPS_SCORE
        if self.has_colons:
            score += COLON_SCORE
        if self.is_form_field:
            score += FORM_FIELD_SCORE
        if self.is_short_line:
            score += SHORT_LINE_SCORE
        return score

    def qualifies(self, score: int) -> bool:
        # One strong signal plus one weak signal is enough; two weak ones are not
        return score >= STRONG_HEADING_SCORE or (
            score >= WEAK_HEADING_SCORE and (self.is_bold or self.is_large_text)
        )


def document_statistics(fragments: Sequence[TextFragment]) -> Tuple[float, float]:
    """Return ``(avg_size, max_size)`` over all fragments."""
    sizes = np.array([fragment.size for fragment in fragments], dtype=float)
    return float(sizes.mean()), float(sizes.max())


def assign_level(fragment: TextFragment, signals: HeadingSignals,
                 avg_size: float, max_size: float) -> str:
    if fragment.size >= max_size * H1_MAX_SIZE_RATIO or (signals.is_bold and signals.is_large_text):
        return "H1"
    if fragment.size >= avg_size * H2_SIZE_RATIO or (signals.is_bold and signals.has_numbers):
        return "H2"
    return "H3"


def score_candidates(fragments: Sequence[TextFragment], avg_size: float,
                     max_size: float) -> Tuple[str, List[OutlineEntry]]:
    """
    Run the scored pass over the fragments.

    Args:
        fragments: Fragments in page order
        avg_size: Mean fragment size of the document
        max_size: Largest fragment size of the document

    Returns:
        Tuple of (title, outline entries)
    """
    title = ""
    outline: List[OutlineEntry] = []
    seen_texts: Set[str] = set()

    for fragment in fragments:
        text = fragment.text
        lower_text = text.lower()

        if lower_text in seen_texts or len(text) > MAX_CANDIDATE_CHARS:
            continue
        seen_texts.add(lower_text)

        signals = HeadingSignals(fragment, avg_size)
        if not signals.qualifies(signals.score(text)):
            continue

        level = assign_level(fragment, signals, avg_size, max_size)

        # The first short H1 becomes the title instead of an outline entry
        if level == "H1" and not title and len(text) < MAX_TITLE_CHARS:
            title = text
            continue

        outline.append(OutlineEntry(level=level, text=text, page=fragment.page))
        if len(outline) >= MAX_OUTLINE_ENTRIES:
            break

    return title, outline


def fallback_candidates(fragments: Sequence[TextFragment], avg_size: float,
                        title: Optional[str] = None) -> List[OutlineEntry]:
    """Accept any bold, above-average, numbered or colon-terminated line as H2."""
    outline = []
    title_key = title.lower() if title else None

    for fragment in fragments:
        text = fragment.text
        if not FALLBACK_MIN_CHARS < len(text) < FALLBACK_MAX_CHARS:
            continue
        if title_key is not None and text.lower() == title_key:
            continue

        if (fragment.bold or fragment.size > avg_size
                or NUMBERED_DOT_PATTERN.match(text) or text.endswith(":")):
            outline.append(OutlineEntry(level=FALLBACK_LEVEL, text=text, page=fragment.page))
            if len(outline) >= MAX_OUTLINE_ENTRIES:
                break

    return outline


def infer_outline(fragments: Sequence[TextFragment]) -> DocumentOutline:
    """
    Infer the title and heading outline of a document.

    Args:
        fragments: Normalized fragments across all pages, in page order

    Returns:
        The document outline; empty if there are no fragments
    """
    if not fragments:
        return DocumentOutline(title="", outline=())

    avg_size, max_size = document_statistics(fragments)
    title, outline = score_candidates(fragments, avg_size, max_size)

    if not outline:
        outline = fallback_candidates(fragments, avg_size, title)

    return DocumentOutline(title=title, outline=tuple(outline))
