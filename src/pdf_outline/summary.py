"""
Summary digest for "summarize this document" style requests.

The digest lists the document structure, picks a handful of key sentences per
page with a keyword-or-length filter and classifies the document type by
keyword sniffing.
"""

import re
from typing import List, Sequence, Tuple

from .config import (
    DEFAULT_DOCUMENT_TYPE,
    DOCUMENT_TYPES,
    LONG_SENTENCE_CHARS,
    MAX_DOCUMENT_KEY_POINTS,
    MAX_FALLBACK_SENTENCES,
    MAX_PAGE_KEY_POINTS,
    MIN_BULLET_CHARS,
    MIN_SENTENCE_CHARS,
    SUMMARY_KEYWORDS,
)
from .models import DocumentRecord
from .relevance import validate_query

PAGE_MARKER_PATTERN = re.compile(r'--- PAGE (\d+) ---')
SENTENCE_BREAK_PATTERN = re.compile(r'[.!?]+')


def split_pages(full_text: str) -> List[Tuple[int, str]]:
    """Split reconstructed text into ``(page_number, content)`` pairs."""
    markers = list(PAGE_MARKER_PATTERN.finditer(full_text))
    pages = []
    for index, match in enumerate(markers):
        end = markers[index + 1].start() if index + 1 < len(markers) else len(full_text)
        pages.append((int(match.group(1)), full_text[match.end():end].strip()))
    return pages


def split_sentences(text: str) -> List[str]:
    return [s for s in SENTENCE_BREAK_PATTERN.split(text) if len(s.strip()) > MIN_SENTENCE_CHARS]


def is_key_sentence(sentence: str) -> bool:
    lower_sentence = sentence.lower()
    return any(word in lower_sentence for word in SUMMARY_KEYWORDS) or len(sentence) > LONG_SENTENCE_CHARS


def key_points(sentences: Sequence[str], limit: int) -> List[str]:
    return [s for s in sentences if is_key_sentence(s)][:limit]


def bullets(sentences: Sequence[str]) -> str:
    lines = ""
    for sentence in sentences:
        trimmed = sentence.strip()
        if len(trimmed) > MIN_BULLET_CHARS:
            lines += f"• {trimmed}.\n"
    return lines


def document_type(text: str) -> str:
    lower_text = text.lower()
    for keywords, label in DOCUMENT_TYPES:
        if any(keyword in lower_text for keyword in keywords):
            return label
    return DEFAULT_DOCUMENT_TYPE


def generate_summary(record: DocumentRecord, persona: str, job: str) -> str:
    """
    Build the textual digest of a loaded document.

    Args:
        record: The loaded document
        persona: Reader persona (validated, not otherwise used)
        job: The summary request (validated, not otherwise used)

    Returns:
        The digest with structure, key point and statistics sections
    """
    validate_query(persona, job)

    full_text = record.full_text or ""
    outline = record.outline.outline
    summary = ""

    if outline:
        summary += "**Document Structure:**\n"
        for index, entry in enumerate(outline, start=1):
            summary += f"{index}. {entry.text} (Page {entry.page})\n"
        summary += "\n"

    summary += "**Key Points:**\n"
    pages = split_pages(full_text)

    if pages:
        for page_number, content in pages:
            summary += f"--- PAGE {page_number} ---\n"
            sentences = split_sentences(content)
            important = key_points(sentences, MAX_PAGE_KEY_POINTS)
            summary += bullets(important or sentences[:MAX_FALLBACK_SENTENCES])
            summary += "\n"
    else:
        summary += bullets(key_points(split_sentences(full_text), MAX_DOCUMENT_KEY_POINTS))

    summary += "\n**Document Statistics:**\n"
    summary += f"• Total Pages: {record.total_pages or 1}\n"
    summary += f"• Total Sections: {len(outline)}\n"
    summary += f"• Document Type: {document_type(full_text)}\n"

    return summary
