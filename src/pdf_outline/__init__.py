"""
Offline PDF triage: heuristic outline extraction, full-text reconstruction
and persona/job relevance ranking of document sections.
"""

from .errors import DocumentLoadError, InputValidationError, PdfOutlineError
from .fragments import collect_fragments, open_document, read_pages
from .fulltext import reconstruct_full_text
from .models import (
    AnalysisResult,
    DocumentOutline,
    DocumentRecord,
    OutlineEntry,
    PageText,
    RawFragment,
    ScoredSection,
    TextFragment,
)
from .outline import infer_outline
from .relevance import extract_keywords, is_summary_request, score_relevance
from .session import Session
from .summary import generate_summary

__version__ = "1.0.0"

__all__ = [
    "AnalysisResult",
    "DocumentLoadError",
    "DocumentOutline",
    "DocumentRecord",
    "InputValidationError",
    "OutlineEntry",
    "PageText",
    "PdfOutlineError",
    "RawFragment",
    "ScoredSection",
    "Session",
    "TextFragment",
    "collect_fragments",
    "extract_keywords",
    "generate_summary",
    "infer_outline",
    "is_summary_request",
    "open_document",
    "read_pages",
    "reconstruct_full_text",
    "score_relevance",
]
