"""
Session holding the single loaded document.

A ``Session`` replaces the global "current document / current page" state of
an interactive viewer: it owns exactly one ``DocumentRecord`` at a time, the
open PyMuPDF document behind it and the page cursor.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import fitz  # PyMuPDF

from .config import EXTRACTION_WORKERS, RENDER_ZOOM
from .errors import DocumentLoadError, InputValidationError
from .fragments import collect_fragments, open_document, read_pages, render_page
from .fulltext import reconstruct_full_text
from .models import AnalysisResult, DocumentRecord
from .outline import infer_outline
from .relevance import extract_keywords, is_summary_request, outline_entries, score_relevance, validate_query
from .summary import generate_summary

logger = logging.getLogger(__name__)


class Session:
    """Controller for one loaded document and the analyses run against it."""

    def __init__(self, workers: int = EXTRACTION_WORKERS):
        self.workers = workers
        self.record: Optional[DocumentRecord] = None
        self.current_page = 1
        self._doc: Optional[fitz.Document] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def total_pages(self) -> int:
        return self.record.total_pages if self.record else 0

    def load(self, data: bytes, filename: str) -> DocumentRecord:
        """
        Load a PDF and extract its outline and full text.

        The previous document, if any, is discarded only after the new one
        loaded successfully.

        Raises:
            DocumentLoadError: If the PDF cannot be opened
        """
        doc = open_document(data)
        logger.info(f"Processing {filename} ({doc.page_count} pages)...")

        try:
            pages = read_pages(doc)

            # Outline and full text are independent read-only passes over the same pages
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                outline_future = executor.submit(lambda: infer_outline(collect_fragments(pages)))
                text_future = executor.submit(reconstruct_full_text, pages)
                outline = outline_future.result()
                full_text = text_future.result()
        except Exception:
            doc.close()
            raise

        record = DocumentRecord(
            filename=filename,
            outline=outline,
            full_text=full_text,
            total_pages=doc.page_count,
        )

        self.close()
        self._doc = doc
        self.record = record
        self.current_page = 1

        logger.info(f"Extracted {len(outline.outline)} headings from {filename}")
        return record

    def load_file(self, path: str) -> DocumentRecord:
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise DocumentLoadError(str(e)) from e
        return self.load(data, os.path.basename(path))

    def analyze(self, persona: str, job: str) -> AnalysisResult:
        """
        Rank sections for a persona and job, or summarize on request.

        Never raises: missing input becomes an advisory result and unexpected
        failures become an error result, leaving the loaded document usable.
        """
        if self.record is None:
            return AnalysisResult(kind="advisory", message="Please upload a PDF first.")

        try:
            persona, job = validate_query(persona, job)

            if is_summary_request(job):
                return AnalysisResult(kind="summary", summary=generate_summary(self.record, persona, job))

            sections = score_relevance(self.record.outline, persona, job)
            return AnalysisResult(
                kind="relevance",
                sections=sections,
                keywords=extract_keywords(persona, job),
                total_sections=len(outline_entries(self.record.outline)),
            )
        except InputValidationError as e:
            return AnalysisResult(kind="advisory", message=str(e))
        except Exception as e:
            logger.exception("Analysis error")
            return AnalysisResult(kind="error", message=f"Error during analysis: {e}")

    # ----- Page cursor -----

    def go_to_page(self, page_number: int) -> int:
        """Move the cursor; out-of-range requests leave it unchanged."""
        if 1 <= page_number <= self.total_pages:
            self.current_page = page_number
        return self.current_page

    def next_page(self) -> int:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> int:
        return self.go_to_page(self.current_page - 1)

    def render_page(self, page_number: Optional[int] = None, zoom: float = RENDER_ZOOM) -> bytes:
        if self._doc is None:
            raise DocumentLoadError("No document loaded")
        return render_page(self._doc, page_number or self.current_page, zoom)

    def close(self):
        if self._doc is not None:
            self._doc.close()
            self._doc = None
