"""
PDF engine adapter and text fragment collection.

PyMuPDF is the PDF engine: it opens the raw bytes, walks each page's text
dictionary and rasterizes pages for display. Everything downstream works on
``PageText``/``TextFragment`` values and never touches ``fitz`` directly.
"""

import logging
import math
from typing import Iterable, List

import fitz  # PyMuPDF

from .config import BOLD_FONT_MARKER, MIN_FRAGMENT_CHARS
from .errors import DocumentLoadError
from .models import PageText, RawFragment, TextFragment

logger = logging.getLogger(__name__)


def open_document(data: bytes) -> fitz.Document:
    """
    Open a PDF from raw bytes.

    Args:
        data: The PDF file content

    Returns:
        An open PyMuPDF document

    Raises:
        DocumentLoadError: If the bytes are empty or not a readable PDF
    """
    if not data:
        raise DocumentLoadError("No data to load: the file is empty")

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise DocumentLoadError(str(e)) from e

    if doc.page_count == 0:
        doc.close()
        raise DocumentLoadError("The document has no pages")

    return doc


def read_page(page: fitz.Page) -> List[RawFragment]:
    """Extract every text span on a page, in the engine's order."""
    page_height = page.rect.height
    fragments = []

    for block in page.get_text("dict")["blocks"]:
        if block.get("type") != 0:  # Skip image blocks
            continue

        for line in block.get("lines", []):
            for span in line.get("spans", []):
                origin_x, origin_y = span.get("origin", (0.0, 0.0))
                fragments.append(RawFragment(
                    text=span.get("text", ""),
                    height=span.get("size", 0.0),
                    font_name=span.get("font", ""),
                    x=origin_x,
                    # Flip to a bottom-up baseline so larger y means higher on the page
                    y=page_height - origin_y,
                ))

    return fragments


def read_pages(doc: fitz.Document) -> List[PageText]:
    """
    Read the text of every page, tolerating per-page failures.

    A page that cannot be read is logged and returned with its error and no
    fragments, so page numbering stays continuous.
    """
    pages = []

    for page_index in range(doc.page_count):
        page_number = page_index + 1
        try:
            page = doc.load_page(page_index)
            fragments = read_page(page)
        except Exception as e:
            logger.warning(f"Error processing page {page_number}: {e}")
            pages.append(PageText(page_number=page_number, error=str(e)))
            continue

        pages.append(PageText(page_number=page_number, fragments=tuple(fragments)))

    return pages


def round_size(height: float) -> float:
    """Round a glyph height to one decimal, halves rounding up."""
    return math.floor(height * 10 + 0.5) / 10


def is_bold_font(font_name: str) -> bool:
    return BOLD_FONT_MARKER in (font_name or "").lower()


def collect_fragments(pages: Iterable[PageText]) -> List[TextFragment]:
    """Normalize raw page fragments into a flat, page-ordered fragment list."""
    collected = []

    for page in pages:
        for raw in page.fragments:
            text = raw.text.strip()
            if len(text) <= MIN_FRAGMENT_CHARS:
                continue

            collected.append(TextFragment(
                text=text,
                size=round_size(raw.height),
                bold=is_bold_font(raw.font_name),
                page=page.page_number,
                x=raw.x,
                y=raw.y,
            ))

    return collected


def render_page(doc: fitz.Document, page_number: int, zoom: float = 1.0) -> bytes:
    """Rasterize a 1-based page to PNG bytes."""
    page = doc.load_page(page_number - 1)
    pixmap = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom))
    return pixmap.tobytes("png")
