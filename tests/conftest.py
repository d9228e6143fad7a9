import fitz  # PyMuPDF
import pytest


def build_pdf(pages):
    """
    Build a PDF in memory.

    ``pages`` is a list of pages, each a list of ``(text, fontsize, bold, y)``
    lines drawn at the left margin with the Base-14 Helvetica fonts.
    """
    doc = fitz.open()
    for lines in pages:
        page = doc.new_page()
        for text, fontsize, bold, y in lines:
            page.insert_text((72, y), text, fontsize=fontsize, fontname="hebo" if bold else "helv")
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def report_pdf():
    """Two-page report with a title and one numbered heading per page."""
    return build_pdf([
        [
            ("Annual Report", 24, True, 80),
            ("1. Introduction", 14, True, 130),
            ("this report describes how the money was spent", 11, False, 160),
            ("and which projects were started during the year", 11, False, 180),
            ("most of the work happened in the second half", 11, False, 200),
        ],
        [
            ("2. Budget Overview", 14, True, 80),
            ("spending stayed within the approved limits", 11, False, 110),
            ("travel costs were lower than in previous years", 11, False, 130),
            ("the remaining funds roll over to next year", 11, False, 150),
        ],
    ])
