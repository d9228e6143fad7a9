import pytest

from pdf_outline import session as session_module
from pdf_outline.errors import DocumentLoadError
from pdf_outline.models import OutlineEntry
from pdf_outline.session import Session


@pytest.fixture
def session():
    with Session() as s:
        yield s


def test_load_builds_document_record(session, report_pdf):
    record = session.load(report_pdf, "report.pdf")

    assert record.filename == "report.pdf"
    assert record.total_pages == 2
    assert record.outline.title == "Annual Report"
    assert record.outline.outline == (
        OutlineEntry(level="H2", text="1. Introduction", page=1),
        OutlineEntry(level="H2", text="2. Budget Overview", page=2),
    )
    assert record.full_text.startswith("\n--- PAGE 1 ---\nAnnual Report 1. Introduction ")
    assert "\n--- PAGE 2 ---\n2. Budget Overview " in record.full_text
    assert session.record is record
    assert session.current_page == 1


def test_relevance_analysis(session, report_pdf):
    session.load(report_pdf, "report.pdf")

    result = session.analyze("financial analyst", "review budget")

    assert result.kind == "relevance"
    assert result.keywords == ["financial", "analyst", "review", "budget"]
    assert result.total_sections == 2
    assert [(s.text, s.score) for s in result.sections] == [("2. Budget Overview", 1)]


def test_summary_analysis(session, report_pdf):
    session.load(report_pdf, "report.pdf")

    result = session.analyze("auditor", "Please summarize this document")

    assert result.kind == "summary"
    assert "**Document Structure:**\n1. 1. Introduction (Page 1)" in result.summary
    assert "• Total Pages: 2" in result.summary


def test_analysis_without_document_is_advisory(session):
    result = session.analyze("analyst", "review budget")

    assert result.kind == "advisory"
    assert result.message == "Please upload a PDF first."


def test_blank_input_is_advisory(session, report_pdf):
    session.load(report_pdf, "report.pdf")

    result = session.analyze("  ", "review budget")

    assert result.kind == "advisory"
    assert not result.ok


def test_unexpected_analysis_failure_keeps_document(session, report_pdf, monkeypatch):
    session.load(report_pdf, "report.pdf")

    def explode(*args):
        raise RuntimeError("outline shape")

    monkeypatch.setattr(session_module, "score_relevance", explode)
    result = session.analyze("analyst", "review budget")

    assert result.kind == "error"
    assert "outline shape" in result.message
    assert session.record.filename == "report.pdf"


def test_failed_load_keeps_previous_document(session, report_pdf):
    session.load(report_pdf, "report.pdf")

    with pytest.raises(DocumentLoadError):
        session.load(b"not a pdf", "broken.pdf")

    assert session.record.filename == "report.pdf"


def test_new_document_replaces_previous(session, report_pdf, make_pdf):
    session.load(report_pdf, "report.pdf")
    session.next_page()

    record = session.load(make_pdf([[("Only Page Heading", 18, True, 80)]]), "single.pdf")

    assert session.record is record
    assert record.total_pages == 1
    assert session.current_page == 1


def test_page_cursor_stays_in_range(session, report_pdf):
    session.load(report_pdf, "report.pdf")

    assert session.go_to_page(5) == 1
    assert session.next_page() == 2
    assert session.next_page() == 2
    assert session.previous_page() == 1
    assert session.previous_page() == 1
    assert session.go_to_page(2) == 2


def test_render_page_returns_png(session, report_pdf):
    session.load(report_pdf, "report.pdf")

    assert session.render_page().startswith(b"\x89PNG")


def test_load_file_reports_missing_file(session, tmp_path):
    with pytest.raises(DocumentLoadError):
        session.load_file(str(tmp_path / "missing.pdf"))
