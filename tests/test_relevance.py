import pytest

from pdf_outline.errors import InputValidationError
from pdf_outline.models import DocumentOutline, OutlineEntry, ScoredSection
from pdf_outline.relevance import extract_keywords, is_summary_request, score_relevance

OUTLINE = [
    OutlineEntry(level="H1", text="Budget Overview", page=1),
    OutlineEntry(level="H2", text="Team Roster", page=2),
]


def test_sections_are_scored_by_keyword_matches():
    sections = score_relevance(OUTLINE, "financial analyst", "review budget")

    assert sections == [ScoredSection(level="H1", text="Budget Overview", page=1, score=1)]


def test_keywords_keep_order_and_drop_short_tokens():
    keywords = extract_keywords("Financial  Analyst", "review the Q3 budget in EU")

    assert keywords == ["financial", "analyst", "review", "the", "budget"]


def test_keywords_are_capped_at_ten():
    keywords = extract_keywords("one two three four five six", "seven eight nine ten eleven twelve")

    assert len(keywords) == 10
    assert keywords[-1] == "ten"
    assert all(len(keyword) > 2 for keyword in keywords)


def test_ranking_is_stable_for_equal_scores():
    outline = [
        OutlineEntry(level="H2", text="Budget plan", page=1),
        OutlineEntry(level="H2", text="Budget review", page=2),
        OutlineEntry(level="H2", text="Budget review plan", page=3),
        OutlineEntry(level="H3", text="Appendix", page=4),
    ]

    sections = score_relevance(outline, "budget", "plan review")

    assert [(s.text, s.score) for s in sections] == [
        ("Budget review plan", 3),
        ("Budget plan", 2),
        ("Budget review", 2),
    ]


def test_each_keyword_counts_once_per_entry():
    outline = [OutlineEntry(level="H2", text="Budget budget BUDGET", page=1)]

    assert score_relevance(outline, "analyst", "budget")[0].score == 1


def test_whole_document_outline_is_accepted():
    outline = DocumentOutline(title="Report", outline=tuple(OUTLINE))

    assert [s.text for s in score_relevance(outline, "team lead", "check roster")] == ["Team Roster"]


@pytest.mark.parametrize("persona, job", [("", "review budget"), ("analyst", "   "), (None, "job")])
def test_blank_query_is_a_validation_error(persona, job):
    with pytest.raises(InputValidationError):
        score_relevance(OUTLINE, persona, job)


@pytest.mark.parametrize("job, expected", [
    ("Please summarize this document", True),
    ("Write a SUMMARY for management", True),
    ("review budget", False),
])
def test_summary_requests_are_detected(job, expected):
    assert is_summary_request(job) is expected
