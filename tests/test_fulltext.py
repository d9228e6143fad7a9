from pdf_outline.fulltext import reconstruct_full_text, reconstruct_page, sort_reading_order
from pdf_outline.models import PageText, RawFragment


def raw(text, x, y):
    return RawFragment(text=text, height=10.0, font_name="Helvetica", x=x, y=y)


def test_fragments_on_one_visual_line_read_left_to_right():
    fragments = [
        raw("world", x=200, y=700),
        raw("Next line", x=50, y=600),
        raw("Hello", x=50, y=703),
    ]

    ordered = [fragment.text for fragment in sort_reading_order(fragments)]

    assert ordered == ["Hello", "world", "Next line"]


def test_distinct_lines_read_top_to_bottom():
    fragments = [raw("bottom", x=10, y=100), raw("top", x=300, y=700), raw("middle", x=150, y=400)]

    assert [f.text for f in sort_reading_order(fragments)] == ["top", "middle", "bottom"]


def test_blank_fragments_are_skipped():
    page = PageText(page_number=3, fragments=(raw("  Title  ", 10, 700), raw("   ", 10, 650), raw("body", 10, 600)))

    assert reconstruct_page(page) == "\n--- PAGE 3 ---\nTitle body \n"


def test_failed_page_keeps_its_marker():
    pages = [
        PageText(page_number=1, fragments=(raw("world", 200, 700), raw("Hello", 50, 702))),
        PageText(page_number=2, error="broken content stream"),
        PageText(page_number=3, fragments=()),
    ]

    assert reconstruct_full_text(pages) == (
        "\n--- PAGE 1 ---\nHello world \n"
        "\n--- PAGE 2 ---\n[Error extracting content from this page]\n"
        "\n--- PAGE 3 ---\n\n"
    )
