"""Rebuild page-delimited plain text in natural reading order."""

from functools import cmp_to_key
from typing import Iterable, List, Sequence

from .config import PAGE_ERROR_PLACEHOLDER, PAGE_MARKER, SAME_LINE_TOLERANCE
from .models import PageText, RawFragment


def compare_reading_order(a: RawFragment, b: RawFragment) -> float:
    # Top of the page first; baselines within tolerance are one line, read left to right
    y_diff = b.y - a.y
    if abs(y_diff) > SAME_LINE_TOLERANCE:
        return y_diff
    return a.x - b.x


def sort_reading_order(fragments: Sequence[RawFragment]) -> List[RawFragment]:
    return sorted(fragments, key=cmp_to_key(compare_reading_order))


def page_marker(page_number: int) -> str:
    return PAGE_MARKER.format(page=page_number)


def reconstruct_page(page: PageText) -> str:
    """Return one page's delimited block, or a placeholder if it failed."""
    marker = f"\n{page_marker(page.page_number)}\n"
    if page.failed:
        return f"{marker}{PAGE_ERROR_PLACEHOLDER}\n"

    content = ""
    for fragment in sort_reading_order(page.fragments):
        text = fragment.text.strip()
        if text:
            content += text + " "

    return f"{marker}{content}\n"


def reconstruct_full_text(pages: Iterable[PageText]) -> str:
    """Concatenate every page in page order, each preceded by its page marker."""
    return "".join(reconstruct_page(page) for page in pages)
