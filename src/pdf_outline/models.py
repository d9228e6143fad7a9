"""
Data structures shared by the extraction and analysis stages.

Everything here is plain data: the stages return these objects and never
formatted markup, so results can be serialized with ``to_dict`` or rendered by
any presentation layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class RawFragment:
    """One text run exactly as the PDF engine reported it."""

    text: str
    height: float
    font_name: str
    x: float
    y: float


@dataclass(frozen=True)
class PageText:
    """Raw fragments of one page, or the error that prevented reading it."""

    page_number: int
    fragments: Tuple[RawFragment, ...] = ()
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class TextFragment:
    """A normalized, positioned run of text on one page."""

    text: str
    size: float
    bold: bool
    page: int
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class OutlineEntry:
    level: str
    text: str
    page: int

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level, "text": self.text, "page": self.page}


@dataclass(frozen=True)
class ScoredSection(OutlineEntry):
    """An outline entry annotated with its keyword relevance score."""

    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["score"] = self.score
        return data


@dataclass(frozen=True)
class DocumentOutline:
    title: str = ""
    outline: Tuple[OutlineEntry, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "outline": [entry.to_dict() for entry in self.outline],
        }


@dataclass(frozen=True)
class DocumentRecord:
    """Everything extracted from one loaded document."""

    filename: str
    outline: DocumentOutline
    full_text: str
    total_pages: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "outline": self.outline.to_dict(),
            "fullText": self.full_text,
            "totalPages": self.total_pages,
        }


@dataclass
class AnalysisResult:
    """
    Outcome of one analysis request.

    ``kind`` is one of ``relevance``, ``summary``, ``advisory`` or ``error``.
    Advisory and error results only carry ``message``.
    """

    kind: str
    sections: List[ScoredSection] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    total_sections: int = 0
    summary: str = ""
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind in ("relevance", "summary")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"mode": self.kind}
        if self.kind == "relevance":
            data["keywords"] = list(self.keywords)
            data["total_sections"] = self.total_sections
            data["relevant_sections"] = len(self.sections)
            data["sections"] = [section.to_dict() for section in self.sections]
        elif self.kind == "summary":
            data["summary"] = self.summary
        else:
            data["message"] = self.message
        return data
