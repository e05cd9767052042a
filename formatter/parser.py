"""
formatter/parser.py — zamiana luźnego tekstu z modelu na węzły treści.

Architektura:
  content → clean_text() (cały blok)
          → split("\\n") → classify_line() (PATTERNS, pierwszy wygrywa)
          → HEADING / PARAGRAPH od razu do wyniku,
            BULLET / NUMBERED do bufora listy (flush przy zmianie typu,
            pustej linii, nagłówku, akapicie i na końcu)
          → list[ContentNode]

Kluczowa funkcja publiczna:
  format_content(content) -> list[ContentNode]
"""

from __future__ import annotations

from data_model.content import (
    BulletList,
    ContentNode,
    Heading,
    NumberedList,
    Paragraph,
    Spans,
)
from formatter.inline import format_inline
from formatter.line_patterns import LineKind, classify_line
from formatter.text_cleaner import clean_text, strip_residual_markers


# ---------------------------------------------------------------------------
# Bufor listy (lokalny dla jednego wywołania)
# ---------------------------------------------------------------------------

class _ListBuffer:
    __slots__ = ("kind", "items")

    def __init__(self) -> None:
        self.kind: LineKind | None = None
        self.items: list[Spans] = []

    def add(self, kind: LineKind, spans: Spans, out: list[ContentNode]) -> None:
        # lista innego typu zamyka bieżącą
        if self.kind is not None and self.kind != kind:
            self.flush(out)
        self.kind = kind
        self.items.append(spans)

    def flush(self, out: list[ContentNode]) -> None:
        if self.items:
            items = tuple(self.items)
            if self.kind == LineKind.NUMBERED:
                out.append(NumberedList(items))
            else:
                out.append(BulletList(items))
        self.kind = None
        self.items = []


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def format_content(content: str | None) -> list[ContentNode]:
    """
    Parsuje tekst (markdown-podobny) i zwraca węzły w kolejności linii.

    Funkcja totalna: nie rzuca wyjątków, pusty / biały tekst → [].
    """
    if not content or not content.strip():
        return []

    nodes: list[ContentNode] = []
    buffer = _ListBuffer()

    for line in clean_text(content).split("\n"):
        match = classify_line(line)

        if match.kind == LineKind.HEADING:
            buffer.flush(nodes)
            spans = format_inline(match.text)
            if spans:
                nodes.append(Heading(match.level, spans))  # type: ignore[arg-type]

        elif match.kind == LineKind.BULLET:
            spans = format_inline(strip_residual_markers(match.text))
            if spans:
                buffer.add(LineKind.BULLET, spans, nodes)

        elif match.kind == LineKind.NUMBERED:
            spans = format_inline(match.text)
            if spans:
                buffer.add(LineKind.NUMBERED, spans, nodes)

        elif match.kind == LineKind.BLANK:
            buffer.flush(nodes)

        else:
            buffer.flush(nodes)
            spans = format_inline(strip_residual_markers(match.text))
            if spans:
                nodes.append(Paragraph(spans))

    buffer.flush(nodes)
    return nodes
