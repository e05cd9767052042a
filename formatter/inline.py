"""formatter/inline.py — podział treści linii na spany PlainText / Emphasis."""

from __future__ import annotations

import re

from data_model.content import Emphasis, InlineSpan, PlainText, Spans

_EXTRA_STARS_RE = re.compile(r"\*{3,}")
_LONE_STAR_RE   = re.compile(r"(?<!\*)\*(?!\*)")
_BOLD_RE        = re.compile(r"\*\*(.+?)\*\*")


def format_inline(text: str) -> Spans:
    """
    Zamienia tekst z markerami ** na sekwencję spanów.

    Kroki:
      - "***" i dłuższe → "**"
      - pojedyncza gwiazdka (bez sąsiedniej) → usuwana
      - każda para **...** (niezachłannie) → Emphasis, reszta → PlainText

    Bez żadnej pary wynik to jeden PlainText z całym tekstem,
    a pusty tekst (także po usunięciu gwiazdek) daje pustą krotkę.
    """
    cleaned = _LONE_STAR_RE.sub("", _EXTRA_STARS_RE.sub("**", text))
    if not cleaned.strip():
        return ()

    spans: list[InlineSpan] = []
    last = 0
    for m in _BOLD_RE.finditer(cleaned):
        if m.start() > last:
            spans.append(PlainText(cleaned[last:m.start()]))
        spans.append(Emphasis(m.group(1)))
        last = m.end()

    if not spans:
        return (PlainText(cleaned),)

    if last < len(cleaned):
        spans.append(PlainText(cleaned[last:]))
    return tuple(spans)
