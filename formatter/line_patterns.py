"""
formatter/line_patterns.py — wzorce regex do klasyfikacji linii tekstu.

Każdy LinePattern zawiera:
  - kind   : rodzaj linii (HEADING | BULLET | NUMBERED)
  - regex  : skompilowany wzorzec (dopasowanie całej, przyciętej linii)
  - level  : poziom nagłówka (tylko HEADING)
  - extract: funkcja wyciągająca treść linii z Match (bez markera)

Wzorce są testowane w kolejności; pierwszy pasujący wygrywa.
Linie niepasujące do żadnego wzorca to BLANK (puste) albo PLAIN (akapit).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable


class LineKind(StrEnum):
    HEADING  = "heading"
    BULLET   = "bullet"
    NUMBERED = "numbered"
    BLANK    = "blank"
    PLAIN    = "plain"


def _group1(m: re.Match[str]) -> str:
    return m.group(1)


@dataclass(frozen=True, slots=True)
class LinePattern:
    kind: LineKind
    regex: re.Pattern[str]
    level: int = 0
    extract: Callable[[re.Match[str]], str] = _group1


@dataclass(frozen=True, slots=True)
class LineMatch:
    """Wynik klasyfikacji jednej linii: rodzaj + treść bez markera."""
    kind: LineKind
    text: str
    level: int = 0


PATTERNS: list[LinePattern] = [
    # -------------------------------------------------------------------------
    # Nagłówki markdown: "## Tytuł", "### Podtytuł"
    # -------------------------------------------------------------------------
    LinePattern(
        kind=LineKind.HEADING,
        regex=re.compile(r"^##\s+(.+)$"),
        level=2,
    ),
    LinePattern(
        kind=LineKind.HEADING,
        regex=re.compile(r"^###\s+(.+)$"),
        level=3,
    ),

    # -------------------------------------------------------------------------
    # Pseudo-nagłówek: cała linia to "**Tekst**" (opcjonalnie z ":" na końcu);
    # nadmiarowe gwiazdki po obu stronach ("***Tekst***") też się liczą.
    # Cokolwiek po parze poza ":" i spacjami → zwykły akapit.
    # -------------------------------------------------------------------------
    LinePattern(
        kind=LineKind.HEADING,
        regex=re.compile(r"^\*{2,}([^*]+)\*{2,}:?\s*$"),
        level=3,
        extract=lambda m: m.group(1).strip(),
    ),

    # -------------------------------------------------------------------------
    # Listy: "- x", "• x", "* x" oraz "1. x", "2) x"
    # -------------------------------------------------------------------------
    LinePattern(
        kind=LineKind.BULLET,
        regex=re.compile(r"^[-•*]\s+(.+)$"),
    ),
    LinePattern(
        kind=LineKind.NUMBERED,
        regex=re.compile(r"^\d+[.)]\s+(.+)$"),
    ),
]


def classify_line(line: str) -> LineMatch:
    """Klasyfikuje linię (po przycięciu białych znaków) według PATTERNS."""
    trimmed = line.strip()
    if not trimmed:
        return LineMatch(LineKind.BLANK, "")

    for pattern in PATTERNS:
        m = pattern.regex.match(trimmed)
        if m:
            return LineMatch(pattern.kind, pattern.extract(m), pattern.level)

    return LineMatch(LineKind.PLAIN, trimmed)
