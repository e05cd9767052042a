"""
data_model/content.py — węzły sformatowanej treści (wynik formattera).

ContentNode to tagowany wariant: Paragraph | Heading | BulletList | NumberedList.
InlineSpan to tagowany wariant: PlainText | Emphasis.

Każda klasa ma stałe pole `kind` (dyskryminator) — ułatwia dispatch
w rendererach i serializację do JSON.
Krotki zamiast list: węzły są niemutowalne i porównywalne po wartości.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


# ---------------------------------------------------------------------------
# Spany inline
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PlainText:
    """Zwykły tekst."""
    value: str
    kind: Literal["text"] = field(default="text", init=False)


@dataclass(frozen=True, slots=True)
class Emphasis:
    """Tekst pogrubiony (z pary **...**)."""
    value: str
    kind: Literal["emphasis"] = field(default="emphasis", init=False)


type InlineSpan = PlainText | Emphasis

# Sekwencja spanów jednej linii (akapit, nagłówek, element listy).
type Spans = tuple[InlineSpan, ...]


# ---------------------------------------------------------------------------
# Węzły blokowe
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Paragraph:
    spans: Spans
    kind: Literal["paragraph"] = field(default="paragraph", init=False)


@dataclass(frozen=True, slots=True)
class Heading:
    """
    Nagłówek sekcji.
    - level: 2 (z "## ") lub 3 (z "### " albo z linii **Nagłówek:**)
    """
    level: Literal[2, 3]
    spans: Spans
    kind: Literal["heading"] = field(default="heading", init=False)


@dataclass(frozen=True, slots=True)
class BulletList:
    items: tuple[Spans, ...]
    kind: Literal["bullet_list"] = field(default="bullet_list", init=False)


@dataclass(frozen=True, slots=True)
class NumberedList:
    items: tuple[Spans, ...]
    kind: Literal["numbered_list"] = field(default="numbered_list", init=False)


type ContentNode = Paragraph | Heading | BulletList | NumberedList
