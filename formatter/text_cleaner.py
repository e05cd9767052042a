"""
formatter/text_cleaner.py — wstępne oczyszczanie tekstu z modelu językowego.

Co usuwamy / normalizujemy (w tej kolejności, na całym bloku):
  1. Gwiazdka-punktor na początku linii ("* tekst") → kanoniczny "• tekst"
  2. Samodzielne ciągi >=3 gwiazdek ("***") — separatory poziome
  3. Separatory "* * *" (gwiazdki przedzielone spacjami)
  4. Ciągi >=3 białych znaków → dokładnie dwa (w linii: "  ", między liniami: "\n\n")
  5. Gwiazdki przyklejone do dwukropka ("**:", ":**"), chyba że domykają
     lub otwierają parę **...**; "**Uwaga:**" → "**Uwaga**:"

Co zachowujemy:
  - Podział na linie (klasyfikacja linii działa dopiero po tym etapie)
  - Pary **...** przyklejone do tekstu, także potrójne ("***ważne***")

Dodatkowo: strip_residual_markers() — obcinanie osieroconych gwiazdek
na brzegach linii (akapity, elementy list).
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Wzorce
# ---------------------------------------------------------------------------

# 1. "* treść" na początku linii; po spacjach musi być treść (nie kolejna gwiazdka).
_STAR_BULLET_RE = re.compile(r"^\*[ \t]+(?=[^*\s])", re.MULTILINE)

# 2. "***", "*****" otoczone białymi znakami lub brzegiem tekstu.
_STAR_RULE_RE = re.compile(r"(?<!\S)\*{3,}(?!\S)")

# 3. "* * *", "* * * *"
_SPACED_STARS_RE = re.compile(r"(?<!\S)\*(?:[ \t]+\*){2,}(?!\S)")

# 4. Białe znaki: w obrębie linii oraz seria pustych linii.
_HSPACE_RUN_RE = re.compile(r"[^\S\n]{3,}")
_BLANK_RUN_RE  = re.compile(r"\n(?:[^\S\n]*\n){2,}")

# 5. Dwukropek wewnątrz pary: "**Uwaga:**" → "**Uwaga**:"
_COLON_IN_PAIR_RE = re.compile(r"\*\*([^*\n]+?)\s*:\*\*")
_COLON_MARKERS_RE = re.compile(r"\*+:|:\*+")
_OPEN_PAIR_AT_END_RE   = re.compile(r"\*\*[^*]+$")
_CLOSE_PAIR_AT_START_RE = re.compile(r"^[^*]+\*\*")

# Pary **...** (także z nadmiarowymi gwiazdkami) i osierocone gwiazdki na brzegach.
_PAIR_RE             = re.compile(r"\*{2,}[^*]+?\*{2,}")
_LEADING_MARKERS_RE  = re.compile(r"^\*+\s*")
_TRAILING_MARKERS_RE = re.compile(r"\s*\*+$")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def clean_text(text: str) -> str:
    """Oczyszcza cały blok tekstu przed podziałem na linie (kroki 1–5)."""
    cleaned = _STAR_BULLET_RE.sub("• ", text)
    cleaned = _STAR_RULE_RE.sub("", cleaned)
    cleaned = _SPACED_STARS_RE.sub("", cleaned)
    cleaned = _HSPACE_RUN_RE.sub("  ", cleaned)
    cleaned = _BLANK_RUN_RE.sub("\n\n", cleaned)
    return _normalize_colon_markers(cleaned)


def strip_residual_markers(text: str) -> str:
    """
    Usuwa gwiazdki z początku i końca linii, jeśli nie tworzą pary **...**.

    "**Uwaga**: mniej wody"  → bez zmian (para otwiera linię)
    "* zostało po modelu **" → "zostało po modelu"
    """
    if text.startswith("*") and not _pair_at_start(text):
        text = _LEADING_MARKERS_RE.sub("", text, count=1)
    if text.endswith("*") and not _pair_at_end(text):
        text = _TRAILING_MARKERS_RE.sub("", text, count=1)
    return text


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _normalize_colon_markers(text: str) -> str:
    text = _COLON_IN_PAIR_RE.sub(r"**\1**:", text)
    return _COLON_MARKERS_RE.sub(_colon_replacement, text)


def _colon_replacement(m: re.Match[str]) -> str:
    source = m.string
    line_start = source.rfind("\n", 0, m.start()) + 1
    line_end = source.find("\n", m.end())
    if line_end == -1:
        line_end = len(source)

    if m.group().endswith(":"):
        # gwiazdki przed dwukropkiem: zostają tylko jako domknięcie pary
        before = _PAIR_RE.sub("", source[line_start:m.start()])
        return "**:" if _OPEN_PAIR_AT_END_RE.search(before) else ":"

    # gwiazdki po dwukropku: zostają tylko jako otwarcie pary
    after = source[m.end():line_end]
    return ":**" if _CLOSE_PAIR_AT_START_RE.match(after) else ":"


def _pair_at_start(text: str) -> bool:
    m = _PAIR_RE.match(text)
    return m is not None


def _pair_at_end(text: str) -> bool:
    last_end = -1
    for m in _PAIR_RE.finditer(text):
        last_end = m.end()
    return last_end == len(text)
