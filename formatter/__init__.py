"""
formatter — zamiana tekstu z modelu językowego na ustrukturyzowaną treść.

Publiczne API:
  format_content(content)   -> list[ContentNode]
  format_inline(text)       -> Spans
  clean_text(text)          -> str
  classify_line(line)       -> LineMatch
  spans_text / to_plain_text / to_dicts / to_html / to_rich  (renderery)
"""

from .parser import format_content
from .inline import format_inline
from .text_cleaner import clean_text, strip_residual_markers
from .line_patterns import LineKind, LineMatch, LinePattern, PATTERNS, classify_line
from .render import spans_text, to_plain_text, to_dicts, to_html, to_rich

__all__ = [
    "format_content",
    "format_inline",
    "clean_text",
    "strip_residual_markers",
    "LineKind",
    "LineMatch",
    "LinePattern",
    "PATTERNS",
    "classify_line",
    "spans_text",
    "to_plain_text",
    "to_dicts",
    "to_html",
    "to_rich",
]
