"""
formatter/render.py — renderery listy węzłów treści.

Publiczne API:
  spans_text(spans)     -> str                 (rekonstrukcja tekstu linii)
  to_plain_text(nodes)  -> str                 (markdown-podobny, bez **)
  to_dicts(nodes)       -> list[dict]          (gotowe do json.dumps)
  to_html(nodes)        -> str                 (h3/h4/p/ul/ol/strong)
  to_rich(nodes)        -> rich.console.Group  (terminal)
"""

from __future__ import annotations

from html import escape
from typing import Any, Iterable

from rich.console import Group
from rich.text import Text

from data_model.content import (
    BulletList,
    ContentNode,
    Emphasis,
    Heading,
    NumberedList,
    Paragraph,
    Spans,
)

# Poziom nagłówka → tag HTML (nagłówki odpowiedzi są podrzędne wobec strony).
_HTML_HEADING_TAG: dict[int, str] = {2: "h3", 3: "h4"}

_RICH_HEADING_STYLE: dict[int, str] = {2: "bold underline", 3: "bold"}


def spans_text(spans: Spans) -> str:
    """Skleja wartości spanów (bez rozróżnienia PlainText / Emphasis)."""
    return "".join(s.value for s in spans)


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------

def to_plain_text(nodes: Iterable[ContentNode]) -> str:
    """Bloki rozdzielone pustą linią; listy z markerami "- " / "N. "."""
    blocks: list[str] = []
    for node in nodes:
        if isinstance(node, BulletList):
            blocks.append("\n".join(f"- {spans_text(item)}" for item in node.items))
        elif isinstance(node, NumberedList):
            blocks.append("\n".join(
                f"{i}. {spans_text(item)}" for i, item in enumerate(node.items, start=1)
            ))
        else:
            blocks.append(spans_text(node.spans))
    return "\n\n".join(blocks)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def _spans_dicts(spans: Spans) -> list[dict[str, str]]:
    return [{"type": s.kind, "value": s.value} for s in spans]


def to_dicts(nodes: Iterable[ContentNode]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for node in nodes:
        if isinstance(node, (BulletList, NumberedList)):
            out.append({
                "type":  node.kind,
                "items": [_spans_dicts(item) for item in node.items],
            })
        elif isinstance(node, Heading):
            out.append({
                "type":  node.kind,
                "level": node.level,
                "spans": _spans_dicts(node.spans),
            })
        else:
            out.append({"type": node.kind, "spans": _spans_dicts(node.spans)})
    return out


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def _spans_html(spans: Spans) -> str:
    parts: list[str] = []
    for s in spans:
        if isinstance(s, Emphasis):
            parts.append(f"<strong>{escape(s.value)}</strong>")
        else:
            parts.append(escape(s.value))
    return "".join(parts)


def to_html(nodes: Iterable[ContentNode]) -> str:
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Heading):
            tag = _HTML_HEADING_TAG[node.level]
            parts.append(f"<{tag}>{_spans_html(node.spans)}</{tag}>")
        elif isinstance(node, Paragraph):
            parts.append(f"<p>{_spans_html(node.spans)}</p>")
        else:
            tag = "ol" if isinstance(node, NumberedList) else "ul"
            items = "".join(f"<li>{_spans_html(item)}</li>" for item in node.items)
            parts.append(f"<{tag}>{items}</{tag}>")

    if not parts:
        return ""
    return '<div class="formatted-content">' + "".join(parts) + "</div>"


# ---------------------------------------------------------------------------
# rich
# ---------------------------------------------------------------------------

def _spans_rich(spans: Spans, style: str = "") -> Text:
    text = Text(style=style)
    for s in spans:
        text.append(s.value, style="bold" if isinstance(s, Emphasis) else None)
    return text


def to_rich(nodes: Iterable[ContentNode]) -> Group:
    renderables: list[Text] = []
    for node in nodes:
        if isinstance(node, Heading):
            renderables.append(_spans_rich(node.spans, _RICH_HEADING_STYLE[node.level]))
        elif isinstance(node, Paragraph):
            renderables.append(_spans_rich(node.spans))
        elif isinstance(node, BulletList):
            for item in node.items:
                renderables.append(Text("  • ", style="green") + _spans_rich(item))
        else:
            for i, item in enumerate(node.items, start=1):
                renderables.append(Text(f"  {i}. ", style="cyan") + _spans_rich(item))
    return Group(*renderables)
