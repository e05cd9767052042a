"""Wspólne wyświetlanie wyników komend agd (rich)."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, NoReturn

from rich.console import Console
from rich.panel import Panel

from formatter import format_content, to_rich


def show_content(console: Console, text: str, title: str | None = None) -> None:
    """Tekst z modelu → format_content() → panel rich."""
    nodes = format_content(text)
    if not nodes:
        console.print("[yellow]Brak treści do wyświetlenia.[/yellow]")
        return
    console.print(Panel(to_rich(nodes), title=title, title_align="left", border_style="green"))


def dump_json(result: Any) -> str:
    """Typowany wynik (dataclass) → JSON (wartości StrEnum jako tekst)."""
    return json.dumps(dataclasses.asdict(result), ensure_ascii=False, indent=2)


def fail(console: Console, label: str, error: Exception) -> NoReturn:
    console.print(f"[red]{label}:[/red] {error}")
    raise SystemExit(1)
