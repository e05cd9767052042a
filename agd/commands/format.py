"""Komenda: agd format — formatuje tekst (plik lub stdin) do ustrukturyzowanej treści."""

from __future__ import annotations

import argparse
import json
import pathlib
import sys

from rich.console import Console

from formatter import format_content, to_dicts, to_html, to_plain_text, to_rich

console = Console()


def _read_input(path: str | None) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    p = pathlib.Path(path)
    if not p.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {p}")
        raise SystemExit(1)
    return p.read_text(encoding="utf-8")


def run(args: argparse.Namespace) -> None:
    nodes = format_content(_read_input(args.file))

    if args.json:
        print(json.dumps(to_dicts(nodes), ensure_ascii=False, indent=2))
    elif args.html:
        print(to_html(nodes))
    elif args.plain:
        print(to_plain_text(nodes))
    elif nodes:
        console.print(to_rich(nodes))
    else:
        console.print("[yellow]Brak treści.[/yellow]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "format",
        help="Formatuje tekst z modelu (nagłówki, listy, pogrubienia).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Czyści i parsuje luźny, markdown-podobny tekst (np. odpowiedź modelu)
na węzły: nagłówki, akapity, listy punktowane i numerowane, pogrubienia.

Przykłady:
  agd format odpowiedz.txt
  echo "## Gleba\\n- Dodaj azot" | agd format
  agd format odpowiedz.txt --json
  agd format odpowiedz.txt --html > odpowiedz.html
        """,
    )
    p.add_argument(
        "file",
        nargs="?",
        metavar="PLIK",
        help="Plik tekstowy (domyślnie: stdin).",
    )
    out = p.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="Wypisz węzły jako JSON.")
    out.add_argument("--html", action="store_true", help="Wypisz HTML.")
    out.add_argument("--plain", action="store_true", help="Wypisz czysty tekst (bez **).")
    p.set_defaults(func=run)
