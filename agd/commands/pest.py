"""Komenda: agd pest — rozpoznawanie szkodników i chorób ze zdjęcia liścia."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.text import Text

from agd._display import dump_json, fail, show_content
from data_model.advisory import PestDetection
from llm_query import analyze_pest
from llm_query.settings import default_language

console = Console()

SEVERITY_STYLE: dict[str, str] = {
    "low":     "green",
    "medium":  "yellow",
    "high":    "bold red",
    "unknown": "dim",
}


def _show_list(title: str, items: list[str], marker: str) -> None:
    if not items:
        return
    console.print(f"\n[bold]{title}[/bold]")
    for item in items:
        console.print(f"  {marker} {item}")


def _show_detection(d: PestDetection) -> None:
    if d.detected:
        header = Text(d.name, style="bold") + Text(f"  ({d.confidence}%)  ", style="dim")
        header += Text(d.severity.value, style=SEVERITY_STYLE[d.severity])
        console.print(header)
    else:
        console.print(f"[green]Nie wykryto szkodników ani chorób.[/green] [dim]({d.name})[/dim]")

    _show_list("Objawy", d.symptoms, "[yellow]•[/yellow]")
    _show_list("Leczenie", d.treatment, "[cyan]•[/cyan]")
    _show_list("Zapobieganie", d.prevention, "[green]•[/green]")

    if d.additional_info:
        console.print()
        show_content(console, d.additional_info, title="Dodatkowe informacje")


def run(args: argparse.Namespace) -> None:
    try:
        with console.status("Analiza zdjęcia…"):
            detection = analyze_pest(args.image, language=args.lang, model=args.model)
    except ValueError as e:
        fail(console, "Błąd danych wejściowych", e)
    except Exception as e:
        fail(console, "Błąd Gemini API", e)

    if args.json:
        print(dump_json(detection))
        return
    _show_detection(detection)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "pest",
        help="Rozpoznaje szkodniki / choroby na zdjęciu rośliny.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wysyła zdjęcie liścia/rośliny do modelu multimodalnego i wyświetla
rozpoznanie: nazwę, pewność, nasilenie, objawy, leczenie i zapobieganie.

Wymaga zmiennej środowiskowej GEMINI_API_KEY (lub pliku .env).

Przykłady:
  agd pest lisc.jpg
  agd pest lisc.png --lang ta --json
        """,
    )
    p.add_argument("image", metavar="OBRAZ", help="Plik obrazu (jpg, png, webp).")
    p.add_argument(
        "--lang", "-l",
        default=default_language(),
        metavar="JĘZYK",
        help="Język odpowiedzi (domyślnie: AGD_LANGUAGE / en).",
    )
    p.add_argument("--model", "-m", metavar="MODEL", help="Model Gemini (domyślnie: GEMINI_MODEL).")
    p.add_argument("--json", action="store_true", help="Wypisz wynik jako JSON.")
    p.set_defaults(func=run)
