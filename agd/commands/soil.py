"""Komenda: agd soil — analiza parametrów gleby i rekomendacje nawożenia."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from agd._display import dump_json, fail, show_content
from data_model.advisory import SoilAnalysis, SoilParameters
from llm_query import analyze_soil
from llm_query.settings import default_language

console = Console()

HEALTH_STYLE: dict[str, str] = {
    "good":     "bold green",
    "moderate": "bold yellow",
    "poor":     "bold red",
    "unknown":  "dim",
}

SUITABILITY_STYLE: dict[str, str] = {
    "high":   "green",
    "medium": "yellow",
    "low":    "red",
}


def _show_analysis(analysis: SoilAnalysis) -> None:
    health = Text(analysis.soil_health.value.upper(), style=HEALTH_STYLE[analysis.soil_health])
    console.print(Text("Stan gleby: ") + health)

    f = analysis.fertilizer
    fert = Table(box=box.SIMPLE_HEAD, show_header=False, expand=False)
    fert.add_column("", style="dim", no_wrap=True)
    fert.add_column("")
    fert.add_row("Nawóz", Text(f.name, style="bold"))
    fert.add_row("NPK", f.npk_ratio or "-")
    fert.add_row("Dawka", f.amount or "-")
    fert.add_row("Aplikacja", f.application_method or "-")
    console.print(fert)

    if analysis.crops:
        crops = Table(
            box=box.SIMPLE_HEAD,
            show_header=True,
            header_style="bold white",
            row_styles=["", "dim"],
            expand=False,
        )
        crops.add_column("UPRAWA", no_wrap=True, style="bold cyan")
        crops.add_column("PRZYDATNOŚĆ", no_wrap=True)
        crops.add_column("UZASADNIENIE", max_width=70)
        for c in analysis.crops:
            crops.add_row(c.name, Text(c.suitability.value, style=SUITABILITY_STYLE[c.suitability]), c.reason)
        console.print(crops)

    for item in analysis.improvements:
        console.print(f"  [green]+[/green] {item}")
    for item in analysis.warnings:
        console.print(f"  [yellow]![/yellow] {item}")

    if analysis.advice:
        show_content(console, analysis.advice, title="Porada")


def run(args: argparse.Namespace) -> None:
    params = SoilParameters(
        ph=args.ph,
        nitrogen=args.nitrogen,
        phosphorus=args.phosphorus,
        potassium=args.potassium,
        moisture=args.moisture,
    )

    try:
        with console.status("Analiza gleby…"):
            analysis = analyze_soil(params, language=args.lang, model=args.model)
    except ValueError as e:
        fail(console, "Błąd danych wejściowych", e)
    except Exception as e:
        fail(console, "Błąd Gemini API", e)

    if args.json:
        print(dump_json(analysis))
        return
    _show_analysis(analysis)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "soil",
        help="Analizuje parametry gleby (pH, NPK, wilgotność).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wysyła parametry gleby do modelu i wyświetla: stan gleby, zalecany nawóz,
przydatne uprawy, usprawnienia, ostrzeżenia i poradę.

Wymaga zmiennej środowiskowej GEMINI_API_KEY (lub pliku .env).

Przykłady:
  agd soil --ph 6.5 --nitrogen 280 --phosphorus 25 --potassium 150 --moisture 22
  agd soil --ph 8.1 -n 120 -p 10 -k 90 --moisture 12 --lang hi --json
        """,
    )
    p.add_argument("--ph", type=float, required=True, help="Odczyn pH (0–14).")
    p.add_argument("--nitrogen", "-n", type=float, required=True, help="Azot N [kg/ha].")
    p.add_argument("--phosphorus", "-p", type=float, required=True, help="Fosfor P [kg/ha].")
    p.add_argument("--potassium", "-k", type=float, required=True, help="Potas K [kg/ha].")
    p.add_argument("--moisture", type=float, required=True, help="Wilgotność [%%] (0–100).")
    p.add_argument(
        "--lang", "-l",
        default=default_language(),
        metavar="JĘZYK",
        help="Język odpowiedzi (domyślnie: AGD_LANGUAGE / en).",
    )
    p.add_argument("--model", "-m", metavar="MODEL", help="Model Gemini (domyślnie: GEMINI_MODEL).")
    p.add_argument("--json", action="store_true", help="Wypisz wynik jako JSON.")
    p.set_defaults(func=run)
