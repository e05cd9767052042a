"""Komenda: agd market — ceny płodów rolnych na targowiskach (mandi)."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from agd._display import dump_json, fail, show_content
from data_model.advisory import CropPrice, MarketQuery, MarketReport
from llm_query import market_prices
from llm_query.settings import default_language
from validator import ResultValidationError

console = Console()

TREND_STYLE: dict[str, tuple[str, str]] = {
    "up":     ("▲", "green"),
    "down":   ("▼", "red"),
    "stable": ("■", "dim"),
}


def _change(cp: CropPrice) -> Text:
    pct = cp.change_percent
    if pct is None:
        return Text("-", style="dim")
    arrow, style = TREND_STYLE[cp.trend]
    return Text(f"{arrow} {pct:+.1f}%", style=style)


def _show_report(report: MarketReport) -> None:
    console.print(f"[bold]{report.location}[/bold]  [dim]{report.queried_date}[/dim]\n")

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("UPRAWA", no_wrap=True, style="bold cyan")
    table.add_column("CENA", justify="right", no_wrap=True)
    table.add_column("POPRZEDNIO", justify="right", no_wrap=True)
    table.add_column("ZMIANA", justify="right", no_wrap=True)
    table.add_column("JEDN.", no_wrap=True)
    table.add_column("REKOMENDACJA", max_width=60)

    for cp in report.prices:
        table.add_row(
            cp.crop,
            f"₹{cp.current_price:,.0f}",
            f"₹{cp.previous_price:,.0f}",
            _change(cp),
            cp.unit,
            cp.recommendation,
        )
    console.print(table)

    for cp in report.prices:
        if not cp.markets:
            continue
        markets = Table(
            title=f"{cp.crop} — targowiska",
            title_justify="left",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold",
            expand=False,
        )
        markets.add_column("TARG", no_wrap=True)
        markets.add_column("CENA", justify="right", no_wrap=True)
        markets.add_column("ODLEGŁOŚĆ", no_wrap=True, style="dim")
        for m in cp.markets:
            markets.add_row(m.name, f"₹{m.price:,.0f}", m.distance or "-")
        console.print(markets)

    if report.summary:
        show_content(console, report.summary, title="Podsumowanie")


def _query_from_args(args: argparse.Namespace) -> MarketQuery:
    query = MarketQuery(location=args.location, date=args.date)
    if args.crop:
        query.crops = args.crop
    if args.date_from or args.date_to:
        if not (args.date_from and args.date_to):
            console.print("[red]Zakres dat wymaga obu opcji: --from i --to.[/red]")
            raise SystemExit(1)
        query.start_date = args.date_from
        query.end_date   = args.date_to
    if args.lat is not None and args.lon is not None:
        query.coordinates = (args.lat, args.lon)
    return query


def run(args: argparse.Namespace) -> None:
    query = _query_from_args(args)

    try:
        with console.status("Pobieranie cen…"):
            report = market_prices(query, language=args.lang, model=args.model)
    except ResultValidationError as e:
        for err in e.report.errors:
            console.print(f"  [dim]{err.path}[/dim] {err.message}")
        fail(console, "Niepoprawna odpowiedź modelu", e)
    except ValueError as e:
        fail(console, "Błąd danych", e)
    except Exception as e:
        fail(console, "Błąd Gemini API", e)

    if args.json:
        print(dump_json(report))
        return
    _show_report(report)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "market",
        help="Pokazuje ceny upraw na targowiskach (mandi) i prognozę.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pyta model o aktualne ceny upraw, trend, najbliższe targowiska
i prognozę cen. Bez --crop: Wheat, Rice, Maize.

Wymaga zmiennej środowiskowej GEMINI_API_KEY (lub pliku .env).

Przykłady:
  agd market
  agd market --crop Onion --crop Tomato --location "Nashik, Maharashtra"
  agd market --from 2025-01-01 --to 2025-01-31 --json
  agd market --lat 25.3176 --lon 82.9739
        """,
    )
    p.add_argument(
        "--crop", "-c",
        action="append",
        metavar="UPRAWA",
        help="Uprawa (można powtórzyć).",
    )
    p.add_argument("--location", default="India", metavar="MIEJSCE", help="Lokalizacja (domyślnie: India).")
    p.add_argument("--date", metavar="RRRR-MM-DD", help="Data notowań (domyślnie: dziś).")
    p.add_argument("--from", dest="date_from", metavar="RRRR-MM-DD", help="Początek zakresu dat.")
    p.add_argument("--to", dest="date_to", metavar="RRRR-MM-DD", help="Koniec zakresu dat.")
    p.add_argument("--lat", type=float, help="Szerokość geograficzna (z --lon).")
    p.add_argument("--lon", type=float, help="Długość geograficzna (z --lat).")
    p.add_argument(
        "--lang", "-l",
        default=default_language(),
        metavar="JĘZYK",
        help="Język odpowiedzi (domyślnie: AGD_LANGUAGE / en).",
    )
    p.add_argument("--model", "-m", metavar="MODEL", help="Model Gemini (domyślnie: GEMINI_MODEL).")
    p.add_argument("--json", action="store_true", help="Wypisz wynik jako JSON.")
    p.set_defaults(func=run)
