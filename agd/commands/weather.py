"""Komenda: agd weather — pogoda, prognoza i zalecenia dla gospodarstwa."""

from __future__ import annotations

import argparse

import requests
from rich import box
from rich.console import Console
from rich.table import Table

from agd._display import dump_json, fail, show_content
from data_model.advisory import WeatherSnapshot
from llm_query import weather_recommendations
from llm_query.settings import default_language
from weather import DEFAULT_COORDINATES, fetch_weather

console = Console()

CONDITION_ICON: dict[str, str] = {
    "sunny":  "☀️",
    "cloudy": "☁️",
    "rainy":  "🌧️",
}


def _show_snapshot(s: WeatherSnapshot) -> None:
    icon = CONDITION_ICON.get(s.condition, "")
    console.print(f"[bold]{s.location}[/bold]  {icon} {s.description}")
    console.print(
        f"  {s.temperature}°C   wilgotność {s.humidity}%   "
        f"wiatr {s.wind_speed} km/h   opad {s.rainfall} mm"
    )

    if s.forecast:
        table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white", expand=False)
        table.add_column("DZIEŃ", no_wrap=True, style="bold cyan")
        table.add_column("MAX", justify="right")
        table.add_column("MIN", justify="right", style="dim")
        table.add_column("WARUNKI")
        for d in s.forecast:
            table.add_row(d.day, f"{d.high}°", f"{d.low}°", f"{CONDITION_ICON.get(d.condition, '')} {d.condition}")
        console.print(table)

    for alert in s.alerts:
        console.print(f"  [bold yellow]{alert}[/bold yellow]")


def run(args: argparse.Namespace) -> None:
    lat, lon = DEFAULT_COORDINATES
    if args.lat is not None:
        lat = args.lat
    if args.lon is not None:
        lon = args.lon

    try:
        with console.status("Pobieranie pogody…"):
            snapshot = fetch_weather(lat, lon)
    except ValueError as e:
        fail(console, "Błąd konfiguracji", e)
    except requests.RequestException as e:
        fail(console, "Błąd OpenWeatherMap", e)

    if args.json:
        print(dump_json(snapshot))
        return
    _show_snapshot(snapshot)

    if args.no_advice:
        return
    try:
        with console.status("Przygotowywanie zaleceń…"):
            advice = weather_recommendations(snapshot, language=args.lang, model=args.model)
    except ValueError as e:
        fail(console, "Błąd konfiguracji", e)
    except Exception as e:
        fail(console, "Błąd Gemini API", e)
    show_content(console, advice, title="Zalecenia")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "weather",
        help="Pogoda, prognoza 7-dniowa i zalecenia rolnicze.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera bieżącą pogodę i prognozę z OpenWeatherMap, wyświetla ostrzeżenia
(upał, przymrozek, wilgotność, wiatr, deszcz) i prosi model o zalecenia.

Wymaga OPENWEATHER_API_KEY, a dla zaleceń także GEMINI_API_KEY.
Bez współrzędnych: Waranasi (25.3176, 82.9739).

Przykłady:
  agd weather
  agd weather --lat 19.9975 --lon 73.7898 --lang mr
  agd weather --no-advice --json
        """,
    )
    p.add_argument("--lat", type=float, help="Szerokość geograficzna.")
    p.add_argument("--lon", type=float, help="Długość geograficzna.")
    p.add_argument(
        "--lang", "-l",
        default=default_language(),
        metavar="JĘZYK",
        help="Język zaleceń (domyślnie: AGD_LANGUAGE / en).",
    )
    p.add_argument("--model", "-m", metavar="MODEL", help="Model Gemini (domyślnie: GEMINI_MODEL).")
    p.add_argument("--no-advice", action="store_true", help="Bez zaleceń z modelu.")
    p.add_argument("--json", action="store_true", help="Wypisz dane pogodowe jako JSON (bez zaleceń).")
    p.set_defaults(func=run)
