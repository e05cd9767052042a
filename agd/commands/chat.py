"""Komenda: agd chat — pytanie do doradcy rolniczego."""

from __future__ import annotations

import argparse

from rich.console import Console

from agd._display import fail, show_content
from llm_query import ask
from llm_query.settings import default_language

console = Console()


def run(args: argparse.Namespace) -> None:
    message = " ".join(args.message)
    if not message.strip():
        console.print("[red]Pusta wiadomość:[/red] podaj treść pytania.")
        raise SystemExit(1)

    try:
        with console.status("Doradca myśli…"):
            reply = ask(message, language=args.lang, model=args.model)
    except ValueError as e:
        fail(console, "Błąd konfiguracji", e)
    except Exception as e:
        fail(console, "Błąd Gemini API", e)

    show_content(console, reply.text, title="Doradca")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "chat",
        help="Zadaje pytanie doradcy rolniczemu (Gemini).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wysyła pytanie do modelu z rolą eksperta rolniczego i wyświetla
sformatowaną odpowiedź.

Wymaga zmiennej środowiskowej GEMINI_API_KEY (lub pliku .env).

Przykłady:
  agd chat "Kiedy siać pszenicę w Uttar Pradesh?"
  agd chat --lang hi "Jak zwalczać mszyce na bawełnie?"
        """,
    )
    p.add_argument("message", nargs="+", metavar="PYTANIE", help="Treść pytania.")
    p.add_argument(
        "--lang", "-l",
        default=default_language(),
        metavar="JĘZYK",
        help="Język odpowiedzi: kod (hi, ta, ...) lub nazwa (domyślnie: AGD_LANGUAGE / en).",
    )
    p.add_argument("--model", "-m", metavar="MODEL", help="Model Gemini (domyślnie: GEMINI_MODEL).")
    p.set_defaults(func=run)
