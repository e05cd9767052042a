"""
agd — agrodoradca, narzędzie CLI.

Użycie:
  agd <komenda> [opcje]

Komendy:
  format    Formatuje tekst z modelu (nagłówki, listy, pogrubienia).
  chat      Zadaje pytanie doradcy rolniczemu.
  soil      Analizuje parametry gleby i rekomenduje nawóz oraz uprawy.
  pest      Rozpoznaje szkodniki / choroby na zdjęciu rośliny.
  market    Pokazuje ceny upraw na targowiskach i prognozę.
  weather   Pogoda, prognoza, ostrzeżenia i zalecenia rolnicze.
"""

from __future__ import annotations

import argparse
import sys

from agd.commands import format as cmd_format
from agd.commands import chat as cmd_chat
from agd.commands import soil as cmd_soil
from agd.commands import pest as cmd_pest
from agd.commands import market as cmd_market
from agd.commands import weather as cmd_weather


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agd",
        description="agrodoradca — doradca rolniczy w terminalu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="agd 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_format.add_parser(subparsers)
    cmd_chat.add_parser(subparsers)
    cmd_soil.add_parser(subparsers)
    cmd_pest.add_parser(subparsers)
    cmd_market.add_parser(subparsers)
    cmd_weather.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    # Windows: terminal może używać cp1252 — wymuszamy UTF-8 (polskie znaki, ₹, emoji).
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")

    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
