"""
llm_query/advisor.py — zapytania doradcze: prompt → Gemini → typowany wynik.

Publiczne API:
  ask(message, language)                    -> ChatReply
  analyze_soil(params, language)            -> SoilAnalysis
  analyze_pest(image_path, language)        -> PestDetection
  market_prices(query, language)            -> MarketReport
  weather_recommendations(snapshot, language) -> str

Odpowiedź niebędąca poprawnym JSON:
  - gleba / szkodniki → wynik zastępczy (fallback) z surowym tekstem
  - ceny              → ValueError (brak sensownego zastępstwa)
"""

from __future__ import annotations

import mimetypes
import pathlib
import sys

from data_model.advisory import (
    ChatReply,
    MarketQuery,
    MarketReport,
    PestDetection,
    SoilAnalysis,
    SoilParameters,
    WeatherSnapshot,
)
from validator import ResultValidationError, ResultValidator

from .gemini import call_gemini
from .prompt import (
    PEST_USER_PROMPT,
    chat_system_prompt,
    market_prompts,
    pest_system_prompt,
    soil_prompts,
    weather_prompts,
)
from .response import extract_json

_EMPTY_CHAT_REPLY = "I couldn't generate a response. Please try again."

_validator = ResultValidator()


def _warn(message: str) -> None:
    print(f"[warn] {message}", file=sys.stderr)


def ask(message: str, language: str | None = None, model: str | None = None) -> ChatReply:
    if not message.strip():
        raise ValueError("Pusta wiadomość.")
    raw = call_gemini(message, system=chat_system_prompt(language), model=model)
    return ChatReply(text=raw.strip() or _EMPTY_CHAT_REPLY)


def analyze_soil(
    params: SoilParameters,
    language: str | None = None,
    model: str | None = None,
) -> SoilAnalysis:
    problems = params.validate()
    if problems:
        raise ValueError(" ".join(problems))

    system, user = soil_prompts(params, language)
    raw = call_gemini(user, system=system, model=model)

    data = extract_json(raw)
    if data is None:
        _warn("Odpowiedź modelu nie zawiera JSON — wynik zastępczy.")
        return SoilAnalysis.fallback(raw)

    report = _validator.validate("soil", data)
    for w in report.warnings:
        _warn(w)
    if not report.is_valid:
        _warn(f"Niepoprawny JSON analizy gleby ({len(report.errors)} błędów) — wynik zastępczy.")
        return SoilAnalysis.fallback(raw)
    return report.result  # type: ignore[return-value]


def analyze_pest(
    image_path: str | pathlib.Path,
    language: str | None = None,
    model: str | None = None,
) -> PestDetection:
    path = pathlib.Path(image_path)
    if not path.is_file():
        raise ValueError(f"Plik nie istnieje: {path}")
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise ValueError(f"Oczekiwano pliku obrazu, otrzymano: {path.suffix or path.name}")

    raw = call_gemini(
        PEST_USER_PROMPT,
        system=pest_system_prompt(language),
        image=path.read_bytes(),
        mime_type=mime_type,
        model=model,
    )

    data = extract_json(raw)
    if data is None:
        _warn("Odpowiedź modelu nie zawiera JSON — wynik zastępczy.")
        return PestDetection.fallback(raw)

    report = _validator.validate("pest", data)
    for w in report.warnings:
        _warn(w)
    if not report.is_valid:
        _warn(f"Niepoprawny JSON analizy szkodników ({len(report.errors)} błędów) — wynik zastępczy.")
        return PestDetection.fallback(raw)
    return report.result  # type: ignore[return-value]


def market_prices(
    query: MarketQuery,
    language: str | None = None,
    model: str | None = None,
) -> MarketReport:
    """
    Raises:
        ValueError:            Odpowiedź bez JSON.
        ResultValidationError: JSON niezgodny ze schematem cen.
    """
    system, user = market_prompts(query, language)
    raw = call_gemini(user, system=system, model=model)

    data = extract_json(raw)
    if data is None:
        raise ValueError("Failed to parse market data")

    report = _validator.validate("market", data)
    for w in report.warnings:
        _warn(w)
    if not report.is_valid or report.result is None:
        raise ResultValidationError("market", report)
    return report.result  # type: ignore[return-value]


def weather_recommendations(
    snapshot: WeatherSnapshot,
    language: str | None = None,
    model: str | None = None,
) -> str:
    system, user = weather_prompts(snapshot, language)
    return call_gemini(user, system=system, model=model)
