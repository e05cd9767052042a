"""
validator/types.py — kody błędów i struktury raportu walidacji.

ValidationError — pojedynczy błąd z kodem, ścieżką JSON Pointer i komunikatem.
ValidationReport — wynik walidacji: is_valid, errors, warnings,
    opcjonalnie zbudowany typowany wynik (SoilAnalysis, PestDetection, ...).
ResultValidationError — wyjątek niosący raport (ResultValidator.require).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from data_model.advisory import AdvisoryResult


class ErrorCode(StrEnum):
    """Stałe kody błędów walidatora (etapy A–D)."""

    # — rodzaj wyniku
    UNKNOWN_KIND       = "E_UNKNOWN_KIND"
    NOT_AN_OBJECT      = "E_NOT_AN_OBJECT"

    # A — pola wymagane
    MISSING_FIELD      = "E_MISSING_FIELD"

    # B — typy pól
    WRONG_TYPE         = "E_WRONG_TYPE"

    # C — wartości enumów
    ENUM_VALUE_INVALID = "E_ENUM_VALUE_INVALID"

    # D — zakresy liczbowe
    OUT_OF_RANGE       = "E_OUT_OF_RANGE"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:    stały identyfikator klasy błędu (ErrorCode)
    - path:    JSON Pointer do miejsca błędu, np. "/prices/0/current_price"
    - message: czytelny opis błędu
    - details: opcjonalny słownik z dodatkowymi danymi
    """

    code: ErrorCode
    path: str
    message: str
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji odpowiedzi modelu.

    - is_valid: True gdy brak błędów (warnings nie wpływają)
    - errors:   lista błędów (ValidationError)
    - warnings: komunikaty ostrzegawcze, np. o wartościach zamienionych na "unknown"
    - result:   typowany wynik (None gdy walidacja nie przeszła)
    """

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    result: AdvisoryResult | None = None


class ResultValidationError(ValueError):
    """Odpowiedź modelu nie spełnia schematu wyniku."""

    def __init__(self, kind: str, report: ValidationReport) -> None:
        summary = "; ".join(f"{e.path}: {e.message}" for e in report.errors[:5])
        super().__init__(f"Niepoprawna odpowiedź ({kind}): {summary}")
        self.kind = kind
        self.report = report
