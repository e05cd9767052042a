"""
validator — walidacja odpowiedzi JSON modelu i budowa typowanych wyników.

Interfejs publiczny:
    ResultValidator  — główny walidator (etapy A–D)
    normalize_payload — camelCase → snake_case, przycięcie tekstów
    ValidationReport, ValidationError, ErrorCode — typy raportu
    ResultValidationError — wyjątek z raportem

Typowe użycie:
    from validator import ResultValidator

    report = ResultValidator().validate("pest", payload)
    if not report.is_valid:
        for e in report.errors:
            print(e.code, e.path, e.message)
"""

from .types import ErrorCode, ResultValidationError, ValidationError, ValidationReport
from .normalizer import normalize_payload, snake_case
from .result_validator import (
    FieldSpec,
    ResultValidator,
    SOIL_FIELDS,
    PEST_FIELDS,
    MARKET_FIELDS,
)

__all__ = [
    "ErrorCode",
    "ResultValidationError",
    "ValidationError",
    "ValidationReport",
    "normalize_payload",
    "snake_case",
    "FieldSpec",
    "ResultValidator",
    "SOIL_FIELDS",
    "PEST_FIELDS",
    "MARKET_FIELDS",
]
