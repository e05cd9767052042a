"""
validator/result_validator.py — walidacja odpowiedzi JSON modelu.

ResultValidator().validate(kind, payload) -> ValidationReport

Rodzaje (kind): "soil", "pest", "market".

Etapy (dla każdego pola, rekurencyjnie w obiektach i listach obiektów):
  A — pola wymagane      (brak → E_MISSING_FIELD; opcjonalne → wartość domyślna)
  B — typy               (str, number, int, bool, lista, obiekt; liczby jako
                          tekst "2,350" są akceptowane)
  C — enumy              (wielkość liter bez znaczenia; nieznana wartość →
                          "unknown" z ostrzeżeniem, a gdy enum go nie ma → błąd)
  D — zakresy            (confidence 0–100, ceny >= 0)

Po przejściu walidacji budowany jest typowany wynik z data_model.advisory.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable, Literal

from data_model.advisory import (
    AdvisoryResult,
    Confidence,
    CropPrice,
    CropSuitability,
    Fertilizer,
    MarketQuote,
    MarketReport,
    PestDetection,
    PricePoint,
    PricePrediction,
    Severity,
    SoilAnalysis,
    SoilHealth,
    Suitability,
    Trend,
)

from .normalizer import normalize_payload
from .types import ErrorCode, ResultValidationError, ValidationError, ValidationReport

type FieldType = Literal["str", "number", "int", "bool", "str_list", "object", "object_list"]

# Limit błędów — po przekroczeniu przerywamy dalszą walidację
MAX_ERRORS = 20


# ---------------------------------------------------------------------------
# Opis pól
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    type: FieldType
    required: bool = True
    default: Any = None
    enum: type[StrEnum] | None = None
    minimum: float | None = None
    maximum: float | None = None
    fields: tuple[FieldSpec, ...] = ()


def _f(name: str, type_: FieldType, **kw: Any) -> FieldSpec:
    return FieldSpec(name, type_, **kw)


_FERTILIZER = (
    _f("name", "str"),
    _f("npk_ratio", "str", required=False, default=""),
    _f("amount", "str", required=False, default=""),
    _f("application_method", "str", required=False, default=""),
)

_CROP = (
    _f("name", "str"),
    _f("suitability", "str", required=False, default=Suitability.MEDIUM, enum=Suitability),
    _f("reason", "str", required=False, default=""),
)

SOIL_FIELDS: tuple[FieldSpec, ...] = (
    _f("soil_health", "str", enum=SoilHealth),
    _f("fertilizer", "object", fields=_FERTILIZER),
    _f("crops", "object_list", required=False, default=[], fields=_CROP),
    _f("improvements", "str_list", required=False, default=[]),
    _f("advice", "str", required=False, default=""),
    _f("warnings", "str_list", required=False, default=[]),
)

PEST_FIELDS: tuple[FieldSpec, ...] = (
    _f("detected", "bool"),
    _f("name", "str"),
    _f("confidence", "int", required=False, default=0, minimum=0, maximum=100),
    _f("severity", "str", required=False, default=Severity.UNKNOWN, enum=Severity),
    _f("symptoms", "str_list", required=False, default=[]),
    _f("treatment", "str_list", required=False, default=[]),
    _f("prevention", "str_list", required=False, default=[]),
    _f("additional_info", "str", required=False, default=""),
)

_MARKET = (
    _f("name", "str"),
    _f("price", "number", minimum=0),
    _f("distance", "str", required=False, default=""),
    _f("address", "str", required=False, default=""),
)

_PRICE_POINT = (
    _f("day", "str", required=False, default=""),
    _f("date", "str", required=False, default=""),
    _f("price", "number", minimum=0),
)

_PREDICTION = (
    _f("day", "str", required=False, default=""),
    _f("date", "str", required=False, default=""),
    _f("predicted_price", "number", minimum=0),
    _f("confidence", "str", required=False, default=Confidence.MEDIUM, enum=Confidence),
)

_CROP_PRICE = (
    _f("crop", "str"),
    _f("current_price", "number", minimum=0),
    _f("previous_price", "number", required=False, default=0, minimum=0),
    _f("unit", "str", required=False, default="quintal"),
    _f("trend", "str", required=False, default=Trend.STABLE, enum=Trend),
    _f("markets", "object_list", required=False, default=[], fields=_MARKET),
    _f("price_trend", "object_list", required=False, default=[], fields=_PRICE_POINT),
    _f("predictions", "object_list", required=False, default=[], fields=_PREDICTION),
    _f("recommendation", "str", required=False, default=""),
)

MARKET_FIELDS: tuple[FieldSpec, ...] = (
    _f("prices", "object_list", fields=_CROP_PRICE),
    _f("summary", "str", required=False, default=""),
    _f("queried_date", "str", required=False, default=""),
    _f("location", "str", required=False, default=""),
)


# ---------------------------------------------------------------------------
# Budowanie typowanych wyników
# ---------------------------------------------------------------------------

def _build_soil(d: dict[str, Any]) -> SoilAnalysis:
    return SoilAnalysis(
        soil_health=d["soil_health"],
        fertilizer=Fertilizer(**d["fertilizer"]),
        crops=[CropSuitability(**c) for c in d["crops"]],
        improvements=d["improvements"],
        advice=d["advice"],
        warnings=d["warnings"],
    )


def _build_pest(d: dict[str, Any]) -> PestDetection:
    return PestDetection(**d)


def _build_market(d: dict[str, Any]) -> MarketReport:
    prices = [
        CropPrice(
            crop=p["crop"],
            current_price=p["current_price"],
            previous_price=p["previous_price"],
            unit=p["unit"],
            trend=p["trend"],
            markets=[MarketQuote(**m) for m in p["markets"]],
            price_trend=[PricePoint(**t) for t in p["price_trend"]],
            predictions=[PricePrediction(**x) for x in p["predictions"]],
            recommendation=p["recommendation"],
        )
        for p in d["prices"]
    ]
    return MarketReport(
        prices=prices,
        summary=d["summary"],
        queried_date=d["queried_date"],
        location=d["location"],
    )


_SCHEMAS: dict[str, tuple[tuple[FieldSpec, ...], Callable[[dict[str, Any]], AdvisoryResult]]] = {
    "soil":   (SOIL_FIELDS, _build_soil),
    "pest":   (PEST_FIELDS, _build_pest),
    "market": (MARKET_FIELDS, _build_market),
}


# ---------------------------------------------------------------------------
# ResultValidator
# ---------------------------------------------------------------------------

class ResultValidator:
    """
    Walidator odpowiedzi JSON modelu względem opisów pól (SOIL/PEST/MARKET_FIELDS).

    Użycie:
        report = ResultValidator().validate("soil", payload)
        if report.is_valid:
            analysis = report.result
    """

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def validate(self, kind: str, payload: Any) -> ValidationReport:
        errors: list[ValidationError] = []
        warnings: list[str] = []

        if kind not in _SCHEMAS:
            errors.append(ValidationError(
                code=ErrorCode.UNKNOWN_KIND,
                path="/",
                message=f"Nieznany rodzaj wyniku: {kind!r}",
                details={"allowed": sorted(_SCHEMAS)},
            ))
            return ValidationReport(is_valid=False, errors=errors)

        if not isinstance(payload, dict):
            errors.append(ValidationError(
                code=ErrorCode.NOT_AN_OBJECT,
                path="/",
                message=f"Oczekiwano obiektu JSON, otrzymano {type(payload).__name__}",
            ))
            return ValidationReport(is_valid=False, errors=errors)

        specs, build = _SCHEMAS[kind]
        cleaned = self._check_object(normalize_payload(payload), specs, "", errors, warnings)

        if errors:
            return ValidationReport(is_valid=False, errors=errors, warnings=warnings)

        return ValidationReport(
            is_valid=True,
            errors=errors,
            warnings=warnings,
            result=build(cleaned),
        )

    def require(self, kind: str, payload: Any) -> AdvisoryResult:
        """Jak validate(), ale zwraca wynik albo rzuca ResultValidationError."""
        report = self.validate(kind, payload)
        if not report.is_valid or report.result is None:
            raise ResultValidationError(kind, report)
        return report.result

    # ------------------------------------------------------------------
    # Obiekty i pola
    # ------------------------------------------------------------------

    def _check_object(
        self,
        obj: dict[str, Any],
        specs: tuple[FieldSpec, ...],
        path: str,
        errors: list[ValidationError],
        warnings: list[str],
    ) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for spec in specs:
            if len(errors) >= MAX_ERRORS:
                break
            field_path = f"{path}/{spec.name}"
            value = obj.get(spec.name)

            # A — wymagane
            if value is None:
                if spec.required:
                    errors.append(ValidationError(
                        code=ErrorCode.MISSING_FIELD,
                        path=field_path,
                        message=f"Brak wymaganego pola '{spec.name}'",
                    ))
                else:
                    out[spec.name] = list(spec.default) if isinstance(spec.default, list) else spec.default
                continue

            out[spec.name] = self._check_value(value, spec, field_path, errors, warnings)
        return out

    def _check_value(
        self,
        value: Any,
        spec: FieldSpec,
        path: str,
        errors: list[ValidationError],
        warnings: list[str],
    ) -> Any:
        # B — typy
        match spec.type:
            case "str":
                if not isinstance(value, str):
                    if isinstance(value, (int, float)) and not isinstance(value, bool):
                        value = str(value)
                    else:
                        return self._wrong_type(value, spec, path, errors)
                # C — enumy
                if spec.enum is not None:
                    return self._check_enum(value, spec.enum, path, errors, warnings)
                return value

            case "number" | "int":
                number = _as_number(value)
                if number is None:
                    return self._wrong_type(value, spec, path, errors)
                # D — zakresy
                self._check_range(number, spec, path, errors)
                return round(number) if spec.type == "int" else number

            case "bool":
                if not isinstance(value, bool):
                    return self._wrong_type(value, spec, path, errors)
                return value

            case "str_list":
                if not isinstance(value, list):
                    return self._wrong_type(value, spec, path, errors)
                return [str(v) for v in value if v is not None and str(v).strip()]

            case "object":
                if not isinstance(value, dict):
                    return self._wrong_type(value, spec, path, errors)
                return self._check_object(value, spec.fields, path, errors, warnings)

            case "object_list":
                if not isinstance(value, list):
                    return self._wrong_type(value, spec, path, errors)
                items: list[dict[str, Any]] = []
                for i, item in enumerate(value):
                    item_path = f"{path}/{i}"
                    if not isinstance(item, dict):
                        errors.append(ValidationError(
                            code=ErrorCode.WRONG_TYPE,
                            path=item_path,
                            message=f"Element listy '{spec.name}' musi być obiektem",
                        ))
                        continue
                    items.append(self._check_object(item, spec.fields, item_path, errors, warnings))
                return items

        raise ValueError(f"Nieobsługiwany typ pola: {spec.type}")

    # ------------------------------------------------------------------
    # Etapy C i D
    # ------------------------------------------------------------------

    def _check_enum(
        self,
        value: str,
        enum_cls: type[StrEnum],
        path: str,
        errors: list[ValidationError],
        warnings: list[str],
    ) -> StrEnum | None:
        wanted = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == wanted:
                return member

        allowed = [m.value for m in enum_cls]
        if "unknown" in allowed:
            warnings.append(f"{path}: nieznana wartość {value!r} → 'unknown'")
            return enum_cls("unknown")

        errors.append(ValidationError(
            code=ErrorCode.ENUM_VALUE_INVALID,
            path=path,
            message=f"Niedozwolona wartość {value!r}",
            details={"allowed": allowed},
        ))
        return None

    def _check_range(
        self,
        number: float,
        spec: FieldSpec,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        too_low = spec.minimum is not None and number < spec.minimum
        too_high = spec.maximum is not None and number > spec.maximum
        if too_low or too_high:
            errors.append(ValidationError(
                code=ErrorCode.OUT_OF_RANGE,
                path=path,
                message=f"Wartość {number} poza zakresem [{spec.minimum}, {spec.maximum}]",
                details={"min": spec.minimum, "max": spec.maximum},
            ))

    @staticmethod
    def _wrong_type(
        value: Any,
        spec: FieldSpec,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        errors.append(ValidationError(
            code=ErrorCode.WRONG_TYPE,
            path=path,
            message=f"Pole '{spec.name}' powinno być typu {spec.type}, "
                    f"otrzymano {type(value).__name__}",
        ))
        return None


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _as_number(value: Any) -> float | None:
    """Liczba albo tekst liczbowy ("2,350", " 12.5 "); bool nie jest liczbą."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.replace(",", "").strip())
        except ValueError:
            return None
    return None
