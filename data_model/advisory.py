"""
data_model/advisory.py — typowane wyniki zapytań doradczych.

Odpowiedzi modelu (JSON) są walidowane w validator/ i dopiero wtedy
zamieniane na te struktury; reszta kodu nie dotyka surowych słowników.

Mapowanie na kształty JSON zwracane przez model (camelCase → snake_case):
  soil    → SoilAnalysis   (soilHealth, fertilizer, crops, improvements, advice, warnings)
  pest    → PestDetection  (detected, name, confidence, severity, symptoms, ...)
  market  → MarketReport   (prices[], summary, queriedDate, location)
  weather → WeatherSnapshot (budowany z OpenWeatherMap, nie z modelu)
  chat    → ChatReply      (surowy tekst; formatowany przez formatter)
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal


# ---------------------------------------------------------------------------
# Enumeracje
# ---------------------------------------------------------------------------

class SoilHealth(StrEnum):
    GOOD     = "good"
    MODERATE = "moderate"
    POOR     = "poor"
    UNKNOWN  = "unknown"


class Suitability(StrEnum):
    HIGH   = "high"
    MEDIUM = "medium"
    LOW    = "low"


class Severity(StrEnum):
    LOW     = "low"
    MEDIUM  = "medium"
    HIGH    = "high"
    UNKNOWN = "unknown"


class Trend(StrEnum):
    UP     = "up"
    DOWN   = "down"
    STABLE = "stable"


class Confidence(StrEnum):
    """Pewność prognozy cenowej (model zwraca wielką literą)."""
    HIGH   = "High"
    MEDIUM = "Medium"
    LOW    = "Low"


# ---------------------------------------------------------------------------
# Gleba
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class SoilParameters:
    """
    Parametry gleby podane przez użytkownika.

    - ph:         odczyn 0–14
    - nitrogen:   N [kg/ha]
    - phosphorus: P [kg/ha]
    - potassium:  K [kg/ha]
    - moisture:   wilgotność [%] 0–100
    """
    ph: float
    nitrogen: float
    phosphorus: float
    potassium: float
    moisture: float

    def validate(self) -> list[str]:
        """Zwraca listę komunikatów o wartościach spoza zakresu (pusta = OK)."""
        problems: list[str] = []
        if not 0 <= self.ph <= 14:
            problems.append(f"pH musi być w zakresie 0–14 (podano {self.ph}).")
        for name in ("nitrogen", "phosphorus", "potassium"):
            value = getattr(self, name)
            if value < 0:
                problems.append(f"{name} nie może być ujemne (podano {value}).")
        if not 0 <= self.moisture <= 100:
            problems.append(f"Wilgotność musi być w zakresie 0–100% (podano {self.moisture}).")
        return problems


@dataclass(slots=True)
class Fertilizer:
    name: str
    npk_ratio: str
    amount: str
    application_method: str


@dataclass(slots=True)
class CropSuitability:
    name: str
    suitability: Suitability
    reason: str


@dataclass(slots=True)
class SoilAnalysis:
    soil_health: SoilHealth
    fertilizer: Fertilizer
    crops: list[CropSuitability] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    advice: str = ""
    warnings: list[str] = field(default_factory=list)
    kind: Literal["soil"] = field(default="soil", init=False)

    @classmethod
    def fallback(cls, text: str) -> SoilAnalysis:
        """Wynik zastępczy, gdy model nie zwrócił JSON — surowy tekst trafia do advice."""
        return cls(
            soil_health=SoilHealth.UNKNOWN,
            fertilizer=Fertilizer(
                name="NPK 20-20-20",
                npk_ratio="20-20-20",
                amount="50 kg/acre",
                application_method="Broadcast before sowing",
            ),
            crops=[
                CropSuitability(
                    name="General crops",
                    suitability=Suitability.MEDIUM,
                    reason="Based on provided parameters",
                )
            ],
            advice=text,
        )


# ---------------------------------------------------------------------------
# Szkodniki
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class PestDetection:
    detected: bool
    name: str
    confidence: int                   # 0–100
    severity: Severity
    symptoms: list[str] = field(default_factory=list)
    treatment: list[str] = field(default_factory=list)
    prevention: list[str] = field(default_factory=list)
    additional_info: str = ""
    kind: Literal["pest"] = field(default="pest", init=False)

    @classmethod
    def fallback(cls, text: str) -> PestDetection:
        return cls(
            detected=False,
            name="Analysis Incomplete",
            confidence=0,
            severity=Severity.UNKNOWN,
            additional_info=text,
        )


# ---------------------------------------------------------------------------
# Ceny rynkowe
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class MarketQuote:
    """Cena na pojedynczym targowisku (mandi)."""
    name: str
    price: float
    distance: str = ""
    address: str = ""


@dataclass(slots=True)
class PricePoint:
    day: str
    date: str
    price: float


@dataclass(slots=True)
class PricePrediction:
    day: str
    date: str
    predicted_price: float
    confidence: Confidence


@dataclass(slots=True)
class CropPrice:
    crop: str
    current_price: float
    previous_price: float
    unit: str
    trend: Trend
    markets: list[MarketQuote] = field(default_factory=list)
    price_trend: list[PricePoint] = field(default_factory=list)
    predictions: list[PricePrediction] = field(default_factory=list)
    recommendation: str = ""

    @property
    def change_percent(self) -> float | None:
        """Zmiana ceny bieżącej względem poprzedniej w %; None gdy brak bazy."""
        if not self.previous_price:
            return None
        return (self.current_price - self.previous_price) / self.previous_price * 100


@dataclass(slots=True)
class MarketReport:
    prices: list[CropPrice]
    summary: str
    queried_date: str
    location: str
    kind: Literal["market"] = field(default="market", init=False)


@dataclass(slots=True)
class MarketQuery:
    """
    Parametry zapytania o ceny.

    Zakres dat obowiązuje tylko gdy podano oba końce (start_date i end_date).
    """
    crops: list[str] = field(default_factory=lambda: ["Wheat", "Rice", "Maize"])
    location: str = "India"
    date: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    coordinates: tuple[float, float] | None = None

    @property
    def has_date_range(self) -> bool:
        return bool(self.start_date and self.end_date)

    @property
    def query_date(self) -> str:
        return self.date or self.start_date or dt.date.today().isoformat()


# ---------------------------------------------------------------------------
# Pogoda
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ForecastDay:
    day: str           # skrót dnia tygodnia, np. "Mon"
    high: int
    low: int
    condition: str     # sunny | cloudy | rainy
    icon: str


@dataclass(slots=True)
class WeatherSnapshot:
    location: str
    temperature: int           # °C
    humidity: int              # %
    rainfall: float            # mm (ostatnia godzina)
    wind_speed: int            # km/h
    condition: str
    description: str
    icon: str
    forecast: list[ForecastDay] = field(default_factory=list)
    alerts: list[str] = field(default_factory=list)
    kind: Literal["weather"] = field(default="weather", init=False)


# ---------------------------------------------------------------------------
# Czat
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ChatReply:
    text: str
    kind: Literal["chat"] = field(default="chat", init=False)


type AdvisoryResult = SoilAnalysis | PestDetection | MarketReport | WeatherSnapshot | ChatReply
