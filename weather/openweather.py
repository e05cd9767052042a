"""
weather/openweather.py — bieżąca pogoda i prognoza z OpenWeatherMap.

Architektura:
  (lat, lon) → geo/1.0/reverse   → nazwa lokalizacji ("Unknown Location" przy błędzie)
             → data/2.5/weather  → warunki bieżące
             → data/2.5/forecast → prognoza (pierwszy wpis dla każdego dnia tygodnia)
             → farm_alerts()     → ostrzeżenia dla rolnika
  → WeatherSnapshot

Zmienna środowiskowa:
  OPENWEATHER_API_KEY   klucz API (wymagany)
"""

from __future__ import annotations

import datetime as dt

import requests

from data_model.advisory import ForecastDay, WeatherSnapshot
from llm_query.settings import OPENWEATHER_KEY_ENV, openweather_api_key

BASE_URL = "https://api.openweathermap.org"
TIMEOUT  = 30

# Waranasi, gdy użytkownik nie poda współrzędnych.
DEFAULT_COORDINATES = (25.3176, 82.9739)

_MAX_FORECAST_DAYS = 7
_DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]  # dt.weekday(): 0 = poniedziałek

# Progi ostrzeżeń
_HEAT_C      = 40
_FROST_C     = 5
_HUMIDITY    = 85
_WIND_KMH    = 50


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def fetch_weather(
    lat: float,
    lon: float,
    api_key: str | None = None,
) -> WeatherSnapshot:
    """
    Pobiera pogodę dla współrzędnych i składa WeatherSnapshot.

    Raises:
        ValueError:          Brak klucza API.
        requests.HTTPError:  Błąd HTTP dla pogody bieżącej lub prognozy.
    """
    key = api_key or openweather_api_key()
    if not key:
        raise ValueError(
            f"Brak klucza OpenWeatherMap. Ustaw zmienną środowiskową {OPENWEATHER_KEY_ENV}."
        )

    location = reverse_geocode(lat, lon, key)
    current  = _get_json("/data/2.5/weather", lat, lon, key)
    forecast = _get_json("/data/2.5/forecast", lat, lon, key)

    temp       = current["main"]["temp"]
    humidity   = current["main"]["humidity"]
    wind_kmh   = current.get("wind", {}).get("speed", 0) * 3.6   # m/s → km/h
    weather0   = (current.get("weather") or [{}])[0]
    icon       = weather0.get("icon", "")

    return WeatherSnapshot(
        location=location,
        temperature=round(temp),
        humidity=humidity,
        rainfall=(current.get("rain") or {}).get("1h", 0),
        wind_speed=round(wind_kmh),
        condition=condition_from_icon(icon),
        description=weather0.get("description", ""),
        icon=icon,
        forecast=daily_forecast(forecast.get("list", [])),
        alerts=farm_alerts(temp, humidity, wind_kmh, weather0.get("main", "")),
    )


def reverse_geocode(lat: float, lon: float, api_key: str) -> str:
    """'Miasto, Stan, Kraj' (albo 'Miasto, Kraj'); przy błędzie 'Unknown Location'."""
    try:
        resp = requests.get(
            f"{BASE_URL}/geo/1.0/reverse",
            params={"lat": lat, "lon": lon, "limit": 1, "appid": api_key},
            timeout=TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError):
        return "Unknown Location"

    if not data:
        return "Unknown Location"
    place = data[0]
    if place.get("state"):
        return f"{place['name']}, {place['state']}, {place['country']}"
    return f"{place['name']}, {place['country']}"


def condition_from_icon(icon: str) -> str:
    """Kod ikony OpenWeatherMap → sunny | cloudy | rainy."""
    if "01" in icon:
        return "sunny"
    if any(code in icon for code in ("02", "03", "04")):
        return "cloudy"
    if any(code in icon for code in ("09", "10", "11")):
        return "rainy"
    return "cloudy"


def daily_forecast(items: list[dict]) -> list[ForecastDay]:
    """Pierwszy wpis prognozy (co 3 h) dla każdego dnia tygodnia, max 7 dni."""
    days: list[ForecastDay] = []
    seen: set[str] = set()
    for item in items:
        day = _DAY_NAMES[dt.datetime.fromtimestamp(item["dt"], tz=dt.timezone.utc).weekday()]
        if day in seen:
            continue
        seen.add(day)
        icon = item["weather"][0]["icon"]
        days.append(ForecastDay(
            day=day,
            high=round(item["main"]["temp_max"]),
            low=round(item["main"]["temp_min"]),
            condition=condition_from_icon(icon),
            icon=icon,
        ))
        if len(days) >= _MAX_FORECAST_DAYS:
            break
    return days


def farm_alerts(temp: float, humidity: float, wind_kmh: float, main: str) -> list[str]:
    alerts: list[str] = []
    if temp > _HEAT_C:
        alerts.append("🌡️ Extreme heat warning - Provide shade for crops and increase irrigation")
    if temp < _FROST_C:
        alerts.append("❄️ Frost warning - Protect sensitive crops")
    if humidity > _HUMIDITY:
        alerts.append("💧 High humidity - Watch for fungal diseases")
    if wind_kmh > _WIND_KMH:
        alerts.append("💨 Strong winds expected - Secure farm equipment")
    if main == "Rain":
        alerts.append("🌧️ Rain expected - Postpone pesticide application")
    return alerts


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _get_json(endpoint: str, lat: float, lon: float, api_key: str) -> dict:
    resp = requests.get(
        f"{BASE_URL}{endpoint}",
        params={"lat": lat, "lon": lon, "units": "metric", "appid": api_key},
        timeout=TIMEOUT,
    )
    resp.raise_for_status()
    return resp.json()
