"""
weather — klient OpenWeatherMap i ostrzeżenia dla rolnika.

Publiczne API:
  fetch_weather(lat, lon, api_key)   -> WeatherSnapshot
  reverse_geocode(lat, lon, api_key) -> str
  condition_from_icon(icon)          -> str
  daily_forecast(items)              -> list[ForecastDay]
  farm_alerts(temp, humidity, wind_kmh, main) -> list[str]
  DEFAULT_COORDINATES                (Waranasi)
"""

from .openweather import (
    DEFAULT_COORDINATES,
    condition_from_icon,
    daily_forecast,
    farm_alerts,
    fetch_weather,
    reverse_geocode,
)

__all__ = [
    "DEFAULT_COORDINATES",
    "condition_from_icon",
    "daily_forecast",
    "farm_alerts",
    "fetch_weather",
    "reverse_geocode",
]
