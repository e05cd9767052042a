"""
Testy klienta OpenWeatherMap — requests.get podmienione
"""
import pytest
import requests

import weather.openweather as ow
from weather import condition_from_icon, daily_forecast, farm_alerts, fetch_weather, reverse_geocode

MONDAY_UTC = 1705276800      # 2024-01-15 00:00 UTC
DAY = 86400


class FakeResponse:
    def __init__(self, data, status=200):
        self._data = data
        self.status_code = status

    def json(self):
        return self._data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def _forecast_item(ts, high, low, icon):
    return {"dt": ts, "main": {"temp_max": high, "temp_min": low}, "weather": [{"icon": icon}]}


CURRENT = {
    "main": {"temp": 41.6, "humidity": 90},
    "wind": {"speed": 15},
    "weather": [{"main": "Rain", "description": "light rain", "icon": "10d"}],
    "rain": {"1h": 2.5},
}

FORECAST = {
    "list": [
        _forecast_item(MONDAY_UTC, 38.4, 27.1, "01d"),
        _forecast_item(MONDAY_UTC + 10800, 40.0, 29.0, "10d"),
        _forecast_item(MONDAY_UTC + DAY, 35.2, 26.8, "04d"),
    ]
}

GEO = [{"name": "Varanasi", "state": "Uttar Pradesh", "country": "IN"}]


@pytest.fixture
def fake_get(monkeypatch):
    """Routing po końcówce URL; zapisuje parametry zapytań."""
    calls = []

    def install(routes):
        def fake(url, params=None, timeout=None):
            calls.append({"url": url, "params": params, "timeout": timeout})
            for suffix, response in routes.items():
                if url.endswith(suffix):
                    if isinstance(response, Exception):
                        raise response
                    return response
            raise AssertionError(f"unexpected url {url}")

        monkeypatch.setattr(ow.requests, "get", fake)
        return calls

    return install


class TestFetchWeather:

    def test_snapshot(self, fake_get):
        calls = fake_get({
            "/geo/1.0/reverse": FakeResponse(GEO),
            "/data/2.5/weather": FakeResponse(CURRENT),
            "/data/2.5/forecast": FakeResponse(FORECAST),
        })
        s = fetch_weather(25.3, 82.9, api_key="k")
        assert s.kind == "weather"
        assert s.location == "Varanasi, Uttar Pradesh, IN"
        assert s.temperature == 42
        assert s.humidity == 90
        assert s.rainfall == 2.5
        assert s.wind_speed == 54
        assert s.condition == "rainy"
        assert s.description == "light rain"
        assert [d.day for d in s.forecast] == ["Mon", "Tue"]
        assert s.forecast[0].high == 38
        assert len(s.alerts) == 4
        assert all(c["timeout"] == ow.TIMEOUT for c in calls)
        assert calls[1]["params"]["units"] == "metric"

    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        with pytest.raises(ValueError, match="OPENWEATHER_API_KEY"):
            fetch_weather(25.3, 82.9)

    def test_http_error_propagates(self, fake_get):
        fake_get({
            "/geo/1.0/reverse": FakeResponse(GEO),
            "/data/2.5/weather": FakeResponse({"message": "Invalid API key"}, status=401),
        })
        with pytest.raises(requests.HTTPError):
            fetch_weather(25.3, 82.9, api_key="bad")

    def test_missing_optional_sections(self, fake_get):
        current = {"main": {"temp": 20, "humidity": 50}, "weather": [{"main": "Clear", "icon": "01n"}]}
        fake_get({
            "/geo/1.0/reverse": FakeResponse([]),
            "/data/2.5/weather": FakeResponse(current),
            "/data/2.5/forecast": FakeResponse({}),
        })
        s = fetch_weather(0, 0, api_key="k")
        assert s.location == "Unknown Location"
        assert s.rainfall == 0
        assert s.wind_speed == 0
        assert s.forecast == []
        assert s.alerts == []


class TestReverseGeocode:

    def test_without_state(self, fake_get):
        fake_get({"/geo/1.0/reverse": FakeResponse([{"name": "Kathmandu", "country": "NP"}])})
        assert reverse_geocode(27.7, 85.3, "k") == "Kathmandu, NP"

    def test_network_error(self, fake_get):
        fake_get({"/geo/1.0/reverse": requests.ConnectionError("down")})
        assert reverse_geocode(27.7, 85.3, "k") == "Unknown Location"

    def test_http_error(self, fake_get):
        fake_get({"/geo/1.0/reverse": FakeResponse({}, status=500)})
        assert reverse_geocode(27.7, 85.3, "k") == "Unknown Location"


@pytest.mark.parametrize("icon,expected", [
    ("01d", "sunny"),
    ("02n", "cloudy"),
    ("04d", "cloudy"),
    ("09d", "rainy"),
    ("11n", "rainy"),
    ("50d", "cloudy"),
    ("", "cloudy"),
])
def test_condition_from_icon(icon, expected):
    assert condition_from_icon(icon) == expected


class TestDailyForecast:

    def test_first_entry_per_day(self):
        days = daily_forecast(FORECAST["list"])
        assert [(d.day, d.high, d.low, d.condition) for d in days] == [
            ("Mon", 38, 27, "sunny"),
            ("Tue", 35, 27, "cloudy"),
        ]

    def test_at_most_seven_days(self):
        items = [_forecast_item(MONDAY_UTC + i * DAY, 30, 20, "01d") for i in range(10)]
        assert len(daily_forecast(items)) == 7


class TestFarmAlerts:

    def test_calm_weather(self):
        assert farm_alerts(25, 60, 10, "Clear") == []

    def test_frost(self):
        alerts = farm_alerts(3, 60, 10, "Clear")
        assert len(alerts) == 1
        assert "Frost" in alerts[0]

    def test_thresholds_are_exclusive(self):
        assert farm_alerts(40, 85, 50, "Clouds") == []

    def test_all_alerts(self):
        alerts = farm_alerts(45, 95, 60, "Rain")
        assert len(alerts) == 4
        assert any("Rain expected" in a for a in alerts)
