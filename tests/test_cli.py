"""
Testy komend agd — wywołania modeli / API podmienione
"""
import argparse
import io
import json

import pytest
import requests

from agd._display import dump_json
from agd.cli import build_parser
from agd.commands import chat as cmd_chat
from agd.commands import format as cmd_format
from agd.commands import market as cmd_market
from agd.commands import pest as cmd_pest
from agd.commands import soil as cmd_soil
from agd.commands import weather as cmd_weather
from data_model.advisory import (
    ChatReply,
    ForecastDay,
    PestDetection,
    Severity,
    SoilAnalysis,
    WeatherSnapshot,
)
from validator import ResultValidator

TEXT = "## Soil\nUse **compost**.\n- a\n- b"


def run_command(module, argv):
    parser = argparse.ArgumentParser(prog="agd")
    subparsers = parser.add_subparsers(dest="command")
    module.add_parser(subparsers)
    args = parser.parse_args(argv)
    args.func(args)


class TestFormatCommand:

    def test_json_from_file(self, tmp_path, capsys):
        path = tmp_path / "reply.txt"
        path.write_text(TEXT, encoding="utf-8")
        run_command(cmd_format, ["format", str(path), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert [n["type"] for n in data] == ["heading", "paragraph", "bullet_list"]

    def test_html(self, tmp_path, capsys):
        path = tmp_path / "reply.txt"
        path.write_text(TEXT, encoding="utf-8")
        run_command(cmd_format, ["format", str(path), "--html"])
        out = capsys.readouterr().out
        assert out.startswith('<div class="formatted-content"><h3>Soil</h3>')

    def test_plain_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
        run_command(cmd_format, ["format", "--plain"])
        assert capsys.readouterr().out == "Soil\n\nUse compost.\n\n- a\n- b\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            run_command(cmd_format, ["format", str(tmp_path / "none.txt")])
        assert exc_info.value.code == 1

    def test_output_modes_exclusive(self):
        with pytest.raises(SystemExit):
            run_command(cmd_format, ["format", "--json", "--html"])


class TestSoilCommand:

    def test_json_output(self, monkeypatch, capsys, soil_payload):
        analysis = ResultValidator().require("soil", soil_payload)
        seen = {}

        def fake(params, language=None, model=None):
            seen["params"] = params
            seen["language"] = language
            return analysis

        monkeypatch.setattr(cmd_soil, "analyze_soil", fake)
        run_command(cmd_soil, [
            "soil", "--ph", "6.5", "-n", "280", "-p", "25", "-k", "150",
            "--moisture", "22", "--lang", "hi", "--json",
        ])
        data = json.loads(capsys.readouterr().out)
        assert data["soil_health"] == "good"
        assert data["kind"] == "soil"
        assert seen["params"].nitrogen == 280.0
        assert seen["language"] == "hi"

    def test_invalid_input_exits(self, monkeypatch):
        def fake(params, language=None, model=None):
            raise ValueError("pH musi być w zakresie 0–14")

        monkeypatch.setattr(cmd_soil, "analyze_soil", fake)
        with pytest.raises(SystemExit) as exc_info:
            run_command(cmd_soil, [
                "soil", "--ph", "20", "-n", "1", "-p", "1", "-k", "1", "--moisture", "1",
            ])
        assert exc_info.value.code == 1


class TestPestCommand:

    def test_api_error_exits(self, monkeypatch):
        def fake(image, language=None, model=None):
            raise RuntimeError("Rate-limit")

        monkeypatch.setattr(cmd_pest, "analyze_pest", fake)
        with pytest.raises(SystemExit):
            run_command(cmd_pest, ["pest", "leaf.jpg"])


class TestMarketCommand:

    def test_query_from_arguments(self, monkeypatch, capsys, market_payload):
        report = ResultValidator().require("market", market_payload)
        seen = {}

        def fake(query, language=None, model=None):
            seen["query"] = query
            return report

        monkeypatch.setattr(cmd_market, "market_prices", fake)
        run_command(cmd_market, [
            "market", "--crop", "Onion", "--crop", "Tomato",
            "--from", "2025-01-01", "--to", "2025-01-31",
            "--lat", "19.99", "--lon", "73.78", "--json",
        ])
        query = seen["query"]
        assert query.crops == ["Onion", "Tomato"]
        assert query.has_date_range
        assert query.coordinates == (19.99, 73.78)
        assert json.loads(capsys.readouterr().out)["location"] == "Varanasi"

    def test_default_crops(self, monkeypatch, market_payload):
        report = ResultValidator().require("market", market_payload)
        seen = {}

        def fake(query, language=None, model=None):
            seen["q"] = query
            return report

        monkeypatch.setattr(cmd_market, "market_prices", fake)
        run_command(cmd_market, ["market", "--json"])
        assert seen["q"].crops == ["Wheat", "Rice", "Maize"]
        assert seen["q"].coordinates is None

    def test_half_range_rejected(self, monkeypatch):
        monkeypatch.setattr(cmd_market, "market_prices", lambda q, **kw: pytest.fail("should not be called"))
        with pytest.raises(SystemExit):
            run_command(cmd_market, ["market", "--from", "2025-01-01"])


class TestChatCommand:

    def test_reply_shown(self, monkeypatch, capsys):
        seen = {}

        def fake(message, language=None, model=None):
            seen["message"] = message
            seen["language"] = language
            return ChatReply(text="Sow **wheat** in November.")

        monkeypatch.setattr(cmd_chat, "ask", fake)
        run_command(cmd_chat, ["chat", "When", "to", "sow?", "--lang", "hi"])
        out = capsys.readouterr().out
        assert "wheat" in out
        assert "**" not in out
        assert seen["message"] == "When to sow?"
        assert seen["language"] == "hi"

    def test_blank_message_rejected_before_api(self, monkeypatch, capsys):
        monkeypatch.setattr(cmd_chat, "ask", lambda *a, **kw: pytest.fail("should not be called"))
        with pytest.raises(SystemExit) as exc_info:
            run_command(cmd_chat, ["chat", "   "])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Pusta wiadomość" in out
        assert "konfiguracji" not in out

    def test_missing_key_reported_as_config_error(self, monkeypatch, capsys):
        def fake(message, language=None, model=None):
            raise ValueError("Brak GEMINI_API_KEY")

        monkeypatch.setattr(cmd_chat, "ask", fake)
        with pytest.raises(SystemExit) as exc_info:
            run_command(cmd_chat, ["chat", "hello"])
        assert exc_info.value.code == 1
        assert "Błąd konfiguracji" in capsys.readouterr().out

    def test_api_error_exits(self, monkeypatch, capsys):
        def fake(message, language=None, model=None):
            raise RuntimeError("Rate-limit")

        monkeypatch.setattr(cmd_chat, "ask", fake)
        with pytest.raises(SystemExit) as exc_info:
            run_command(cmd_chat, ["chat", "hello"])
        assert exc_info.value.code == 1
        assert "Błąd Gemini API" in capsys.readouterr().out


def _snapshot():
    return WeatherSnapshot(
        location="Varanasi",
        temperature=31,
        humidity=62,
        rainfall=0.0,
        wind_speed=12,
        condition="sunny",
        description="clear sky",
        icon="01d",
        forecast=[ForecastDay(day="Mon", high=33, low=24, condition="sunny", icon="01d")],
        alerts=["High temperature: irrigate in the evening"],
    )


class TestWeatherCommand:

    def test_default_coordinates(self, monkeypatch):
        seen = {}

        def fake_fetch(lat, lon):
            seen["coords"] = (lat, lon)
            return _snapshot()

        monkeypatch.setattr(cmd_weather, "fetch_weather", fake_fetch)
        run_command(cmd_weather, ["weather", "--no-advice"])
        assert seen["coords"] == (25.3176, 82.9739)

    def test_coordinates_from_arguments(self, monkeypatch):
        seen = {}

        def fake_fetch(lat, lon):
            seen["coords"] = (lat, lon)
            return _snapshot()

        monkeypatch.setattr(cmd_weather, "fetch_weather", fake_fetch)
        run_command(cmd_weather, ["weather", "--lat", "19.99", "--lon", "73.78", "--no-advice"])
        assert seen["coords"] == (19.99, 73.78)

    def test_no_advice_skips_model(self, monkeypatch, capsys):
        monkeypatch.setattr(cmd_weather, "fetch_weather", lambda lat, lon: _snapshot())
        monkeypatch.setattr(
            cmd_weather, "weather_recommendations", lambda *a, **kw: pytest.fail("should not be called")
        )
        run_command(cmd_weather, ["weather", "--no-advice"])
        out = capsys.readouterr().out
        assert "Varanasi" in out
        assert "High temperature" in out

    def test_advice_shown(self, monkeypatch, capsys):
        seen = {}

        def fake_advice(snapshot, language=None, model=None):
            seen["location"] = snapshot.location
            seen["language"] = language
            return "## Today\n- Irrigate after **6 pm**"

        monkeypatch.setattr(cmd_weather, "fetch_weather", lambda lat, lon: _snapshot())
        monkeypatch.setattr(cmd_weather, "weather_recommendations", fake_advice)
        run_command(cmd_weather, ["weather", "--lang", "ta"])
        out = capsys.readouterr().out
        assert "Irrigate after" in out
        assert seen == {"location": "Varanasi", "language": "ta"}

    def test_json_output(self, monkeypatch, capsys):
        monkeypatch.setattr(cmd_weather, "fetch_weather", lambda lat, lon: _snapshot())
        monkeypatch.setattr(
            cmd_weather, "weather_recommendations", lambda *a, **kw: pytest.fail("should not be called")
        )
        run_command(cmd_weather, ["weather", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["kind"] == "weather"
        assert data["location"] == "Varanasi"
        assert data["forecast"][0]["high"] == 33

    def test_http_error_exits(self, monkeypatch, capsys):
        def fake_fetch(lat, lon):
            raise requests.HTTPError("401 Client Error: Unauthorized")

        monkeypatch.setattr(cmd_weather, "fetch_weather", fake_fetch)
        with pytest.raises(SystemExit) as exc_info:
            run_command(cmd_weather, ["weather"])
        assert exc_info.value.code == 1
        assert "Błąd OpenWeatherMap" in capsys.readouterr().out

    def test_missing_key_exits(self, monkeypatch):
        def fake_fetch(lat, lon):
            raise ValueError("Brak OPENWEATHER_API_KEY")

        monkeypatch.setattr(cmd_weather, "fetch_weather", fake_fetch)
        with pytest.raises(SystemExit) as exc_info:
            run_command(cmd_weather, ["weather"])
        assert exc_info.value.code == 1

    def test_advice_error_exits(self, monkeypatch):
        def fake_advice(snapshot, language=None, model=None):
            raise RuntimeError("Rate-limit")

        monkeypatch.setattr(cmd_weather, "fetch_weather", lambda lat, lon: _snapshot())
        monkeypatch.setattr(cmd_weather, "weather_recommendations", fake_advice)
        with pytest.raises(SystemExit):
            run_command(cmd_weather, ["weather"])


class TestBuildParser:
    """Każda komenda agd trafia do run() swojego modułu."""

    @pytest.mark.parametrize("argv, module", [
        (["format", "--plain"], cmd_format),
        (["chat", "hello"], cmd_chat),
        (["soil", "--ph", "6.5", "-n", "1", "-p", "1", "-k", "1", "--moisture", "20"], cmd_soil),
        (["pest", "leaf.jpg"], cmd_pest),
        (["market"], cmd_market),
        (["weather", "--no-advice"], cmd_weather),
    ])
    def test_subcommand_dispatch(self, argv, module):
        args = build_parser().parse_args(argv)
        assert args.command == argv[0]
        assert args.func is module.run

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


def test_dump_json_enums_as_text():
    detection = PestDetection(detected=True, name="Rust", confidence=70, severity=Severity.MEDIUM)
    data = json.loads(dump_json(detection))
    assert data["severity"] == "medium"
    assert data["kind"] == "pest"


def test_dump_json_fallback():
    data = json.loads(dump_json(SoilAnalysis.fallback("raw text")))
    assert data["soil_health"] == "unknown"
    assert data["crops"][0]["suitability"] == "medium"
