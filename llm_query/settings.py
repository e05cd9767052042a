"""
Konfiguracja przez zmienne środowiskowe.

Opcjonalnie plik .env w katalogu głównym projektu:
  GEMINI_API_KEY=AIza...
  GEMINI_MODEL=gemini-2.5-flash
  OPENWEATHER_API_KEY=...
  AGD_LANGUAGE=hi
"""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

ROOT = pathlib.Path(__file__).resolve().parent.parent

load_dotenv(ROOT / ".env", override=True)

GEMINI_KEY_ENV      = "GEMINI_API_KEY"
OPENWEATHER_KEY_ENV = "OPENWEATHER_API_KEY"

DEFAULT_MODEL = "gemini-2.5-flash"


def gemini_api_key() -> str | None:
    return os.getenv(GEMINI_KEY_ENV)


def gemini_model() -> str:
    return os.getenv("GEMINI_MODEL", DEFAULT_MODEL)


def openweather_api_key() -> str | None:
    return os.getenv(OPENWEATHER_KEY_ENV)


def default_language() -> str:
    return os.getenv("AGD_LANGUAGE", "en")
