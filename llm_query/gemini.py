"""
llm_query/gemini.py — wywołanie Gemini API (tekst i obraz).

Zmienne środowiskowe (lub plik .env, patrz llm_query/settings.py):
  GEMINI_API_KEY   klucz API (wymagany)
  GEMINI_MODEL     model domyślny (opcjonalnie)

Publiczne API:
  call_gemini(prompt, system, image, mime_type, model, api_key, max_retries) -> str
"""

from __future__ import annotations

import functools
import re
import sys
import time
from typing import Any, Protocol, cast

from google import genai as _genai
from google.genai import errors as _genai_errors
from google.genai import types as _genai_types

from llm_query.settings import DEFAULT_MODEL, GEMINI_KEY_ENV, gemini_api_key, gemini_model

DEFAULT_RETRIES = 3


@functools.lru_cache(maxsize=4)
def _get_client(api_key: str) -> "_genai.Client":
    """Zwraca (i cache'uje) klienta Gemini dla danego klucza API.

    Klient inicjalizuje wewnętrzną pulę HTTP — tworzenie go przy każdym
    wywołaniu call_gemini() jest kosztowne i wyczerpuje połączenia.
    """
    return _genai.Client(api_key=api_key)

# Wzorzec do wyciągnięcia liczby sekund z komunikatu API (np. "retry in 18.8s")
_RETRY_DELAY_RE = re.compile(r"retry[^\d]*(\d+(?:\.\d+)?)\s*s", re.IGNORECASE)


class _GeminiGenerateResponse(Protocol):
    text: str | None


class _GeminiModelsAPI(Protocol):
    def generate_content(
        self,
        *,
        model: str,
        contents: Any,
        config: Any = None,
    ) -> _GeminiGenerateResponse:
        ...


def _parse_retry_delay(error: Exception) -> float | None:
    """Wyciąga sugerowany czas oczekiwania z błędu 429, jeśli jest dostępny."""
    msg = str(error)
    m = _RETRY_DELAY_RE.search(msg)
    if m:
        return float(m.group(1))
    delay = getattr(error, "retry_delay", None)
    if delay is not None:
        return float(delay)
    return None


def _is_daily_quota(error: Exception) -> bool:
    """Zwraca True gdy to wyczerpany dzienny limit (retry nie pomoże)."""
    return "PerDay" in str(error)


def _build_contents(prompt: str, image: bytes | None, mime_type: str | None) -> Any:
    if image is None:
        return prompt
    return [
        _genai_types.Part.from_bytes(data=image, mime_type=mime_type or "image/jpeg"),
        prompt,
    ]


def call_gemini(
    prompt: str,
    *,
    system: str | None = None,
    image: bytes | None = None,
    mime_type: str | None = None,
    model: str | None = None,
    api_key: str | None = None,
    max_retries: int = DEFAULT_RETRIES,
) -> str:
    """
    Wysyła prompt (opcjonalnie z instrukcją systemową i obrazem) do Gemini.

    Przy błędzie 429 (rate-limit) czeka sugerowany czas i ponawia próbę
    (do max_retries razy). Dzienny limit quota nie jest ponawiany.

    Args:
        prompt:      Treść wiadomości użytkownika.
        system:      Instrukcja systemowa (rola eksperta, język odpowiedzi).
        image:       Bajty obrazu (analiza szkodników) albo None.
        mime_type:   Typ MIME obrazu (domyślnie image/jpeg).
        model:       Identyfikator modelu; None → GEMINI_MODEL / gemini-2.5-flash.
        api_key:     Klucz API; jeśli None, odczytywany z GEMINI_API_KEY.
        max_retries: Maks. liczba ponowień przy rate-limit (domyślnie 3).

    Returns:
        Tekst odpowiedzi modelu.

    Raises:
        ValueError:                  Brak klucza API.
        RuntimeError:                Pusta odpowiedź, limit dzienny, rate-limit po ponowieniach.
        google.genai.errors.APIError: Nieodwracalny błąd API.
    """
    key = api_key or gemini_api_key()
    if not key:
        raise ValueError(
            f"Brak klucza Gemini API. "
            f"Ustaw zmienną środowiskową {GEMINI_KEY_ENV} lub przekaż api_key."
        )

    model    = model or gemini_model()
    client   = _get_client(key)
    contents = _build_contents(prompt, image, mime_type)
    config   = _genai_types.GenerateContentConfig(system_instruction=system) if system else None
    attempt  = 0

    while True:
        try:
            models_api = cast(_GeminiModelsAPI, client.models)
            response = models_api.generate_content(model=model, contents=contents, config=config)
            text = response.text
            if text is None:
                raise RuntimeError("Gemini zwrocil pusta odpowiedz tekstowa.")
            return text

        except _genai_errors.ClientError as exc:
            if exc.code != 429:
                raise

            if _is_daily_quota(exc):
                raise RuntimeError(
                    f"Dzienny limit zapytań dla modelu {model} wyczerpany. "
                    f"Sprawdź plan i billing: https://ai.dev/rate-limit\n"
                    f"Szczegóły API: {exc}"
                ) from exc

            attempt += 1
            if attempt > max_retries:
                raise RuntimeError(
                    f"Rate-limit po {max_retries} próbach. Spróbuj później."
                ) from exc

            delay = _parse_retry_delay(exc) or (2 ** attempt * 5)
            print(
                f"[warn] 429 rate-limit — czekam {delay:.0f}s "
                f"(próba {attempt}/{max_retries})...",
                file=sys.stderr,
            )
            time.sleep(delay)
