"""
validator/normalizer.py — normalizacja odpowiedzi modelu przed walidacją.

normalize_payload():
  - Zwraca głęboką kopię z kluczami w snake_case (soilHealth → soil_health).
  - Przycina białe znaki wartości tekstowych.
  - Nie zmienia treści merytorycznej ani typów wartości.
"""

from __future__ import annotations

import copy
import re
from typing import Any

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_case(key: str) -> str:
    """npkRatio → npk_ratio, additionalInfo → additional_info."""
    return _CAMEL_BOUNDARY_RE.sub(r"_\1", key).lower()


def normalize_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Zwraca znormalizowaną głęboką kopię odpowiedzi modelu."""
    return _normalize_value(copy.deepcopy(payload))


def _normalize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {snake_case(str(k)): _normalize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize_value(v) for v in value]
    if isinstance(value, str):
        return value.strip()
    return value
