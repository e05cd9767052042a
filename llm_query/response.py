"""llm_query/response.py — wyciąganie JSON z odpowiedzi modelu."""

from __future__ import annotations

import json
import re

# Najszerszy blok {...}; model dopisuje tekst przed i po JSON.
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def extract_json(raw: str | None) -> dict | None:
    """
    Próbuje sparsować obiekt JSON z odpowiedzi modelu.

    Odrzuca otoczkę ```json ... ``` i tekst wokół obiektu.
    Zwraca None, gdy nie ma poprawnego obiektu JSON.
    """
    if not raw:
        return None

    text = raw.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[-1] if "\n" in text else text[3:]
    if text.endswith("```"):
        text = text.rsplit("```", 1)[0]

    m = _JSON_OBJECT_RE.search(text)
    if not m:
        return None
    try:
        data = json.loads(m.group())
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None
