"""
Wspólne fixture'y: przykładowe odpowiedzi JSON modelu (camelCase, jak z API).
"""
import copy

import pytest


_SOIL_PAYLOAD = {
    "soilHealth": "good",
    "fertilizer": {
        "name": "DAP",
        "npkRatio": "18-46-0",
        "amount": "50 kg/acre",
        "applicationMethod": "Basal application at sowing",
    },
    "crops": [
        {"name": "Wheat", "suitability": "high", "reason": "Neutral pH and good nitrogen"},
        {"name": "Mustard", "suitability": "Medium", "reason": "Tolerates moderate moisture"},
    ],
    "improvements": ["Add farmyard manure", "  Use green manure  ", ""],
    "advice": "## Summary\nYour soil is **healthy**.\n- Keep rotating crops",
    "warnings": ["Avoid over-irrigation"],
}

_PEST_PAYLOAD = {
    "detected": True,
    "name": "Leaf Blight",
    "confidence": 85,
    "severity": "high",
    "symptoms": ["Brown lesions on leaves"],
    "treatment": ["Spray Mancozeb 2 g/L"],
    "prevention": ["Use certified seed"],
    "additionalInfo": "Common after heavy rain.",
}

_MARKET_PAYLOAD = {
    "prices": [
        {
            "crop": "Wheat",
            "currentPrice": 2350,
            "previousPrice": 2280,
            "unit": "quintal",
            "trend": "up",
            "markets": [
                {"name": "Varanasi Mandi", "price": 2360, "distance": "5 km", "address": "Pahariya, Varanasi"},
            ],
            "priceTrend": [
                {"day": "Mon", "date": "2025-01-13", "price": 2280},
            ],
            "predictions": [
                {"day": "Day 1", "date": "2025-01-16", "predictedPrice": 2400, "confidence": "High"},
            ],
            "recommendation": "Hold for a week.",
        }
    ],
    "summary": "Prices are rising.",
    "queriedDate": "2025-01-15",
    "location": "Varanasi",
}


@pytest.fixture
def soil_payload():
    """Poprawna odpowiedź analizy gleby."""
    return copy.deepcopy(_SOIL_PAYLOAD)


@pytest.fixture
def pest_payload():
    """Poprawna odpowiedź analizy szkodników."""
    return copy.deepcopy(_PEST_PAYLOAD)


@pytest.fixture
def market_payload():
    """Poprawna odpowiedź cen rynkowych."""
    return copy.deepcopy(_MARKET_PAYLOAD)
