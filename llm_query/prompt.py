"""
llm_query/prompt.py — prompty dla doradcy rolniczego.

Każda funkcja zwraca parę (system, user) albo sam prompt systemowy;
treść promptów jest po angielsku, język odpowiedzi wybiera `language`.

Funkcje publiczne:
  language_name(code_or_name)           -> str
  chat_system_prompt(language)          -> str
  soil_prompts(params, language)        -> (system, user)
  pest_system_prompt(language)          -> str      (+ PEST_USER_PROMPT)
  market_prompts(query, language)       -> (system, user)
  weather_prompts(snapshot, language)   -> (system, user)
"""

from __future__ import annotations

from data_model.advisory import MarketQuery, SoilParameters, WeatherSnapshot

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "hi": "Hindi",
    "ta": "Tamil",
    "te": "Telugu",
    "kn": "Kannada",
    "mr": "Marathi",
    "bn": "Bengali",
    "gu": "Gujarati",
    "pa": "Punjabi",
    "ml": "Malayalam",
}

_DEFAULT_LANGUAGE = "English"

# Wskazówka zapisana w języku docelowym.
_NATIVE_HINTS: dict[str, str] = {
    "Hindi":    "हिंदी में लिखें",
    "Tamil":    "தமிழில் எழுதவும்",
    "Telugu":   "తెలుగులో రాయండి",
    "Marathi":  "मराठीत लिहा",
    "Gujarati": "ગુજરાતીમાં લખો",
    "Kannada":  "ಕನ್ನಡದಲ್ಲಿ ಬರೆಯಿರಿ",
    "Punjabi":  "ਪੰਜਾਬੀ ਵਿੱਚ ਲਿਖੋ",
    "Bengali":  "বাংলায় লিখুন",
}


def language_name(code_or_name: str | None) -> str:
    """'hi' → 'Hindi'; pełna nazwa przechodzi bez zmian; nieznane → English."""
    if not code_or_name:
        return _DEFAULT_LANGUAGE
    value = code_or_name.strip()
    if value.lower() in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[value.lower()]
    for name in LANGUAGE_NAMES.values():
        if name.lower() == value.lower():
            return name
    return _DEFAULT_LANGUAGE


def _language_instruction(language: str, subject: str) -> str:
    lines = [
        f"CRITICAL LANGUAGE INSTRUCTION: {subject} MUST be in {language} language ONLY.",
    ]
    for name, hint in _NATIVE_HINTS.items():
        lines.append(f"- If {name}: write ALL text in {name} ({hint})")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Czat
# ---------------------------------------------------------------------------

def chat_system_prompt(language: str | None) -> str:
    lang = language_name(language)
    return f"""You are an expert agricultural advisor helping farmers in India.
You provide advice on:
- Crop selection and planting schedules
- Soil management and fertilizers
- Pest and disease control
- Weather-based farming decisions
- Market prices and selling strategies
- Irrigation and water management

{_language_instruction(lang, "Your whole response")}

Keep responses concise, practical, and easy to understand.
Use simple language suitable for farmers. Include specific actionable advice when possible."""


# ---------------------------------------------------------------------------
# Gleba
# ---------------------------------------------------------------------------

def soil_prompts(params: SoilParameters, language: str | None) -> tuple[str, str]:
    lang = language_name(language)
    system = f"""You are an expert soil scientist and agricultural advisor specializing in Indian farming conditions.
Analyze the provided soil parameters and give recommendations.

Provide your response in the following JSON format:
{{
  "soilHealth": "good/moderate/poor",
  "fertilizer": {{
    "name": "Recommended fertilizer name",
    "npkRatio": "N-P-K ratio",
    "amount": "Amount per acre",
    "applicationMethod": "How to apply"
  }},
  "crops": [
    {{"name": "Crop name", "suitability": "high/medium/low", "reason": "Why suitable"}}
  ],
  "improvements": ["improvement1", "improvement2"],
  "advice": "Detailed farming advice based on soil conditions",
  "warnings": ["Any warnings or concerns"]
}}

Consider Indian farming conditions, common crops, and locally available fertilizers.
Respond in {lang} language for all text fields."""

    user = f"""Please analyze this soil and provide recommendations:
- pH Level: {params.ph}
- Nitrogen (N): {params.nitrogen} kg/ha
- Phosphorus (P): {params.phosphorus} kg/ha
- Potassium (K): {params.potassium} kg/ha
- Moisture Content: {params.moisture}%

Provide fertilizer recommendations, suitable crops, and advice for Indian farmers."""
    return system, user


# ---------------------------------------------------------------------------
# Szkodniki
# ---------------------------------------------------------------------------

PEST_USER_PROMPT = "Please analyze this plant image for pests or diseases:"


def pest_system_prompt(language: str | None) -> str:
    lang = language_name(language)
    return f"""You are an expert plant pathologist and agricultural pest specialist helping farmers in India.
Analyze the provided image of a plant/crop leaf and identify any pests, diseases, or health issues.

Provide your response in the following JSON format:
{{
  "detected": true/false,
  "name": "Name of pest/disease",
  "confidence": 85,
  "severity": "low/medium/high",
  "symptoms": ["symptom1", "symptom2"],
  "treatment": ["treatment1", "treatment2"],
  "prevention": ["prevention1", "prevention2"],
  "additionalInfo": "Any other relevant information"
}}

If the image doesn't show a plant or you cannot detect any issues, set detected to false.

{_language_instruction(lang, "ALL text fields in your JSON response")}

Use simple, practical language suitable for farmers."""


# ---------------------------------------------------------------------------
# Ceny rynkowe
# ---------------------------------------------------------------------------

def market_prompts(query: MarketQuery, language: str | None) -> tuple[str, str]:
    lang = language_name(language)
    query_date = query.query_date
    location = query.location or "India"
    if query.has_date_range:
        trend_requirement = (
            f"Include price trend data from {query.start_date} to {query.end_date} with daily prices"
        )
    else:
        trend_requirement = "Include 7-day price trend data"

    system = f"""You are an expert agricultural market analyst specializing in Indian crop markets (APMC mandis).
Provide current market price information for crops in India based on national agricultural market prices.

You MUST respond with a valid JSON object in this EXACT format (no markdown, no code blocks, just pure JSON):
{{
  "prices": [
    {{
      "crop": "Crop Name",
      "currentPrice": 2350,
      "previousPrice": 2280,
      "unit": "quintal",
      "trend": "up",
      "markets": [
        {{"name": "Market Name (Mandi)", "price": 2350, "distance": "5 km", "address": "Full address of the market"}}
      ],
      "priceTrend": [
        {{"day": "Mon", "date": "2024-01-15", "price": 2280}}
      ],
      "predictions": [
        {{"day": "Day 1", "date": "2024-01-20", "predictedPrice": 2400, "confidence": "High"}}
      ],
      "recommendation": "Brief recommendation about when to sell based on current trends and predictions"
    }}
  ],
  "summary": "Brief overall market summary",
  "queriedDate": "{query_date}",
  "location": "{location}"
}}

IMPORTANT REQUIREMENTS:
1. Include realistic prices based on current Indian APMC mandi rates
2. Include 3-5 nearby markets (mandis) with varying prices and their approximate distances from the location
3. Include market addresses so users can navigate to them
4. {trend_requirement}
5. ALWAYS include 5-day price predictions from the query date with confidence levels (High/Medium/Low)
6. Base predictions on seasonal trends, market demand, and historical patterns
7. Provide actionable sell recommendations based on price predictions

{_language_instruction(lang, "ALL text fields in your JSON response")}

Use simple language suitable for farmers."""

    user_lines = [
        f"Get current market prices for these crops: {', '.join(query.crops) or 'Wheat, Rice, Maize'}.",
        f"Location: {location}",
        f"Query Date: {query_date}",
    ]
    if query.has_date_range:
        user_lines.append(f"Date Range: {query.start_date} to {query.end_date}")
    if query.coordinates:
        lat, lon = query.coordinates
        user_lines.append(f"Coordinates: {lat}, {lon}")
    user_lines += [
        "",
        "Provide:",
        "1. Current prices at nearby APMC mandis",
        f"2. {'Daily price trend for the date range' if query.has_date_range else 'Weekly price trend'}",
        "3. 5-day price predictions starting from the query date",
        "4. Market addresses for navigation",
        "5. Selling recommendations based on predictions",
    ]
    return system, "\n".join(user_lines)


# ---------------------------------------------------------------------------
# Pogoda
# ---------------------------------------------------------------------------

def weather_prompts(snapshot: WeatherSnapshot, language: str | None) -> tuple[str, str]:
    lang = language_name(language)
    system = f"""You are an expert agricultural advisor helping Indian farmers make weather-based farming decisions.

CRITICAL LANGUAGE INSTRUCTION: You MUST respond ENTIRELY in {lang}.
- Every single word, title, and explanation must be in {lang}.

Analyze the weather data and provide 3-4 short, practical farming recommendations.
Keep each recommendation concise (1-2 sentences).
Focus on actionable advice for crops, irrigation, pest prevention, and field work timing."""

    user = f"""Current weather conditions:
- Location: {snapshot.location}
- Temperature: {snapshot.temperature}°C
- Humidity: {snapshot.humidity}%
- Rainfall: {snapshot.rainfall}mm
- Wind Speed: {snapshot.wind_speed} km/h
- Condition: {snapshot.condition}
- Description: {snapshot.description}

Provide 3-4 practical farming recommendations based on this weather. Respond ONLY in {lang}."""
    return system, user
