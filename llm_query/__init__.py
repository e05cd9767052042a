"""
llm_query — prompty i integracja z modelem językowym (Gemini).

Publiczne API:
  call_gemini(prompt, system, image, mime_type, model, api_key) -> str
  extract_json(raw)                                    -> dict | None
  language_name(code_or_name)                          -> str
  chat_system_prompt / soil_prompts / pest_system_prompt /
  market_prompts / weather_prompts                     (prompty)
  ask(message, language)                               -> ChatReply
  analyze_soil(params, language)                       -> SoilAnalysis
  analyze_pest(image_path, language)                   -> PestDetection
  market_prices(query, language)                       -> MarketReport
  weather_recommendations(snapshot, language)          -> str
"""

from .gemini import call_gemini, DEFAULT_MODEL
from .response import extract_json
from .prompt import (
    LANGUAGE_NAMES,
    PEST_USER_PROMPT,
    language_name,
    chat_system_prompt,
    soil_prompts,
    pest_system_prompt,
    market_prompts,
    weather_prompts,
)
from .advisor import (
    ask,
    analyze_soil,
    analyze_pest,
    market_prices,
    weather_recommendations,
)

__all__ = [
    "call_gemini",
    "DEFAULT_MODEL",
    "extract_json",
    "LANGUAGE_NAMES",
    "PEST_USER_PROMPT",
    "language_name",
    "chat_system_prompt",
    "soil_prompts",
    "pest_system_prompt",
    "market_prompts",
    "weather_prompts",
    "ask",
    "analyze_soil",
    "analyze_pest",
    "market_prices",
    "weather_recommendations",
]
