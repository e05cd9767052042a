"""
data_model — struktury danych AgroDoradcy.

Użycie:
  from data_model import Paragraph, Heading, SoilAnalysis, ...

Moduły:
  content  — ContentNode (Paragraph, Heading, BulletList, NumberedList),
             InlineSpan (PlainText, Emphasis)
  advisory — typowane wyniki doradcze: SoilAnalysis, PestDetection,
             MarketReport, WeatherSnapshot, ChatReply + enumeracje
"""

from .content import (
    PlainText,
    Emphasis,
    InlineSpan,
    Spans,
    Paragraph,
    Heading,
    BulletList,
    NumberedList,
    ContentNode,
)
from .advisory import (
    SoilHealth,
    Suitability,
    Severity,
    Trend,
    Confidence,
    SoilParameters,
    Fertilizer,
    CropSuitability,
    SoilAnalysis,
    PestDetection,
    MarketQuote,
    PricePoint,
    PricePrediction,
    CropPrice,
    MarketReport,
    MarketQuery,
    ForecastDay,
    WeatherSnapshot,
    ChatReply,
    AdvisoryResult,
)

__all__ = [
    # content
    "PlainText",
    "Emphasis",
    "InlineSpan",
    "Spans",
    "Paragraph",
    "Heading",
    "BulletList",
    "NumberedList",
    "ContentNode",
    # advisory
    "SoilHealth",
    "Suitability",
    "Severity",
    "Trend",
    "Confidence",
    "SoilParameters",
    "Fertilizer",
    "CropSuitability",
    "SoilAnalysis",
    "PestDetection",
    "MarketQuote",
    "PricePoint",
    "PricePrediction",
    "CropPrice",
    "MarketReport",
    "MarketQuery",
    "ForecastDay",
    "WeatherSnapshot",
    "ChatReply",
    "AdvisoryResult",
]
