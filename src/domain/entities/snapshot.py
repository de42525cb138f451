"""
Domain entities for computed indicator snapshots and their scores.
Zero external dependencies — pure Python dataclasses and enums only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Judgment(str, Enum):
    BULLISH = "bullish"
    NEUTRAL_TO_BUY = "neutral-to-buy"
    WAIT_AND_SEE = "wait-and-see"
    BEARISH = "bearish/caution"


class Trend(str, Enum):
    UPTREND = "uptrend"
    DOWNTREND = "downtrend"
    FLAT = "flat"


@dataclass(frozen=True)
class Snapshot:
    symbol: str
    price: Optional[float]
    volume: Optional[float]
    rsi: Optional[float]
    ma_5: Optional[float]
    ma_25: Optional[float]


@dataclass(frozen=True)
class ScoreResult:
    symbol: str
    score: int
    judgment: Judgment
    comments: tuple[str, ...]


@dataclass(frozen=True)
class TrendReport:
    symbol: str
    price: Optional[float]
    ma_5: Optional[float]
    ma_25: Optional[float]
    trend: Trend
