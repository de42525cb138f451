"""
Domain service: threshold scoring of an indicator Snapshot.

Business decisions owned here:
  - the three additive rules (RSI, moving-average trend, volume), 0-5 points each;
  - the score → Judgment cut-offs.

Each rule checks its inputs for None before comparing and contributes exactly
one comment, always in RSI → trend → volume order.
"""

from typing import Optional

from src.domain.entities.snapshot import Judgment, ScoreResult, Snapshot, Trend

RSI_OVERSOLD = 40
RSI_OVERBOUGHT = 70
NOTABLE_VOLUME = 10_000_000

# Highest threshold first.
JUDGMENT_THRESHOLDS: tuple[tuple[int, Judgment], ...] = (
    (12, Judgment.BULLISH),
    (8, Judgment.NEUTRAL_TO_BUY),
    (5, Judgment.WAIT_AND_SEE),
)


def classify_trend(
    price: Optional[float],
    ma_5: Optional[float],
    ma_25: Optional[float],
) -> Trend:
    """Uptrend when price > ma_5 > ma_25, downtrend when strictly reversed, else flat."""
    if price is None or ma_5 is None or ma_25 is None:
        return Trend.FLAT
    if price > ma_5 > ma_25:
        return Trend.UPTREND
    if price < ma_5 < ma_25:
        return Trend.DOWNTREND
    return Trend.FLAT


def _score_rsi(rsi: Optional[float]) -> tuple[int, str]:
    if rsi is None:
        return 0, "RSI unavailable"
    if rsi < RSI_OVERSOLD:
        return 5, "good buy zone"
    if rsi > RSI_OVERBOUGHT:
        return 0, "overheated"
    return 3, "neutral-to-buy"


def _score_trend(snapshot: Snapshot) -> tuple[int, str]:
    trend = classify_trend(snapshot.price, snapshot.ma_5, snapshot.ma_25)
    if trend is Trend.UPTREND:
        return 5, "uptrend"
    if trend is Trend.DOWNTREND:
        return 0, "downtrend"
    return 2, "flat/mixed"


def _score_volume(volume: Optional[float]) -> tuple[int, str]:
    if volume is None:
        return 0, "volume unavailable"
    if volume > NOTABLE_VOLUME:
        return 5, "notable volume"
    return 3, "average volume"


def judge(score: int) -> Judgment:
    for threshold, judgment in JUDGMENT_THRESHOLDS:
        if score >= threshold:
            return judgment
    return Judgment.BEARISH


def score_snapshot(snapshot: Snapshot) -> ScoreResult:
    rules = (
        _score_rsi(snapshot.rsi),
        _score_trend(snapshot),
        _score_volume(snapshot.volume),
    )
    score = sum(points for points, _ in rules)
    return ScoreResult(
        symbol=snapshot.symbol,
        score=score,
        judgment=judge(score),
        comments=tuple(comment for _, comment in rules),
    )
