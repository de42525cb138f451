"""
Pydantic response bodies for the HTTP entrypoint.

Domain dataclasses stay framework-free; these models own the wire field names
(including the camelCase keys of the /etf payload).
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.application.services.batch_runner import BatchFailure
from src.domain.entities.snapshot import ScoreResult, Snapshot, TrendReport
from src.domain.entities.stock_price import ForexQuote, StockQuote


class SnapshotResponse(BaseModel):
    symbol: str
    price: Optional[float]
    volume: Optional[float]
    rsi: Optional[float]
    ma_5: Optional[float]
    ma_25: Optional[float]

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "SnapshotResponse":
        return cls(
            symbol=snapshot.symbol,
            price=snapshot.price,
            volume=snapshot.volume,
            rsi=snapshot.rsi,
            ma_5=snapshot.ma_5,
            ma_25=snapshot.ma_25,
        )


class ScoreResponse(SnapshotResponse):
    score: int
    judgment: str
    comments: list[str]

    @classmethod
    def from_result(cls, snapshot: Snapshot, result: ScoreResult) -> "ScoreResponse":
        return cls(
            **SnapshotResponse.from_snapshot(snapshot).model_dump(),
            score=result.score,
            judgment=result.judgment.value,
            comments=list(result.comments),
        )


class ScoreFailureResponse(BaseModel):
    symbol: Optional[str]
    score: int = 0
    judgment: str = "failed"
    comments: list[str]


class TrendResponse(BaseModel):
    symbol: str
    price: Optional[float]
    ma_5: Optional[float]
    ma_25: Optional[float]
    trend: str

    @classmethod
    def from_report(cls, report: TrendReport) -> "TrendResponse":
        return cls(
            symbol=report.symbol,
            price=report.price,
            ma_5=report.ma_5,
            ma_25=report.ma_25,
            trend=report.trend.value,
        )


class ForexResponse(BaseModel):
    symbol: str
    price: Optional[float]

    @classmethod
    def from_quote(cls, quote: ForexQuote) -> "ForexResponse":
        return cls(symbol=quote.symbol, price=quote.price)


class EtfResponse(BaseModel):
    symbol: str
    price: Optional[float]
    change: Optional[float]
    change_percent: Optional[float] = Field(serialization_alias="changesPercentage")
    previous_close: Optional[float] = Field(serialization_alias="previousClose")

    @classmethod
    def from_quote(cls, quote: StockQuote) -> "EtfResponse":
        return cls(
            symbol=quote.symbol,
            price=quote.price,
            change=quote.change,
            change_percent=quote.change_percent,
            previous_close=quote.previous_close,
        )


class ErrorEntry(BaseModel):
    symbol: str
    error: str

    @classmethod
    def from_failure(cls, failure: BatchFailure) -> "ErrorEntry":
        return cls(symbol=failure.symbol, error=failure.error)
