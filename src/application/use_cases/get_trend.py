"""
Use-case: classify a symbol's moving-average trend.
"""

from src.application.use_cases.get_stock_snapshot import GetStockSnapshotUseCase
from src.domain.entities.snapshot import TrendReport
from src.domain.services.scoring import classify_trend


class GetTrendUseCase:
    def __init__(self, snapshot_use_case: GetStockSnapshotUseCase) -> None:
        self._snapshot_use_case = snapshot_use_case

    def execute(self, symbol: str) -> TrendReport:
        snapshot = self._snapshot_use_case.execute(symbol)
        return TrendReport(
            symbol=snapshot.symbol,
            price=snapshot.price,
            ma_5=snapshot.ma_5,
            ma_25=snapshot.ma_25,
            trend=classify_trend(snapshot.price, snapshot.ma_5, snapshot.ma_25),
        )
