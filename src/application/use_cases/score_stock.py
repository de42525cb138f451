"""
Use-case: compute a Snapshot for a symbol and score it.
"""

from src.application.use_cases.get_stock_snapshot import GetStockSnapshotUseCase
from src.domain.entities.snapshot import ScoreResult, Snapshot
from src.domain.services.scoring import score_snapshot


class ScoreStockUseCase:
    def __init__(self, snapshot_use_case: GetStockSnapshotUseCase) -> None:
        self._snapshot_use_case = snapshot_use_case

    def execute(self, symbol: str) -> tuple[Snapshot, ScoreResult]:
        snapshot = self._snapshot_use_case.execute(symbol)
        return snapshot, score_snapshot(snapshot)
