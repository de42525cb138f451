"""
Use-case: fetch a quote and close history for a symbol and compute its indicator Snapshot.
Depends only on Domain ports, entities and services — no infrastructure imports.
"""

import logging

from src.application.use_cases.symbols import normalize_symbol
from src.domain.entities.snapshot import Snapshot
from src.domain.ports.stock_data_port import IStockDataProvider
from src.domain.services.indicators import build_snapshot

logger = logging.getLogger(__name__)


class GetStockSnapshotUseCase:
    def __init__(
        self,
        provider: IStockDataProvider,
        period: str = "3mo",
        interval: str = "1d",
    ) -> None:
        """
        Args:
            provider: IStockDataProvider implementation (e.g. YFinanceStockDataProvider).
            period:   History period to request; must cover the 25-sample moving average.
            interval: History sample interval.
        """
        self._provider = provider
        self._period = period
        self._interval = interval

    def execute(self, symbol: str) -> Snapshot:
        """Fetch data for *symbol* (uppercased) and compute RSI, MA5 and MA25.

        Raises:
            MissingParameterError: if *symbol* is blank.
            ProviderError: if the quote or the history cannot be retrieved.
        """
        symbol = normalize_symbol(symbol)
        quote = self._provider.get_quote(symbol)
        history = self._provider.get_price_history(
            symbol, period=self._period, interval=self._interval
        )
        logger.debug("Fetched %d closes for %s", len(history.closes), symbol)
        return build_snapshot(symbol, quote, history.closes)
