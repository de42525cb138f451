"""
Application service: bounded, per-symbol fan-out of blocking provider calls.

Business decisions owned here:
  - every upstream call runs in a worker thread and is bounded by a timeout;
  - batch results keep input order, and one symbol's failure never affects another.

No imports from yfinance, fastapi, or any other external library appear here.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar, Union

from src.domain.errors import ProviderError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class BatchFailure:
    symbol: str
    error: str


class BatchRunner:
    def __init__(self, timeout_seconds: float) -> None:
        self._timeout = timeout_seconds

    async def run_one(self, symbol: str, fetch: Callable[[str], T]) -> T:
        """Run ``fetch(symbol)`` in a worker thread, bounded by the timeout.

        Raises:
            ProviderError: on timeout, or as raised by *fetch*.
        """
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(fetch, symbol),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as exc:
            raise ProviderError(
                f"Timed out after {self._timeout:g}s fetching {symbol}",
                symbol=symbol,
            ) from exc

    async def run(
        self,
        symbols: Sequence[str],
        fetch: Callable[[str], T],
    ) -> list[Union[T, BatchFailure]]:
        """Fetch every symbol concurrently; results line up with *symbols*.

        Errors raised by *fetch* are captured as BatchFailure entries.
        """
        results = await asyncio.gather(
            *(self._run_isolated(symbol, fetch) for symbol in symbols)
        )
        failures = sum(isinstance(result, BatchFailure) for result in results)
        logger.info(
            "Batch of %d symbols finished: %d ok, %d failed",
            len(symbols),
            len(symbols) - failures,
            failures,
        )
        return results

    async def _run_isolated(
        self,
        symbol: str,
        fetch: Callable[[str], T],
    ) -> Union[T, BatchFailure]:
        try:
            return await self.run_one(symbol, fetch)
        except Exception as exc:
            logger.warning("Fetch failed for %s: %s", symbol, exc)
            return BatchFailure(symbol=symbol, error=str(exc))
