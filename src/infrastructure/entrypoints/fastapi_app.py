"""
FastAPI entry point — HTTP surface of the stock signal service.

create_app() is the Composition Root: it wires the stock data adapter and the
application use-cases from an explicit ServiceConfig. build_app() reads the
environment only when uvicorn calls it.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:build_app --factory --reload --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.application.services.batch_runner import BatchFailure, BatchRunner
from src.application.use_cases.get_etf_quote import ETF_BASKET, GetEtfQuoteUseCase
from src.application.use_cases.get_forex_quote import GetForexQuoteUseCase
from src.application.use_cases.get_stock_snapshot import GetStockSnapshotUseCase
from src.application.use_cases.get_trend import GetTrendUseCase
from src.application.use_cases.score_stock import ScoreStockUseCase
from src.application.use_cases.symbols import normalize_symbol, parse_symbol_list
from src.domain.errors import MissingParameterError, ProviderError
from src.domain.ports.stock_data_port import IStockDataProvider
from src.infrastructure.config.settings import ServiceConfig
from src.infrastructure.entrypoints.schemas import (
    ErrorEntry,
    EtfResponse,
    ForexResponse,
    ScoreFailureResponse,
    ScoreResponse,
    SnapshotResponse,
    TrendResponse,
)

logger = logging.getLogger(__name__)


def _dump(entry, to_response) -> dict:
    if isinstance(entry, BatchFailure):
        return ErrorEntry.from_failure(entry).model_dump()
    return to_response(entry).model_dump(by_alias=True)


def create_app(
    config: ServiceConfig,
    provider: Optional[IStockDataProvider] = None,
) -> FastAPI:
    """Build the FastAPI app.

    Args:
        config:   Service settings (timeouts, history window, CORS origins).
        provider: IStockDataProvider implementation; defaults to
                  YFinanceStockDataProvider.
    """
    if provider is None:
        from src.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider
        provider = YFinanceStockDataProvider(timeout_seconds=config.fetch_timeout_seconds)

    runner = BatchRunner(timeout_seconds=config.fetch_timeout_seconds)
    snapshot_uc = GetStockSnapshotUseCase(
        provider,
        period=config.history_period,
        interval=config.history_interval,
    )
    score_uc = ScoreStockUseCase(snapshot_uc)
    trend_uc = GetTrendUseCase(snapshot_uc)
    forex_uc = GetForexQuoteUseCase(provider)
    etf_uc = GetEtfQuoteUseCase(provider)

    app = FastAPI(title="Stock Signal API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MissingParameterError)
    async def missing_parameter_handler(request: Request, exc: MissingParameterError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        logger.warning("Provider failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"symbol": exc.symbol, "error": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/stock")
    async def get_stock(symbol: Optional[str] = None):
        """Snapshot (price, volume, RSI, MA5, MA25) for one symbol."""
        symbol = normalize_symbol(symbol)
        snapshot = await runner.run_one(symbol, snapshot_uc.execute)
        return SnapshotResponse.from_snapshot(snapshot).model_dump()

    @app.get("/multi-stock")
    async def get_multi_stock(symbols: Optional[str] = None):
        results = await runner.run(parse_symbol_list(symbols), snapshot_uc.execute)
        return {"results": [_dump(r, SnapshotResponse.from_snapshot) for r in results]}

    @app.get("/score")
    async def get_score(symbol: Optional[str] = None):
        """Snapshot fields merged with score, judgment and comments."""
        symbol = normalize_symbol(symbol)
        try:
            snapshot, result = await runner.run_one(symbol, score_uc.execute)
        except Exception as exc:
            logger.warning("Scoring failed for %s: %s", symbol, exc)
            body = ScoreFailureResponse(symbol=symbol, comments=[str(exc)])
            return JSONResponse(status_code=500, content=body.model_dump())
        return ScoreResponse.from_result(snapshot, result).model_dump()

    @app.get("/multi-score")
    async def get_multi_score(symbols: Optional[str] = None):
        results = await runner.run(parse_symbol_list(symbols), score_uc.execute)
        return {
            "results": [
                _dump(r, lambda pair: ScoreResponse.from_result(*pair)) for r in results
            ]
        }

    @app.get("/trend")
    async def get_trend(symbols: Optional[str] = None):
        results = await runner.run(parse_symbol_list(symbols), trend_uc.execute)
        return {"results": [_dump(r, TrendResponse.from_report) for r in results]}

    @app.get("/forex")
    async def get_forex(symbol: Optional[str] = None):
        symbol = normalize_symbol(symbol)
        quote = await runner.run_one(symbol, forex_uc.execute)
        return ForexResponse.from_quote(quote).model_dump()

    @app.get("/etf")
    async def get_etf():
        results = await runner.run(ETF_BASKET, etf_uc.execute)
        return {"etfs": [_dump(r, EtfResponse.from_quote) for r in results]}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def build_app() -> FastAPI:
    """App factory for ``uvicorn --factory``: config from the environment, yfinance provider."""
    return create_app(ServiceConfig.from_env())
