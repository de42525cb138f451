"""
Service configuration, read once from the process environment (and a local .env file).

The resulting ServiceConfig is passed explicitly to create_app(); nothing else in the
codebase reads os.environ.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv


def _split(raw: Optional[str], fallback: str) -> tuple[str, ...]:
    items = [item.strip() for item in (raw or fallback).split(",")]
    return tuple(item for item in items if item)


@dataclass(frozen=True)
class ServiceConfig:
    """
    Attributes:
        host:                  Interface the HTTP server binds to.
        port:                  TCP port the HTTP server listens on.
        fetch_timeout_seconds: Upper bound on each upstream provider call.
        history_period:        yfinance period for close history; must span 25+ samples.
        history_interval:      yfinance sample interval for close history.
        cors_origins:          Allowed CORS origins; "*" allows any.
        log_level:             Root logging level name.
    """

    host: str = "0.0.0.0"
    port: int = 3000
    fetch_timeout_seconds: float = 10.0
    history_period: str = "3mo"
    history_interval: str = "1d"
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be in 1..65535, got {self.port}")
        if self.fetch_timeout_seconds <= 0:
            raise ValueError(
                f"fetch_timeout_seconds must be positive, got {self.fetch_timeout_seconds}"
            )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        dotenv: bool = True,
    ) -> "ServiceConfig":
        """Build a config from *environ* (default: os.environ after loading .env).

        Raises:
            ValueError: if a numeric variable cannot be parsed or is out of range.
        """
        if environ is None:
            if dotenv:
                load_dotenv()
            environ = os.environ
        return cls(
            host=environ.get("HOST") or "0.0.0.0",
            port=int(environ.get("PORT") or "3000"),
            fetch_timeout_seconds=float(environ.get("FETCH_TIMEOUT_SECONDS") or "10"),
            history_period=environ.get("HISTORY_PERIOD") or "3mo",
            history_interval=environ.get("HISTORY_INTERVAL") or "1d",
            cors_origins=_split(environ.get("CORS_ORIGINS"), "*"),
            log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
        )
