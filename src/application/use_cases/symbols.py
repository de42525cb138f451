"""
Symbol parsing shared by the use-cases and the HTTP entrypoint.
"""

from typing import Optional

from src.domain.errors import MissingParameterError


def normalize_symbol(symbol: Optional[str], parameter: str = "symbol") -> str:
    """Return *symbol* stripped and upper-cased.

    Raises:
        MissingParameterError: if *symbol* is None or blank.
    """
    if not symbol or not symbol.strip():
        raise MissingParameterError(parameter)
    return symbol.strip().upper()


def parse_symbol_list(raw: Optional[str], parameter: str = "symbols") -> list[str]:
    """Split a comma-separated symbol list, keeping order and dropping blank entries.

    Raises:
        MissingParameterError: if no symbol remains.
    """
    symbols = [part.strip().upper() for part in (raw or "").split(",")]
    symbols = [symbol for symbol in symbols if symbol]
    if not symbols:
        raise MissingParameterError(parameter)
    return symbols
