"""
Domain error taxonomy.

MissingParameterError is a client mistake (HTTP 400); ProviderError is an
upstream fetch or parse failure (HTTP 500). The HTTP entrypoint maps both to
JSON envelopes; nothing below it knows about status codes.
"""

from typing import Optional


class MissingParameterError(ValueError):
    """A required input (query parameter, symbol) was absent or blank."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"Missing {parameter!r} parameter")


class ProviderError(RuntimeError):
    """The market-data provider could not deliver usable data for *symbol*.

    The message is the upstream message, passed through unchanged.
    """

    def __init__(self, message: str, symbol: Optional[str] = None) -> None:
        self.symbol = symbol
        super().__init__(message)
