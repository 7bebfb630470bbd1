"""Exceptions for the Tradier API client.

Only configuration problems are raised by this package. Transport failures
(connection errors, timeouts, non-2xx responses) surface as the exceptions
``requests`` raises for them.
"""


class TradierError(Exception):
    """Base exception for Tradier client errors."""

    pass


class TradierConfigurationError(TradierError, ValueError):
    """Invalid client configuration or request inputs."""

    pass


class TradierStreamNotPermittedError(TradierConfigurationError):
    """
    Streaming was requested with a sandbox account.

    Tradier only serves the streaming host to brokerage accounts, so this is
    raised before any request is sent.
    """

    pass
