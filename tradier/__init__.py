"""
Tradier API client.

A thin, typed client for Tradier's brokerage REST API. It includes:

- TradierClient: entry point composing the resource clients
- Market data, fundamentals (beta), account and streaming endpoints
- RequestBuilder: host selection, auth headers and query construction
- Option enums: AccountType, HistoryInterval, TimeSalesInterval, SessionFilter

Responses are returned as parsed JSON without validation.
"""

from .client import TradierClient
from .config import TradierConfig
from .exceptions import (
    TradierConfigurationError,
    TradierError,
    TradierStreamNotPermittedError,
)
from .models import (
    PRODUCTION_ACCOUNT_TYPE,
    AccountType,
    GainLossSortBy,
    HistoryActivityType,
    HistoryInterval,
    SessionFilter,
    SortOrder,
    TimeSalesInterval,
)
from .request_builder import RequestBuilder, RequestDescriptor

__all__ = [
    "TradierClient",
    "TradierConfig",
    "TradierError",
    "TradierConfigurationError",
    "TradierStreamNotPermittedError",
    "PRODUCTION_ACCOUNT_TYPE",
    "AccountType",
    "GainLossSortBy",
    "HistoryActivityType",
    "HistoryInterval",
    "SessionFilter",
    "SortOrder",
    "TimeSalesInterval",
    "RequestBuilder",
    "RequestDescriptor",
]
