"""
Enumerated option sets used by the Tradier API.

Enums subclass ``str`` so members can be passed straight into query
parameters and compared against plain strings.
"""

from enum import Enum


class AccountType(str, Enum):
    """Account type selecting the host a client talks to."""

    SANDBOX = "sandbox"
    API = "api"
    BROKERAGE = "brokerage"


# Account type treated as production by default. Override it through
# TradierConfig.production_account_type when your deployment names the
# live account type differently.
PRODUCTION_ACCOUNT_TYPE = AccountType.API


class HistoryInterval(str, Enum):
    """Interval for historical pricing."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class TimeSalesInterval(str, Enum):
    """Interval per timesale."""

    TICK = "tick"
    ONE_MIN = "1min"
    FIVE_MIN = "5min"
    FIFTEEN_MIN = "15min"


class SessionFilter(str, Enum):
    """Return all data points or only those during market hours."""

    ALL = "all"
    OPEN = "open"


class HistoryActivityType(str, Enum):
    """Activity types accepted by the account history endpoint."""

    TRADE = "trade"
    OPTION = "option"
    ACH = "ach"
    WIRE = "wire"
    DIVIDEND = "dividend"
    FEE = "fee"
    TAX = "tax"
    JOURNAL = "journal"
    CHECK = "check"
    TRANSFER = "transfer"
    ADJUSTMENT = "adjustment"
    INTEREST = "interest"


class GainLossSortBy(str, Enum):
    """Field to sort closed positions by."""

    OPEN_DATE = "openDate"
    CLOSE_DATE = "closeDate"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
