"""
Tradier API endpoint definitions.

Paths are relative to the host chosen by the request builder. Placeholders
in braces are filled in by ``RequestBuilder.resolve_url``.

Documentation: https://documentation.tradier.com/brokerage-api
"""

# Authentication
OAUTH_AUTHORIZE = "/v1/oauth/authorize?client_id={client_id}&scope={scopes}&state={state}"

# Market Data
MARKET_QUOTES = "/v1/markets/quotes"
MARKET_OPTION_CHAINS = "/v1/markets/options/chains"
MARKET_OPTION_STRIKES = "/v1/markets/options/strikes"
MARKET_OPTION_EXPIRATIONS = "/v1/markets/options/expirations"
MARKET_HISTORY = "/v1/markets/history"
MARKET_TIMESALES = "/v1/markets/timesales"
MARKET_ETB = "/v1/markets/etb"
MARKET_CLOCK = "/v1/markets/clock"
MARKET_CALENDAR = "/v1/markets/calendar"
MARKET_SEARCH = "/v1/markets/search"
MARKET_LOOKUP = "/v1/markets/lookup"

# Fundamentals (beta)
FUNDAMENTALS_COMPANY = "/beta/markets/fundamentals/company"
FUNDAMENTALS_CALENDARS = "/beta/markets/fundamentals/calendars"
FUNDAMENTALS_DIVIDENDS = "/beta/markets/fundamentals/dividends"
FUNDAMENTALS_CORPORATE_ACTIONS = "/beta/markets/fundamentals/corporate_actions"
FUNDAMENTALS_RATIOS = "/beta/markets/fundamentals/ratios"
FUNDAMENTALS_FINANCIALS = "/beta/markets/fundamentals/financials"
FUNDAMENTALS_STATISTICS = "/beta/markets/fundamentals/statistics"

# Account
ACCOUNT_BALANCES = "/v1/accounts/{account_id}/balances"
ACCOUNT_POSITIONS = "/v1/accounts/{account_id}/positions"
ACCOUNT_HISTORY = "/v1/accounts/{account_id}/history"
ACCOUNT_GAIN_LOSS = "/v1/accounts/{account_id}/gainloss"
ACCOUNT_ORDERS = "/v1/accounts/{account_id}/orders"
ACCOUNT_ORDER = "/v1/accounts/{account_id}/orders/{id}"

# Streaming
STREAMING_CREATE_SESSION = "/v1/markets/events/session"
STREAMING_QUOTES = "/v1/markets/events"

# Endpoints served by Tradier's beta API surface. Only available to Tradier
# Brokerage account holders; use in production applications with caution.
BETA_ENDPOINTS = frozenset(
    {
        FUNDAMENTALS_COMPANY,
        FUNDAMENTALS_CALENDARS,
        FUNDAMENTALS_DIVIDENDS,
        FUNDAMENTALS_CORPORATE_ACTIONS,
        FUNDAMENTALS_RATIOS,
        FUNDAMENTALS_FINANCIALS,
        FUNDAMENTALS_STATISTICS,
    }
)


def is_beta(path: str) -> bool:
    """Return True if ``path`` belongs to the beta API surface."""
    return path in BETA_ENDPOINTS
