"""
Tradier market data endpoints.

Quotes, option chains, historical pricing, time and sales, market clock and
calendar, and symbol search. Responses are returned as parsed JSON exactly as
Tradier sends them.
"""

from typing import Any, Iterable, Optional, Union

from . import endpoints
from .base import BaseResourceClient
from .models import HistoryInterval, SessionFilter, TimeSalesInterval
from .request_builder import join_symbols


class TradierMarketClient(BaseResourceClient):
    """
    Client for ``/v1/markets/*``.

    Example:
        client = TradierClient("token", AccountType.API)
        quotes = client.market.get_quotes(["AAPL", "MSFT"])
    """

    def get_quotes(self, symbols: Iterable[str]) -> Any:
        """
        Get quotes for one or more symbols.

        Args:
            symbols: Equity or option symbols

        Returns:
            Quotes response body
        """
        return self._get(endpoints.MARKET_QUOTES, {"symbols": join_symbols(symbols)})

    def get_option_chains(
        self, symbol: str, expiration: str, greeks: Optional[bool] = None
    ) -> Any:
        """
        Get all quotes in an option chain.

        Args:
            symbol: Underlying symbol of the chain
            expiration: Expiration date of the chain (YYYY-MM-DD)
            greeks: Include greeks and volatility data (production accounts only)
        """
        return self._get(
            endpoints.MARKET_OPTION_CHAINS,
            {"symbol": symbol, "expiration": expiration, "greeks": greeks},
        )

    def get_option_strikes(self, symbol: str, expiration: str) -> Any:
        """Get the strike prices of an option chain for one expiration."""
        return self._get(
            endpoints.MARKET_OPTION_STRIKES,
            {"symbol": symbol, "expiration": expiration},
        )

    def get_option_expirations(
        self,
        symbol: str,
        include_all_roots: bool = False,
        strikes: bool = False,
    ) -> Any:
        """
        Get expiration dates for an underlying.

        Some underlyings list weekly options under a separate root (SPX/SPXW,
        RUT/RUTW). Set ``include_all_roots`` to see every expiration, which
        also picks up roots created by corporate actions (AAPL1).

        Args:
            symbol: Underlying symbol
            include_all_roots: Include expirations of every option root
            strikes: Include the strike prices of each expiration
        """
        return self._get(
            endpoints.MARKET_OPTION_EXPIRATIONS,
            {
                "symbol": symbol,
                "includeAllRoots": include_all_roots,
                "strikes": strikes,
            },
        )

    def get_historical_pricing(
        self,
        symbol: str,
        interval: Optional[Union[HistoryInterval, str]] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Any:
        """
        Get historical pricing for a security.

        Args:
            symbol: Security symbol
            interval: daily, weekly or monthly
            start: Start date (YYYY-MM-DD)
            end: End date (YYYY-MM-DD)
        """
        return self._get(
            endpoints.MARKET_HISTORY,
            {"symbol": symbol, "interval": interval, "start": start, "end": end},
        )

    def get_time_and_sales(
        self,
        symbol: str,
        interval: Optional[Union[TimeSalesInterval, str]] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        session_filter: Optional[Union[SessionFilter, str]] = None,
    ) -> Any:
        """
        Get time and sales for a security.

        Tick data for a busy symbol is large; keep the start/end window short
        when ``interval`` is ``tick``.

        Args:
            symbol: Security symbol
            interval: tick, 1min, 5min or 15min
            start: Start date/time (YYYY-MM-DD HH:MM)
            end: End date/time (YYYY-MM-DD HH:MM)
            session_filter: all, or open for market hours only
        """
        return self._get(
            endpoints.MARKET_TIMESALES,
            {
                "symbol": symbol,
                "interval": interval,
                "start": start,
                "end": end,
                "session_filter": session_filter,
            },
        )

    def get_etb_securities(self) -> Any:
        """Get the easy-to-borrow list (securities that can be sold short)."""
        return self._get(endpoints.MARKET_ETB)

    def get_clock(self) -> Any:
        """Get the intraday market status."""
        return self._get(endpoints.MARKET_CLOCK)

    def get_calendar(self, month: Optional[int] = None, year: Optional[int] = None) -> Any:
        """
        Get the market calendar for a month.

        Args:
            month: Month number, 1-12 (defaults to the current month)
            year: Four-digit year (defaults to the current year)
        """
        return self._get(endpoints.MARKET_CALENDAR, {"month": month, "year": year})

    def search_for_companies(self, q: str, indexes: Optional[bool] = None) -> Any:
        """
        Search for securities by keyword in the company description.

        Args:
            q: Search query
            indexes: Include indexes in the results
        """
        return self._get(endpoints.MARKET_SEARCH, {"q": q, "indexes": indexes})

    def search_for_symbols(
        self,
        q: str,
        exchanges: Optional[Iterable[str]] = (),
        types: Optional[Union[Iterable[str], str]] = None,
    ) -> Any:
        """
        Look up symbols by ticker or partial ticker.

        Args:
            q: Search query
            exchanges: Exchanges to include (sent as an empty string when
                empty or None)
            types: Security types to include (stock, option, etf, index)
        """
        return self._get(
            endpoints.MARKET_LOOKUP,
            {"q": q, "exchanges": join_symbols(exchanges or ()), "types": join_symbols(types)},
        )
