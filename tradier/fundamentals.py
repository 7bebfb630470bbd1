"""
Tradier fundamentals endpoints (beta).

These endpoints are part of Tradier's beta API surface. They are only
available to Tradier Brokerage account holders and should be used with
caution in production applications. The beta status is exposed as
``TradierFundamentalsClient.beta`` and ``endpoints.is_beta``; it does not
change how requests are made.
"""

from typing import Any, Iterable

from . import endpoints
from .base import BaseResourceClient
from .request_builder import join_symbols


class TradierFundamentalsClient(BaseResourceClient):
    """Client for ``/beta/markets/fundamentals/*``."""

    beta = True

    def _get_for_symbols(self, endpoint: str, symbols: Iterable[str]) -> Any:
        return self._get(endpoint, {"symbols": join_symbols(symbols)})

    def get_company(self, symbols: Iterable[str]) -> Any:
        """Get company fundamental information."""
        return self._get_for_symbols(endpoints.FUNDAMENTALS_COMPANY, symbols)

    def get_corporate_calendars(self, symbols: Iterable[str]) -> Any:
        """Get corporate calendar events (excluding dividends)."""
        return self._get_for_symbols(endpoints.FUNDAMENTALS_CALENDARS, symbols)

    def get_dividends(self, symbols: Iterable[str]) -> Any:
        """Get past and announced future dividends."""
        return self._get_for_symbols(endpoints.FUNDAMENTALS_DIVIDENDS, symbols)

    def get_corporate_actions(self, symbols: Iterable[str]) -> Any:
        """Get historical and scheduled corporate actions."""
        return self._get_for_symbols(endpoints.FUNDAMENTALS_CORPORATE_ACTIONS, symbols)

    def get_ratios(self, symbols: Iterable[str]) -> Any:
        """Get standard financial ratios."""
        return self._get_for_symbols(endpoints.FUNDAMENTALS_RATIOS, symbols)

    def get_financial_reports(self, symbols: Iterable[str]) -> Any:
        """Get corporate financial information and statements."""
        return self._get_for_symbols(endpoints.FUNDAMENTALS_FINANCIALS, symbols)

    def get_price_statistics(self, symbols: Iterable[str]) -> Any:
        """Get price statistics."""
        return self._get_for_symbols(endpoints.FUNDAMENTALS_STATISTICS, symbols)
