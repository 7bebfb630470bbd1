"""
Tradier account endpoints.

Read-only access to balances, positions, history, realized gain/loss and
orders. Every endpoint is scoped to an account number that is substituted
into the ``{account_id}`` placeholder of the endpoint path.
"""

from typing import Any, Optional, Union

from . import endpoints
from .base import BaseResourceClient
from .models import GainLossSortBy, HistoryActivityType, SortOrder


class TradierAccountClient(BaseResourceClient):
    """
    Client for ``/v1/accounts/{account_id}/*``.

    Example:
        balances = client.account.get_balances("VA000001")
        order = client.account.get_order("VA000001", 228175)
    """

    def get_balances(self, account_id: str) -> Any:
        """Get balances of an account."""
        return self._get(endpoints.ACCOUNT_BALANCES, account_id=account_id)

    def get_positions(self, account_id: str) -> Any:
        """Get current positions of an account."""
        return self._get(endpoints.ACCOUNT_POSITIONS, account_id=account_id)

    def get_history(
        self,
        account_id: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        type: Optional[Union[HistoryActivityType, str]] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        symbol: Optional[str] = None,
        exact_match: Optional[bool] = None,
    ) -> Any:
        """
        Get historical activity of an account.

        Args:
            account_id: Account number
            page: Page number to return, starting at 1
            limit: Number of rows per page
            type: Activity type filter (trade, option, ach, dividend, ...)
            start: Start date (YYYY-MM-DD)
            end: End date (YYYY-MM-DD)
            symbol: Only return activity for this symbol
            exact_match: Match ``symbol`` exactly instead of as a prefix
        """
        return self._get(
            endpoints.ACCOUNT_HISTORY,
            {
                "page": page,
                "limit": limit,
                "type": type,
                "start": start,
                "end": end,
                "symbol": symbol,
                "exactMatch": exact_match,
            },
            account_id=account_id,
        )

    def get_gain_loss(
        self,
        account_id: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[Union[GainLossSortBy, str]] = None,
        sort: Optional[Union[SortOrder, str]] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        symbol: Optional[str] = None,
    ) -> Any:
        """
        Get realized gain/loss of closed positions.

        Args:
            account_id: Account number
            page: Page number to return, starting at 1
            limit: Number of rows per page
            sort_by: openDate or closeDate
            sort: asc or desc
            start: Start date (YYYY-MM-DD)
            end: End date (YYYY-MM-DD)
            symbol: Only return positions in this symbol
        """
        return self._get(
            endpoints.ACCOUNT_GAIN_LOSS,
            {
                "page": page,
                "limit": limit,
                "sortBy": sort_by,
                "sort": sort,
                "start": start,
                "end": end,
                "symbol": symbol,
            },
            account_id=account_id,
        )

    def get_orders(self, account_id: str, include_tags: Optional[bool] = None) -> Any:
        """Get orders placed in an account."""
        return self._get(
            endpoints.ACCOUNT_ORDERS,
            {"includeTags": include_tags},
            account_id=account_id,
        )

    def get_order(
        self,
        account_id: str,
        order_id: Union[int, str],
        include_tags: Optional[bool] = None,
    ) -> Any:
        """Get a single order."""
        return self._get(
            endpoints.ACCOUNT_ORDER,
            {"includeTags": include_tags},
            account_id=account_id,
            id=order_id,
        )
