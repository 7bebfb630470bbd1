"""
Top-level Tradier API client.

TradierClient is the single entry point of the package. It builds one
RequestBuilder from the caller's credentials and one HTTP session, and
injects both into every resource client:

- ``market``: quotes, options, history, clock, calendar, search
- ``fundamentals``: company data and financials (beta)
- ``account``: balances, positions, history, gain/loss, orders
- ``streaming``: streaming sessions and market events
"""

import logging
from typing import Iterable, Optional, Union
from urllib.parse import quote

import requests

from . import endpoints
from .account import TradierAccountClient
from .config import TradierConfig
from .fundamentals import TradierFundamentalsClient
from .market import TradierMarketClient
from .models import PRODUCTION_ACCOUNT_TYPE, AccountType
from .request_builder import API_URL, RequestBuilder, join_symbols
from .streaming import TradierStreamingClient

logger = logging.getLogger(__name__)


class TradierClient:
    """
    Client for the Tradier brokerage API.

    Example:
        from tradier import AccountType, TradierClient

        client = TradierClient("my-token", AccountType.API)
        quotes = client.market.get_quotes(["AAPL", "MSFT"])
        clock = client.market.get_clock()

    Several clients with different credentials can live in the same process;
    none of them share state.
    """

    def __init__(
        self,
        access_token: str,
        account_type: Union[AccountType, str] = AccountType.SANDBOX,
        *,
        production_account_type: Union[AccountType, str] = PRODUCTION_ACCOUNT_TYPE,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize Tradier client.

        Args:
            access_token: OAuth bearer token
            account_type: Account type the token belongs to
            production_account_type: Account type routed to the production host
            timeout: Request timeout in seconds (None for no timeout)
            session: HTTP session to use (a new one is created if not provided)

        Raises:
            TradierConfigurationError: If the token is empty or an account type is unknown
        """
        config = TradierConfig(
            access_token=access_token,
            account_type=account_type,
            production_account_type=production_account_type,
            timeout=timeout,
        )
        self._config = config
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._request_builder = RequestBuilder(config)

        self._market = TradierMarketClient(self._request_builder, self._session)
        self._fundamentals = TradierFundamentalsClient(self._request_builder, self._session)
        self._account = TradierAccountClient(self._request_builder, self._session)
        self._streaming = TradierStreamingClient(self._request_builder, self._session)

        logger.info(
            f"TradierClient initialized (account type: {config.account_type.value}, "
            f"host: {self._request_builder.base_url()})"
        )

    @classmethod
    def from_config(
        cls, config: TradierConfig, session: Optional[requests.Session] = None
    ) -> "TradierClient":
        """Create a client from an existing TradierConfig."""
        return cls(
            config.access_token,
            config.account_type,
            production_account_type=config.production_account_type,
            timeout=config.timeout,
            session=session,
        )

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> "TradierClient":
        """Create a client from TRADIER_* environment variables."""
        return cls.from_config(TradierConfig.from_env(), session)

    @property
    def config(self) -> TradierConfig:
        return self._config

    @property
    def request_builder(self) -> RequestBuilder:
        return self._request_builder

    @property
    def market(self) -> TradierMarketClient:
        return self._market

    @property
    def fundamentals(self) -> TradierFundamentalsClient:
        return self._fundamentals

    @property
    def account(self) -> TradierAccountClient:
        return self._account

    @property
    def streaming(self) -> TradierStreamingClient:
        return self._streaming

    @staticmethod
    def authorization_url(
        client_id: str, scopes: Union[Iterable[str], str], state: str
    ) -> str:
        """
        Build the OAuth authorization URL to redirect a user to.

        Only the URL is built; the OAuth code and token exchange happen
        outside this client.

        Args:
            client_id: OAuth client id of the application
            scopes: Requested scopes (e.g. ["read", "market"])
            state: Opaque value echoed back on the redirect

        Returns:
            Absolute authorization URL on the production host
        """
        path = endpoints.OAUTH_AUTHORIZE.format(
            client_id=quote(client_id, safe=""),
            scopes=quote(join_symbols(scopes), safe=","),
            state=quote(state, safe=""),
        )
        return f"{API_URL}{path}"

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "TradierClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
