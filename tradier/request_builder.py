"""
Request construction for the Tradier API.

The request builder turns an endpoint path template plus arguments into a
ready-to-send request descriptor: the resolved URL, the auth headers and the
query parameters. It performs no network I/O and holds no mutable state, so
one instance is shared by every resource client of a TradierClient.
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Union
from urllib.parse import quote

from .config import TradierConfig
from .exceptions import TradierConfigurationError, TradierStreamNotPermittedError
from .models import AccountType

SANDBOX_URL = "https://sandbox.tradier.com"
API_URL = "https://api.tradier.com"
STREAM_URL = "https://stream.tradier.com"


@dataclass(frozen=True)
class RequestDescriptor:
    """
    A fully resolved request.

    Attributes:
        url: Absolute request URL
        headers: Accept and Authorization headers
        params: Query parameters with unset values already removed
    """

    url: str
    headers: Dict[str, str]
    params: Dict[str, Any] = field(default_factory=dict)


def join_symbols(values: Union[str, Iterable[str], None]) -> Optional[str]:
    """
    Join a list of symbols (or exchanges, types) into a comma-separated string.

    A plain string is returned unchanged and None stays None. An empty list
    gives an empty string.
    """
    if values is None or isinstance(values, str):
        return values
    return ",".join(str(_render_param(value)) for value in values)


def _render_param(value: Any) -> Any:
    # Tradier expects lowercase booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return value


class RequestBuilder:
    """
    Builds URLs, headers and query parameters for Tradier requests.

    Example:
        builder = RequestBuilder(TradierConfig("token", AccountType.API))
        request = builder.build_request(endpoints.MARKET_QUOTES, {"symbols": "AAPL"})
        # request.url == "https://api.tradier.com/v1/markets/quotes"
    """

    def __init__(self, config: TradierConfig):
        self.config = config
        self._headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {config.access_token}",
        }

    def base_url(self, stream: bool = False) -> str:
        """
        Select the host for a request.

        Args:
            stream: Whether the request targets the streaming host

        Returns:
            Host URL without a trailing slash

        Raises:
            TradierStreamNotPermittedError: If streaming is requested with a
                sandbox account
        """
        if stream:
            if self.config.account_type == AccountType.SANDBOX:
                raise TradierStreamNotPermittedError(
                    "Stream cannot be used with a sandbox account"
                )
            return STREAM_URL

        if self.config.is_production:
            return API_URL

        return SANDBOX_URL

    def resolve_url(self, path_template: str, stream: bool = False, **path_params: Any) -> str:
        """
        Resolve an endpoint path template to an absolute URL.

        Args:
            path_template: Endpoint path, optionally with ``{name}`` placeholders
            stream: Whether the request targets the streaming host
            **path_params: Values for the placeholders (URL-quoted on insert)

        Returns:
            Absolute URL

        Raises:
            TradierStreamNotPermittedError: If streaming is requested with a
                sandbox account
            TradierConfigurationError: If a placeholder has no value
        """
        host = self.base_url(stream)

        placeholders = [
            name for _, name, _, _ in string.Formatter().parse(path_template) if name
        ]
        if not placeholders:
            return f"{host}{path_template}"

        missing = [name for name in placeholders if path_params.get(name) in (None, "")]
        if missing:
            raise TradierConfigurationError(
                f"Missing value for path parameter(s) {', '.join(missing)} in {path_template}"
            )

        quoted = {name: quote(str(path_params[name]), safe="") for name in placeholders}
        return f"{host}{path_template.format(**quoted)}"

    def build_headers(self) -> Dict[str, str]:
        """Return the Accept and Authorization headers."""
        return dict(self._headers)

    def build_query_config(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Build the headers and query parameters for a request.

        Parameters whose value is None are omitted. Booleans are sent as
        ``"true"``/``"false"``; everything else, including empty strings,
        is passed through.

        Args:
            params: Query parameters as supplied by the caller

        Returns:
            Dictionary with ``headers`` and ``params`` keys
        """
        query = {
            key: _render_param(value)
            for key, value in (params or {}).items()
            if value is not None
        }
        return {"headers": self.build_headers(), "params": query}

    def build_request(
        self,
        path_template: str,
        params: Optional[Mapping[str, Any]] = None,
        stream: bool = False,
        **path_params: Any,
    ) -> RequestDescriptor:
        """
        Build a request descriptor for an endpoint.

        Args:
            path_template: Endpoint path template
            params: Query parameters
            stream: Whether the request targets the streaming host
            **path_params: Values for the path placeholders

        Returns:
            RequestDescriptor ready for the transport
        """
        url = self.resolve_url(path_template, stream=stream, **path_params)
        query_config = self.build_query_config(params)
        return RequestDescriptor(
            url=url,
            headers=query_config["headers"],
            params=query_config["params"],
        )
