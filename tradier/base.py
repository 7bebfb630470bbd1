"""
Base class for Tradier resource clients.

Every resource client (market, fundamentals, account, streaming) shares a
single RequestBuilder and a single requests.Session, both injected by
TradierClient. Each public method maps to exactly one HTTP call:

- The request builder resolves the URL, headers and query parameters
- The session sends the request
- ``raise_for_status()`` turns non-2xx responses into ``requests.HTTPError``
- The parsed JSON body is returned untouched

There is no retry, caching or error translation; transport errors reach the
caller exactly as requests raises them.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .request_builder import RequestBuilder, RequestDescriptor

logger = logging.getLogger(__name__)

# Query parameters that carry credentials and are masked in debug logs
REDACTED_PARAMS = frozenset({"sessionid"})


def _loggable_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        key: "***" if key in REDACTED_PARAMS else value
        for key, value in params.items()
    }


class BaseResourceClient:
    """
    Shared HTTP plumbing for Tradier resource clients.

    Subclasses add one method per endpoint and delegate to ``_get`` (or
    ``_post``) with an endpoint template from ``tradier.endpoints``.
    """

    def __init__(
        self,
        request_builder: RequestBuilder,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize resource client.

        Args:
            request_builder: Shared request builder holding the credentials
            session: HTTP session. If not provided a new one is created and
                owned by this client; release it with ``close()``.
        """
        self.request_builder = request_builder
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    @property
    def timeout(self) -> Optional[float]:
        return self.request_builder.config.timeout

    def _send(
        self, method: str, request: RequestDescriptor, stream: bool = False
    ) -> requests.Response:
        logger.debug(f"{method} {request.url}")
        if request.params:
            logger.debug(f"  Params: {_loggable_params(request.params)}")

        response = self.session.request(
            method,
            request.url,
            headers=request.headers,
            params=request.params,
            timeout=self.timeout,
            stream=stream,
        )
        logger.debug(f"Response: {response.status_code}")
        try:
            response.raise_for_status()
        except requests.HTTPError:
            if stream:
                response.close()
            raise
        return response

    def _get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        **path_params: Any,
    ) -> Any:
        """
        Make an authenticated GET request and return the parsed JSON body.

        Args:
            endpoint: Endpoint path template
            params: Query parameters (None values are dropped)
            **path_params: Values for the path placeholders

        Returns:
            Parsed JSON response body

        Raises:
            TradierConfigurationError: If a path placeholder has no value
            requests.HTTPError: If the API responds with a non-2xx status
            requests.RequestException: On connection errors or timeouts
        """
        request = self.request_builder.build_request(endpoint, params, **path_params)
        return self._send("GET", request).json()

    def _post(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        **path_params: Any,
    ) -> Any:
        """Make an authenticated POST request and return the parsed JSON body."""
        request = self.request_builder.build_request(endpoint, params, **path_params)
        return self._send("POST", request).json()
