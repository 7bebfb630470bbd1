"""Tests for Tradier market data endpoints."""

import pytest
import requests

from tradier.config import TradierConfig
from tradier.market import TradierMarketClient
from tradier.models import AccountType, HistoryInterval, SessionFilter, TimeSalesInterval
from tradier.request_builder import RequestBuilder


class TestMarketClient:
    """Tests for TradierMarketClient methods."""

    @pytest.fixture
    def client(self, production_builder, mock_session):
        return TradierMarketClient(production_builder, mock_session)

    def _sent(self, mock_session):
        mock_session.request.assert_called_once()
        args, kwargs = mock_session.request.call_args
        return args[0], args[1], kwargs

    def test_get_quotes_joins_symbols(self, client, mock_session):
        """Symbols are sent as a comma-separated string."""
        result = client.get_quotes(["AAPL", "MSFT"])

        method, url, kwargs = self._sent(mock_session)
        assert method == "GET"
        assert url == "https://api.tradier.com/v1/markets/quotes"
        assert kwargs["params"] == {"symbols": "AAPL,MSFT"}
        assert kwargs["headers"] == {
            "Accept": "application/json",
            "Authorization": "Bearer test_token_123",
        }
        assert result == {"ok": True}

    def test_response_body_returned_verbatim(self, client, mock_session, response_factory):
        body = {"quotes": {"quote": {"symbol": "AAPL", "last": 150.25}}}
        mock_session.request.return_value = response_factory(body)

        assert client.get_quotes(["AAPL"]) == body

    def test_get_option_chains(self, client, mock_session):
        client.get_option_chains("SPY", "2019-05-17")

        _, url, kwargs = self._sent(mock_session)
        assert url.endswith("/v1/markets/options/chains")
        assert kwargs["params"] == {"symbol": "SPY", "expiration": "2019-05-17"}

    def test_get_option_chains_with_greeks(self, client, mock_session):
        client.get_option_chains("SPY", "2019-05-17", greeks=True)

        _, _, kwargs = self._sent(mock_session)
        assert kwargs["params"]["greeks"] == "true"

    def test_get_option_strikes(self, client, mock_session):
        client.get_option_strikes("SPY", "2019-05-17")

        _, url, kwargs = self._sent(mock_session)
        assert url.endswith("/v1/markets/options/strikes")
        assert kwargs["params"] == {"symbol": "SPY", "expiration": "2019-05-17"}

    def test_get_option_expirations_defaults(self, client, mock_session):
        """Optional flags are sent with their documented default."""
        client.get_option_expirations("SPX")

        _, url, kwargs = self._sent(mock_session)
        assert url.endswith("/v1/markets/options/expirations")
        assert kwargs["params"] == {
            "symbol": "SPX",
            "includeAllRoots": "false",
            "strikes": "false",
        }

    def test_get_option_expirations_include_all_roots(self, client, mock_session):
        client.get_option_expirations("SPX", include_all_roots=True)

        _, _, kwargs = self._sent(mock_session)
        assert kwargs["params"]["includeAllRoots"] == "true"
        assert kwargs["params"]["strikes"] == "false"

    def test_get_historical_pricing_omits_unset(self, client, mock_session):
        client.get_historical_pricing("AAPL")

        _, url, kwargs = self._sent(mock_session)
        assert url.endswith("/v1/markets/history")
        assert kwargs["params"] == {"symbol": "AAPL"}

    def test_get_historical_pricing_all_params(self, client, mock_session):
        client.get_historical_pricing(
            "AAPL", HistoryInterval.MONTHLY, start="2020-01-01", end="2020-12-31"
        )

        _, _, kwargs = self._sent(mock_session)
        assert kwargs["params"] == {
            "symbol": "AAPL",
            "interval": "monthly",
            "start": "2020-01-01",
            "end": "2020-12-31",
        }

    def test_get_time_and_sales(self, client, mock_session):
        client.get_time_and_sales(
            "AAPL",
            interval=TimeSalesInterval.FIVE_MIN,
            start="2019-05-17 09:30",
            session_filter=SessionFilter.OPEN,
        )

        _, url, kwargs = self._sent(mock_session)
        assert url.endswith("/v1/markets/timesales")
        assert kwargs["params"] == {
            "symbol": "AAPL",
            "interval": "5min",
            "start": "2019-05-17 09:30",
            "session_filter": "open",
        }

    def test_get_time_and_sales_accepts_plain_strings(self, client, mock_session):
        client.get_time_and_sales("AAPL", interval="tick")

        _, _, kwargs = self._sent(mock_session)
        assert kwargs["params"]["interval"] == "tick"

    @pytest.mark.parametrize(
        "method_name, path",
        [
            ("get_etb_securities", "/v1/markets/etb"),
            ("get_clock", "/v1/markets/clock"),
        ],
    )
    def test_endpoints_without_params(self, client, mock_session, method_name, path):
        getattr(client, method_name)()

        _, url, kwargs = self._sent(mock_session)
        assert url == f"https://api.tradier.com{path}"
        assert kwargs["params"] == {}

    def test_get_calendar(self, client, mock_session):
        client.get_calendar(month=2, year=2024)

        _, url, kwargs = self._sent(mock_session)
        assert url.endswith("/v1/markets/calendar")
        assert kwargs["params"] == {"month": 2, "year": 2024}

    def test_search_for_companies(self, client, mock_session):
        client.search_for_companies("alphabet", indexes=False)

        _, url, kwargs = self._sent(mock_session)
        assert url.endswith("/v1/markets/search")
        assert kwargs["params"] == {"q": "alphabet", "indexes": "false"}

    def test_search_for_symbols_empty_exchanges(self, client, mock_session):
        """An empty exchange list is sent as an empty string."""
        client.search_for_symbols("AAPL", [])

        _, url, kwargs = self._sent(mock_session)
        assert url.endswith("/v1/markets/lookup")
        assert kwargs["params"] == {"q": "AAPL", "exchanges": ""}

    def test_search_for_symbols_none_exchanges_still_sent(self, client, mock_session):
        client.search_for_symbols("AAPL", None)

        _, _, kwargs = self._sent(mock_session)
        assert kwargs["params"] == {"q": "AAPL", "exchanges": ""}

    def test_search_for_symbols_joins_lists(self, client, mock_session):
        client.search_for_symbols("goog", ["Q", "N"], types=["stock", "etf"])

        _, _, kwargs = self._sent(mock_session)
        assert kwargs["params"] == {"q": "goog", "exchanges": "Q,N", "types": "stock,etf"}

    def test_sandbox_account_uses_sandbox_host(self, sandbox_builder, mock_session):
        client = TradierMarketClient(sandbox_builder, mock_session)

        client.get_clock()

        _, url, _ = self._sent(mock_session)
        assert url == "https://sandbox.tradier.com/v1/markets/clock"

    def test_http_error_propagates(self, client, mock_session, response_factory):
        """Non-2xx responses surface as requests.HTTPError."""
        mock_session.request.return_value = response_factory({"fault": "x"}, status_code=401)

        with pytest.raises(requests.HTTPError):
            client.get_clock()

        mock_session.request.assert_called_once()

    def test_connection_error_propagates_unmodified(self, client, mock_session):
        error = requests.ConnectionError("connection refused")
        mock_session.request.side_effect = error

        with pytest.raises(requests.ConnectionError) as exc_info:
            client.get_quotes(["AAPL"])

        assert exc_info.value is error
        mock_session.request.assert_called_once()

    def test_timeout_passed_to_transport(self, mock_session):
        builder = RequestBuilder(TradierConfig("token", AccountType.API, timeout=5.0))
        client = TradierMarketClient(builder, mock_session)

        client.get_clock()

        _, _, kwargs = self._sent(mock_session)
        assert kwargs["timeout"] == 5.0
