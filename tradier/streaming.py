"""
Tradier streaming endpoints.

Streaming is a two-step flow: create a session on the REST host, then open
the event stream on the streaming host with the returned session id. The
streaming host is not available to sandbox accounts.
"""

import codecs
import json
import logging
from typing import Any, Iterable, Iterator, Optional

from . import endpoints
from .base import BaseResourceClient
from .request_builder import RequestDescriptor, join_symbols

logger = logging.getLogger(__name__)


class TradierStreamingClient(BaseResourceClient):
    """
    Client for ``/v1/markets/events``.

    Example:
        session = client.streaming.create_session()
        session_id = session["stream"]["sessionid"]
        for event in client.streaming.stream_quotes(session_id, ["SPY"]):
            print(event)
    """

    def create_session(self) -> Any:
        """
        Create a streaming session.

        Tradier only accepts POST for this endpoint. The session id in the
        response is valid for five minutes.
        """
        return self._post(endpoints.STREAMING_CREATE_SESSION)

    def stream_quotes(
        self,
        session_id: str,
        symbols: Iterable[str],
        filter: Optional[Iterable[str]] = None,
        linebreak: bool = True,
    ) -> Iterator[Any]:
        """
        Stream market events for a list of symbols.

        The URL is resolved before the generator is returned, so a sandbox
        account fails here rather than on first iteration.

        Args:
            session_id: Session id from ``create_session``
            symbols: Symbols to subscribe to
            filter: Event types to receive (trade, quote, summary, timesale,
                tradex); all types when None
            linebreak: Ask Tradier to end each event with a newline. Events
                are parsed the same way either way.

        Returns:
            Iterator of parsed events

        Raises:
            TradierStreamNotPermittedError: If the account is a sandbox account
        """
        request = self.request_builder.build_request(
            endpoints.STREAMING_QUOTES,
            {
                "sessionid": session_id,
                "symbols": join_symbols(symbols),
                "filter": join_symbols(filter),
                "linebreak": linebreak,
            },
            stream=True,
        )
        return self._iter_events(request)

    def _iter_events(self, request: RequestDescriptor) -> Iterator[Any]:
        response = self._send("GET", request, stream=True)
        try:
            yield from _decode_events(response.iter_content(chunk_size=None))
        finally:
            logger.debug(f"Closing stream {request.url}")
            response.close()


def _decode_events(chunks: Iterable[bytes]) -> Iterator[Any]:
    """
    Parse consecutive JSON values from a byte stream.

    Events may be separated by newlines or sent back to back, and a single
    event may span several chunks.
    """
    decoder = json.JSONDecoder()
    text_decoder = codecs.getincrementaldecoder("utf-8")()
    buffer = ""

    for chunk in chunks:
        buffer += text_decoder.decode(chunk)
        while True:
            buffer = buffer.lstrip()
            if not buffer:
                break
            try:
                event, end = decoder.raw_decode(buffer)
            except json.JSONDecodeError:
                # incomplete event, wait for the next chunk
                break
            yield event
            buffer = buffer[end:]

    buffer = (buffer + text_decoder.decode(b"", final=True)).strip()
    if buffer:
        yield json.loads(buffer)
