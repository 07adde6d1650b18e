# src/roast_kit/sources/http.py

import asyncio
import logging
from time import monotonic

import requests

from roast_kit.observability import names
from roast_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentSource, RetrievalError

logger = logging.getLogger(__name__)


class HttpSource(DocumentSource):
    """
    Fetches a document over HTTP(S) with ``requests``.

    - One GET per fetch, no retries
    - Non-2xx responses are retrieval failures
    - Body is decoded with the configured encoding, not the server's guess
    """

    kind = "http"

    def __init__(
        self,
        url: str,
        timeout: float = 15.0,
        encoding: str = "utf-8",
        session: requests.Session | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._encoding = encoding
        self._owns_session = session is None
        self._session = session or requests.Session()
        self.location = url
        self.metrics_hook = metrics_hook
        logger.info("Initialized HttpSource with url=%s, timeout=%s", url, timeout)

    async def fetch(self) -> str:
        start = monotonic()
        logger.debug("Fetching %s", self._url)
        try:
            # requests is blocking; keep it off the event loop
            text = await asyncio.to_thread(self._get)
        except (requests.RequestException, UnicodeDecodeError) as exc:
            logger.error("Failed to fetch %s: %s", self._url, exc)
            self.metrics_hook.increment(
                names.ROAST_FETCH_ERRORS_TOTAL, labels={"source": self.kind}
            )
            raise RetrievalError(self.location, str(exc)) from exc

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.ROAST_FETCH_DURATION, elapsed_ms, labels={"source": self.kind}
        )
        self.metrics_hook.increment(names.ROAST_FETCH_TOTAL, labels={"source": self.kind})
        logger.debug("Fetched %d characters from %s", len(text), self._url)
        return text

    def close(self) -> None:
        """Close the HTTP session if this source created it."""
        if self._owns_session:
            self._session.close()

    async def __aenter__(self) -> "HttpSource":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self) -> str:
        response = self._session.get(self._url, timeout=self._timeout)
        response.raise_for_status()
        return response.content.decode(self._encoding)
