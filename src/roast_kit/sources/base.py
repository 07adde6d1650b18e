# src/roast_kit/sources/base.py

from typing import Protocol

from roast_kit.observability.base import MetricsHook


class RetrievalError(Exception):
    """The source document could not be obtained.

    Raised by sources for missing files, network failures, bad HTTP
    statuses and undecodable bytes. The original exception is chained.
    """

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Could not retrieve {location}: {reason}")
        self.location = location
        self.reason = reason


class DocumentSource(Protocol):
    """Protocol for document sources.

    A source fetches the full document text once per call. It never
    retries and never parses.
    """

    kind: str
    location: str
    metrics_hook: MetricsHook

    async def fetch(self) -> str:
        """Return the whole document as text.

        Raises:
            RetrievalError: If the document cannot be read or decoded.
        """
        ...
