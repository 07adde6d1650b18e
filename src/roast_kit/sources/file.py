# src/roast_kit/sources/file.py

import asyncio
import logging
from pathlib import Path
from time import monotonic

from roast_kit.observability import names
from roast_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentSource, RetrievalError

logger = logging.getLogger(__name__)


class FileSource(DocumentSource):
    """Reads a document from the local filesystem."""

    kind = "file"

    def __init__(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._path = Path(path)
        self._encoding = encoding
        self.location = str(self._path)
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized FileSource with path=%s, encoding=%s", self._path, encoding
        )

    async def fetch(self) -> str:
        start = monotonic()
        logger.debug("Reading %s", self._path)
        try:
            # Read bytes so "\r" is not turned into a line break
            data = await asyncio.to_thread(self._path.read_bytes)
            text = data.decode(self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read %s: %s", self._path, exc)
            self.metrics_hook.increment(
                names.ROAST_FETCH_ERRORS_TOTAL, labels={"source": self.kind}
            )
            raise RetrievalError(self.location, str(exc)) from exc

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.ROAST_FETCH_DURATION, elapsed_ms, labels={"source": self.kind}
        )
        self.metrics_hook.increment(names.ROAST_FETCH_TOTAL, labels={"source": self.kind})
        logger.debug("Read %d characters from %s", len(text), self._path)
        return text
