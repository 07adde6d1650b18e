# src/roast_kit/loader.py

import logging
from time import monotonic

from roast_kit.observability import names
from roast_kit.observability.base import MetricsHook, NoOpMetricsHook
from roast_kit.parsers.base import DocumentParser
from roast_kit.parsers.models import RoastCollection
from roast_kit.parsers.roast_parser import RoastParser
from roast_kit.parsers.rules import ScanRules
from roast_kit.sources.base import DocumentSource

logger = logging.getLogger(__name__)


class RoastLoader:
    """Fetches a document from a source and scans it.

    The source is called exactly once per load. RetrievalError from the
    source propagates unchanged and nothing is parsed.
    """

    def __init__(
        self,
        source: DocumentSource,
        parser: DocumentParser | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.source = source
        self.parser = parser or RoastParser(metrics_hook=metrics_hook)
        self.metrics_hook = metrics_hook

    async def load(self) -> RoastCollection:
        logger.debug("Loading roasts from %s", self.source.location)
        start = monotonic()

        text = await self.source.fetch()
        collection = self.parser.parse(text)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.ROAST_LOAD_DURATION, elapsed_ms)
        logger.info(
            "Loaded %d items from %s", len(collection), self.source.location
        )
        return collection


async def load_roasts(
    source: DocumentSource,
    *,
    rules: ScanRules | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> RoastCollection:
    """Fetch ``source`` once and scan it with ``rules`` (defaults if None).

    Raises:
        RetrievalError: If the source cannot produce the document.
    """
    parser = RoastParser(rules=rules, metrics_hook=metrics_hook)
    return await RoastLoader(source, parser=parser, metrics_hook=metrics_hook).load()
