from roast_kit.observability import names
from roast_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentSource


class TextSource(DocumentSource):
    """Serves text already held in memory. Never fails."""

    kind = "text"

    def __init__(
        self,
        text: str,
        location: str = "<text>",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._text = text
        self.location = location
        self.metrics_hook = metrics_hook

    async def fetch(self) -> str:
        self.metrics_hook.increment(names.ROAST_FETCH_TOTAL, labels={"source": self.kind})
        return self._text
