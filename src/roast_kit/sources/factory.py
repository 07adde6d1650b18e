# src/roast_kit/sources/factory.py

from roast_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentSource
from .config import SourceConfig
from .file import FileSource
from .http import HttpSource
from .text import TextSource


def create_source(
    config: SourceConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> DocumentSource:
    """Create a document source from config.

    Raises:
        ValueError: If kind is unknown.

    Example:
        >>> source = create_source(SourceConfig(kind="file", location="Roast.md"))
        >>> text = await source.fetch()
    """
    if config.kind == "file":
        return FileSource(
            path=config.location,
            encoding=config.encoding,
            metrics_hook=metrics_hook,
        )

    if config.kind == "http":
        return HttpSource(
            url=config.location,
            timeout=config.timeout,
            encoding=config.encoding,
            metrics_hook=metrics_hook,
        )

    if config.kind == "text":
        return TextSource(text=config.location, metrics_hook=metrics_hook)

    raise ValueError(f"Unknown source kind: {config.kind}")
