# Loader
from .loader import RoastLoader, load_roasts

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    Category,
    DocumentParser,
    RoastCollection,
    RoastParser,
    ScanRules,
    load_rules,
    parse_roasts,
)

# Sources
from .sources import (
    DocumentSource,
    FileSource,
    HttpSource,
    RetrievalError,
    SourceConfig,
    TextSource,
    create_source,
)

__all__ = [
    # Loader
    "RoastLoader",
    "load_roasts",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Category",
    "DocumentParser",
    "RoastCollection",
    "RoastParser",
    "ScanRules",
    "load_rules",
    "parse_roasts",
    # Sources
    "DocumentSource",
    "FileSource",
    "HttpSource",
    "RetrievalError",
    "SourceConfig",
    "TextSource",
    "create_source",
]
