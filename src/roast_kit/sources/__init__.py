from .base import DocumentSource, RetrievalError
from .config import SourceConfig
from .factory import create_source
from .file import FileSource
from .http import HttpSource
from .text import TextSource

__all__ = [
    # Factory
    "create_source",
    # Protocol
    "DocumentSource",
    # Config
    "SourceConfig",
    # Implementations
    "FileSource",
    "HttpSource",
    "TextSource",
    # Errors
    "RetrievalError",
]
