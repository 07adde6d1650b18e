# src/roast_kit/sources/config.py

from dataclasses import dataclass
from typing import Literal

SourceKind = Literal["file", "http", "text"]


@dataclass(frozen=True)
class SourceConfig:
    """Configuration for document sources.

    Immutable. Explicit. No magic defaults from environment.
    """

    kind: SourceKind
    location: str  # Path, URL, or the document itself for kind="text"
    timeout: float = 15.0  # http only
    encoding: str = "utf-8"
