import logging
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

Phrase = Annotated[str, Field(min_length=1)]


class ScanRules(BaseModel):
    """Header phrases and line filters used by the roast scanner.

    Defaults match the Roast.md layout. Header phrases are matched as
    case-insensitive substrings of the trimmed line. Empty phrases and
    prefixes are rejected since they would match every line.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    english_header: Phrase = "english roast"
    hinglish_header: Phrase = "hinglish roast"
    memes_header: Phrase = "memes link"
    # "##" is covered by "#" already; kept so custom rule files can list it
    skip_prefixes: tuple[Phrase, ...] = ("#", "---", "##")
    min_length: int = Field(default=10, ge=0)
    url_prefix: Phrase = "http"


def load_rules(path: str | Path) -> ScanRules:
    """Load scan rules from a YAML mapping. An empty file gives the defaults."""
    file_path = Path(path)
    logger.debug("Loading scan rules from %s", file_path)
    with open(file_path) as f:
        data = yaml.safe_load(f) or {}
    rules = ScanRules(**data)
    logger.info("Loaded scan rules from %s", file_path)
    return rules
