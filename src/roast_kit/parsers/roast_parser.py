# parsers/roast_parser.py

import logging
from time import monotonic

from roast_kit.observability import names
from roast_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .models import Category, RoastCollection
from .rules import ScanRules

logger = logging.getLogger(__name__)


class RoastParser(DocumentParser):
    """
    Single-pass roast document scanner.
    - Header lines switch mode and are never emitted
    - Category lines are filtered by prefix and minimum length
    - Meme mode keeps lines with the URL prefix
    """

    def __init__(
        self,
        rules: ScanRules | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.rules = rules if rules is not None else ScanRules()
        self.metrics_hook = metrics_hook
        # Checked in this order; the first phrase found wins
        self._headers: list[tuple[str, Category | None]] = [
            (self.rules.english_header.lower(), Category.ENGLISH),
            (self.rules.hinglish_header.lower(), Category.HINGLISH),
            (self.rules.memes_header.lower(), None),
        ]

    def parse(self, text: str) -> RoastCollection:
        start = monotonic()
        result = RoastCollection()

        current_category: Category | None = None
        in_memes = False
        lines = text.split("\n")

        for line in lines:
            trimmed = line.strip()

            header = self._match_header(trimmed)
            if header is not None:
                current_category, in_memes = header
                logger.debug(
                    "Header %r: category=%s, memes=%s",
                    trimmed,
                    current_category,
                    in_memes,
                )
                continue

            if current_category is not None and self._is_content(trimmed):
                result.for_category(current_category).append(trimmed)

            if in_memes and trimmed.startswith(self.rules.url_prefix):
                result.memes.append(trimmed)

        logger.info("Parsed %d English roasts", len(result.english))
        logger.info("Parsed %d Hinglish roasts", len(result.hinglish))
        logger.info("Parsed %d meme links", len(result.memes))

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.ROAST_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.ROAST_LINES_SCANNED, len(lines))
        for label, items in (
            ("english", result.english),
            ("hinglish", result.hinglish),
            ("memes", result.memes),
        ):
            self.metrics_hook.increment(
                names.ROAST_ITEMS_EXTRACTED, len(items), labels={"category": label}
            )
        self.metrics_hook.record_gauge(names.ROAST_COLLECTION_SIZE, len(result))
        return result

    def _match_header(self, trimmed: str) -> tuple[Category | None, bool] | None:
        """
        Returns the (category, in_memes) state a header line switches to,
        or None if the line is not a header.
        """
        lowered = trimmed.lower()
        for phrase, category in self._headers:
            if phrase in lowered:
                return category, category is None
        return None

    def _is_content(self, trimmed: str) -> bool:
        if not trimmed:
            return False
        if trimmed.startswith(self.rules.skip_prefixes):
            return False
        return len(trimmed) > self.rules.min_length


def parse_roasts(text: str, rules: ScanRules | None = None) -> RoastCollection:
    """Scan ``text`` with a fresh parser. Pure; never raises on text input."""
    return RoastParser(rules=rules).parse(text)
