# tests/unit/sources/test_factory.py

import pytest

from roast_kit.sources import SourceConfig, create_source
from roast_kit.sources.file import FileSource
from roast_kit.sources.http import HttpSource
from roast_kit.sources.text import TextSource


class TestFactory:
    def test_create_file_source(self) -> None:
        source = create_source(SourceConfig(kind="file", location="Roast.md"))

        assert isinstance(source, FileSource)
        assert source.location == "Roast.md"

    def test_create_http_source(self) -> None:
        config = SourceConfig(
            kind="http", location="https://example.com/Roast.md", timeout=2.0
        )
        source = create_source(config)

        assert isinstance(source, HttpSource)
        assert source._timeout == 2.0

    @pytest.mark.asyncio
    async def test_create_text_source(self) -> None:
        source = create_source(SourceConfig(kind="text", location="inline text"))

        assert isinstance(source, TextSource)
        assert await source.fetch() == "inline text"

    def test_unknown_kind_raises(self) -> None:
        config = SourceConfig(kind="ftp", location="ftp://x")  # type: ignore
        with pytest.raises(ValueError, match="Unknown source kind"):
            create_source(config)

    def test_config_is_frozen(self) -> None:
        config = SourceConfig(kind="file", location="Roast.md")
        with pytest.raises(AttributeError):
            config.location = "Other.md"  # type: ignore
