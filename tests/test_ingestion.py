"""Tests for the ingestion pipeline."""

import pytest

from web_rag.config import AppConfig, ChunkConfig
from web_rag.context import AppContext
from web_rag.errors import ConfigError, ExtractionError, StoreError, ValidationError
from web_rag.ingestion import index_web_page

_URL = "https://example.com/paris"


class TestIndexWebPage:
    @pytest.mark.asyncio
    async def test_indexes_extracted_text(self, context, extractor, store, sample_text) -> None:
        extractor.text = sample_text

        result = await index_web_page(context, _URL)

        assert extractor.calls == [_URL]
        assert result.url == _URL
        assert result.documents == 1
        [documents] = store.written
        assert documents[0].content == sample_text
        assert documents[0].metadata == {"url": _URL}

    @pytest.mark.asyncio
    async def test_long_page_is_chunked(self, context, extractor, store) -> None:
        extractor.text = "Sentence number one. " * 200

        result = await index_web_page(context, _URL)

        [documents] = store.written
        assert result.documents == len(documents) > 1
        assert all(len(d.content) <= 1024 for d in documents)
        assert all(d.metadata["url"] == _URL for d in documents)

    @pytest.mark.asyncio
    async def test_empty_article_writes_zero_documents(self, context, extractor, store) -> None:
        extractor.text = ""

        result = await index_web_page(context, _URL)

        assert result.documents == 0
        assert store.written == [[]]

    @pytest.mark.asyncio
    async def test_invalid_url_fails_before_extraction(self, context, extractor) -> None:
        with pytest.raises(ValidationError):
            await index_web_page(context, "not-a-url")

        assert extractor.calls == []

    @pytest.mark.asyncio
    async def test_extraction_error_propagates(self, context, extractor, store) -> None:
        extractor.error = ExtractionError("HTTP 500 for url")

        with pytest.raises(ExtractionError):
            await index_web_page(context, _URL)

        assert store.written == []

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, context, extractor, store) -> None:
        extractor.text = "Some text."
        store.error = StoreError("unauthorized")

        with pytest.raises(StoreError, match="unauthorized"):
            await index_web_page(context, _URL)

    @pytest.mark.asyncio
    async def test_uses_configured_chunking(self, extractor, store, generator) -> None:
        config = AppConfig(chunk=ChunkConfig(min_length=100, max_length=50, overlap=0))
        context = AppContext(config, extractor, store, generator)
        extractor.text = "text"

        with pytest.raises(ConfigError):
            await index_web_page(context, _URL)
