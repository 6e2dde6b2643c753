"""Tests for configuration module."""

import pytest
from pydantic import ValidationError

from web_rag.config import (
    AppConfig,
    ChunkConfig,
    ExtractorConfig,
    LLMConfig,
    ServerConfig,
    VectorStoreConfig,
)


class TestChunkConfig:
    def test_defaults(self) -> None:
        c = ChunkConfig()
        assert c.min_length == 128
        assert c.max_length == 1024
        assert c.overlap == 128

    def test_is_frozen(self) -> None:
        c = ChunkConfig()
        with pytest.raises(ValidationError):
            c.max_length = 999

    def test_rejects_negative_overlap(self) -> None:
        with pytest.raises(ValidationError):
            ChunkConfig(overlap=-1)

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("CHUNK_MAX_LENGTH", "2048")
        assert ChunkConfig().max_length == 2048


class TestExtractorConfig:
    def test_defaults(self) -> None:
        c = ExtractorConfig()
        assert c.timeout == 10.0
        assert "web-rag" in c.user_agent

    def test_rejects_zero_timeout(self) -> None:
        with pytest.raises(ValidationError):
            ExtractorConfig(timeout=0)


class TestVectorStoreConfig:
    def test_defaults(self) -> None:
        c = VectorStoreConfig()
        assert c.collection_name == "rag"
        assert c.api_endpoint is None
        assert c.api_token is None
        assert c.top_k == 3
        assert c.batch_size == 100

    def test_token_is_secret(self) -> None:
        c = VectorStoreConfig(api_token="s3cret")
        assert "s3cret" not in repr(c)
        assert c.api_token.get_secret_value() == "s3cret"

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("VS_COLLECTION_NAME", "pages")
        monkeypatch.setenv("VS_API_ENDPOINT", "https://chroma.example.com")
        c = VectorStoreConfig()
        assert c.collection_name == "pages"
        assert c.api_endpoint == "https://chroma.example.com"

    def test_rejects_zero_top_k(self) -> None:
        with pytest.raises(ValidationError):
            VectorStoreConfig(top_k=0)

    def test_rejects_zero_batch_size(self) -> None:
        with pytest.raises(ValidationError):
            VectorStoreConfig(batch_size=0)


class TestLLMConfig:
    def test_defaults(self) -> None:
        c = LLMConfig()
        assert c.model == "gemma3:1b"
        assert c.host is None
        assert c.temperature == 0.3
        assert c.max_tokens == 512

    def test_rejects_temperature_above_max(self) -> None:
        with pytest.raises(ValidationError):
            LLMConfig(temperature=2.1)

    def test_rejects_zero_max_tokens(self) -> None:
        with pytest.raises(ValidationError):
            LLMConfig(max_tokens=0)


class TestServerConfig:
    def test_rejects_port_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)


class TestAppConfig:
    def test_defaults(self) -> None:
        c = AppConfig()
        assert isinstance(c.chunk, ChunkConfig)
        assert isinstance(c.extractor, ExtractorConfig)
        assert isinstance(c.vector_store, VectorStoreConfig)
        assert isinstance(c.llm, LLMConfig)
        assert isinstance(c.server, ServerConfig)

    def test_custom_nested(self) -> None:
        c = AppConfig(llm=LLMConfig(model="llama3"))
        assert c.llm.model == "llama3"

    def test_is_frozen(self) -> None:
        c = AppConfig()
        with pytest.raises(ValidationError):
            c.llm = LLMConfig(model="other")
