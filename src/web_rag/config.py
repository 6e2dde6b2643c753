"""Centralized configuration for the RAG service."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChunkConfig(BaseSettings):
    """Text chunking parameters.

    Cross-field consistency is checked by
    :func:`web_rag.text_chunker.validate_chunk_config`, which raises
    :class:`~web_rag.errors.ConfigError`.
    """

    model_config = SettingsConfigDict(env_prefix="CHUNK_", frozen=True)

    min_length: int = Field(default=128, ge=0)
    max_length: int = Field(default=1024, ge=0)
    overlap: int = Field(default=128, ge=0)


class ExtractorConfig(BaseSettings):
    """HTTP settings for fetching web pages."""

    model_config = SettingsConfigDict(env_prefix="EXTRACT_", frozen=True)

    timeout: float = Field(default=10.0, gt=0)
    user_agent: str = "Mozilla/5.0 (compatible; web-rag/0.1)"


class VectorStoreConfig(BaseSettings):
    """ChromaDB vector store settings.

    When ``api_endpoint`` is set the store talks to a hosted ChromaDB
    server over HTTP; otherwise a local persistent database at
    ``db_path`` is used.
    """

    model_config = SettingsConfigDict(env_prefix="VS_", frozen=True)

    collection_name: str = "rag"
    db_path: str = "./chroma_db"
    api_endpoint: str | None = None
    api_token: SecretStr | None = None
    embedding_model: str = "all-MiniLM-L6-v2"
    top_k: int = Field(default=3, gt=0)
    batch_size: int = Field(default=100, gt=0)


class LLMConfig(BaseSettings):
    """Ollama LLM settings."""

    model_config = SettingsConfigDict(env_prefix="LLM_", frozen=True)

    model: str = "gemma3:1b"
    host: str | None = None
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=512, gt=0)


class ServerConfig(BaseSettings):
    """Bind address for the HTTP interface."""

    model_config = SettingsConfigDict(env_prefix="SERVER_", frozen=True)

    host: str = "127.0.0.1"
    port: int = Field(default=8000, gt=0, le=65535)


class AppConfig(BaseSettings):
    """Top-level application configuration."""

    model_config = SettingsConfigDict(frozen=True)

    chunk: ChunkConfig = Field(default_factory=ChunkConfig)
    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    vector_store: VectorStoreConfig = Field(default_factory=VectorStoreConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
