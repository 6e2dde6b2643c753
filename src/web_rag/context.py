"""Application context — the collaborators shared by both pipelines.

The context is built once at process start, treated as read-only while
requests are served, and closed at shutdown. Pipelines receive it as an
explicit argument instead of reaching for module-level clients.
"""

import logging
from dataclasses import dataclass

from web_rag.config import AppConfig
from web_rag.extractor import WebTextExtractor
from web_rag.generator import OllamaGenerator
from web_rag.text_chunker import validate_chunk_config
from web_rag.vector_store import ChromaVectorStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContext:
    config: AppConfig
    extractor: WebTextExtractor
    store: ChromaVectorStore
    generator: OllamaGenerator

    async def aclose(self) -> None:
        try:
            await self.extractor.aclose()
        finally:
            await self.generator.aclose()


def create_context(config: AppConfig | None = None) -> AppContext:
    """Build the collaborators from *config*.

    Raises:
        ConfigError: If the chunking parameters are inconsistent.
        StoreError: If the vector store collection cannot be opened.
    """
    cfg = config or AppConfig()
    validate_chunk_config(cfg.chunk)

    context = AppContext(
        config=cfg,
        extractor=WebTextExtractor(cfg.extractor),
        store=ChromaVectorStore.from_config(cfg.vector_store),
        generator=OllamaGenerator(cfg.llm),
    )
    logger.info(
        "Context ready (collection=%s, model=%s)",
        cfg.vector_store.collection_name,
        cfg.llm.model,
    )
    return context
