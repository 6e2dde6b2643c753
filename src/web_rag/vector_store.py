"""Vector store — ChromaDB collection access and semantic search."""

import asyncio
import logging
import uuid
from collections.abc import Sequence
from urllib.parse import urlparse

import chromadb
from chromadb.api import ClientAPI
from chromadb.config import Settings
from chromadb.utils import embedding_functions

from web_rag.config import VectorStoreConfig
from web_rag.errors import RetrievalError, StoreError
from web_rag.models import Document

logger = logging.getLogger(__name__)

# Module-level cache to avoid re-creating the embedding function repeatedly.
_embedding_fn_cache: dict[str, object] = {}


def get_client(config: VectorStoreConfig | None = None) -> ClientAPI:
    """Return a ChromaDB client for the configured backend.

    A hosted server is used when ``api_endpoint`` is set, authenticating
    with ``api_token`` as a bearer token. Otherwise a local persistent
    database is opened at ``db_path``.

    Args:
        config: Vector store settings. Uses defaults if not provided.

    Returns:
        A connected ChromaDB client.
    """
    cfg = config or VectorStoreConfig()
    settings = Settings(anonymized_telemetry=False)

    if not cfg.api_endpoint:
        return chromadb.PersistentClient(path=cfg.db_path, settings=settings)

    endpoint = urlparse(cfg.api_endpoint)
    ssl = endpoint.scheme == "https"
    headers = {}
    if cfg.api_token is not None:
        headers["Authorization"] = f"Bearer {cfg.api_token.get_secret_value()}"

    return chromadb.HttpClient(
        host=endpoint.hostname or "localhost",
        port=endpoint.port or (443 if ssl else 8000),
        ssl=ssl,
        headers=headers,
        settings=settings,
    )


def get_embedding_function(
    model_name: str = "all-MiniLM-L6-v2",
) -> embedding_functions.SentenceTransformerEmbeddingFunction:
    """Return a cached SentenceTransformer embedding function.

    The model is loaded only once per model name, regardless of how
    many times this function is called.
    """
    if model_name not in _embedding_fn_cache:
        _embedding_fn_cache[model_name] = (
            embedding_functions.SentenceTransformerEmbeddingFunction(
                model_name=model_name,
            )
        )
    return _embedding_fn_cache[model_name]  # type: ignore[return-value]


def get_or_create_collection(
    client: ClientAPI,
    config: VectorStoreConfig | None = None,
) -> chromadb.Collection:
    """Get or create the configured collection with cosine similarity."""
    cfg = config or VectorStoreConfig()
    ef = get_embedding_function(cfg.embedding_model)
    return client.get_or_create_collection(
        name=cfg.collection_name,
        embedding_function=ef,
        metadata={"hnsw:space": "cosine"},
    )


def _parse_results(results: dict) -> list[Document]:
    """Convert a raw ChromaDB query result into Documents, best match first."""
    documents = (results.get("documents") or [[]])[0]
    metadatas = (results.get("metadatas") or [[]])[0]

    return [
        Document(content=doc, metadata=dict(meta or {}))
        for doc, meta in zip(documents, metadatas)
    ]


class ChromaVectorStore:
    """Async facade over a ChromaDB collection.

    ChromaDB's client is blocking, so every call runs in a worker
    thread. Library errors are translated into :class:`StoreError`
    (writes) and :class:`RetrievalError` (reads).
    """

    provider_name = "chromadb"

    def __init__(
        self,
        collection: chromadb.Collection,
        batch_size: int = 100,
    ) -> None:
        self._collection = collection
        self._batch_size = batch_size

    @classmethod
    def from_config(cls, config: VectorStoreConfig | None = None) -> "ChromaVectorStore":
        cfg = config or VectorStoreConfig()
        try:
            client = get_client(cfg)
            collection = get_or_create_collection(client, cfg)
        except Exception as exc:
            raise StoreError(
                f"Cannot open collection {cfg.collection_name!r}: {exc}",
                cls.provider_name,
            ) from exc
        return cls(collection, batch_size=cfg.batch_size)

    @property
    def collection_name(self) -> str:
        return self._collection.name

    def _add(self, documents: Sequence[Document]) -> None:
        ids = [uuid.uuid4().hex for _ in documents]
        texts = [d.content for d in documents]
        metadatas = [dict(d.metadata) for d in documents]

        for start in range(0, len(documents), self._batch_size):
            end = start + self._batch_size
            self._collection.add(
                ids=ids[start:end],
                documents=texts[start:end],
                metadatas=metadatas[start:end],
            )

    async def write(self, documents: Sequence[Document]) -> int:
        """Embed and store *documents*.

        Returns:
            Number of documents written (0 for an empty sequence, which
            makes no remote call).

        Raises:
            StoreError: On any ChromaDB failure.
        """
        if not documents:
            return 0

        try:
            await asyncio.to_thread(self._add, documents)
        except Exception as exc:
            raise StoreError(
                f"Failed to write {len(documents)} documents: {exc}",
                self.provider_name,
            ) from exc

        logger.info(
            "Added %d documents to collection %s", len(documents), self.collection_name
        )
        return len(documents)

    async def read(self, query: str, k: int = 3) -> list[Document]:
        """Return up to *k* stored documents most similar to *query*.

        Raises:
            RetrievalError: On any ChromaDB failure.
        """
        try:
            results = await asyncio.to_thread(
                self._collection.query, query_texts=[query], n_results=k
            )
        except Exception as exc:
            raise RetrievalError(
                f"Query failed: {exc}", self.provider_name
            ) from exc

        documents = _parse_results(results)
        logger.debug("Retrieved %d documents for query", len(documents))
        return documents

    async def count(self) -> int:
        try:
            return await asyncio.to_thread(self._collection.count)
        except Exception as exc:
            raise RetrievalError(
                f"Count failed: {exc}", self.provider_name
            ) from exc
