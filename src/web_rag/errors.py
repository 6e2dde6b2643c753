"""Exception hierarchy for the RAG service.

Every error carries a human-readable ``message`` and an optional
``provider_name`` naming the external collaborator that failed
(``"web_extractor"``, ``"chromadb"``, ``"ollama"``)::

    WebRagError
    +-- ValidationError   (bad caller input, raised before any I/O)
    +-- ConfigError       (invalid chunking parameters)
    +-- ExtractionError   (page fetch failed)
    +-- StoreError        (vector store write failed)
    |   +-- RetrievalError  (vector store query failed)
    +-- GenerationError   (model call failed or was blocked)

Pipelines never catch these; they propagate to the caller, which maps
them to user-visible output (HTTP status codes, CLI messages).
"""


class WebRagError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ValidationError(WebRagError):
    """Raised when an operation's input has the wrong shape."""


class ConfigError(WebRagError):
    """Raised when chunking parameters are inconsistent."""


class ExtractionError(WebRagError):
    """Raised when a web page cannot be fetched."""


class StoreError(WebRagError):
    """Raised when writing to the vector store fails."""


class RetrievalError(StoreError):
    """Raised when querying the vector store fails."""


class GenerationError(WebRagError):
    """Raised when the generative model call fails or returns nothing."""
