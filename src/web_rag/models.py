"""Domain models for the RAG service."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Document:
    """A chunk of source text with the metadata it was tagged with."""

    content: str
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return self.metadata.get("url", "unknown")


@dataclass(frozen=True)
class GenerationResult:
    """The text returned by the generative model."""

    text: str
    model: str = ""


@dataclass(frozen=True)
class IndexResult:
    """Summary of a completed web page ingestion."""

    url: str
    documents: int = 0
