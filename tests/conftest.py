"""Shared fixtures for the test suite."""

import pytest

from web_rag.config import AppConfig
from web_rag.context import AppContext
from web_rag.models import Document, GenerationResult


class FakeExtractor:
    """Returns canned text and records the URLs it was asked for."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def extract(self, url: str) -> str:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.text

    async def aclose(self) -> None:
        self.closed = True


class FakeStore:
    """In-memory stand-in for the vector store."""

    def __init__(
        self,
        results: list[Document] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.results = results or []
        self.error = error
        self.written: list[list[Document]] = []
        self.queries: list[tuple[str, int]] = []

    async def write(self, documents) -> int:
        if self.error is not None:
            raise self.error
        self.written.append(list(documents))
        return len(documents)

    async def read(self, query: str, k: int = 3) -> list[Document]:
        self.queries.append((query, k))
        if self.error is not None:
            raise self.error
        return self.results[:k]

    async def count(self) -> int:
        if self.error is not None:
            raise self.error
        return sum(len(batch) for batch in self.written)


class EchoGenerator:
    """Returns its prompt as the answer and records every call."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, str, list[Document]]] = []
        self.closed = False

    async def generate(self, model: str, prompt: str, context=()) -> GenerationResult:
        self.calls.append((model, prompt, list(context)))
        if self.error is not None:
            raise self.error
        return GenerationResult(text=prompt, model=model)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def sample_text() -> str:
    return (
        "Paris is the capital of France. "
        "It is known for the Eiffel Tower and the Louvre museum. "
        "The city lies on the Seine river.\n\n"
        "France is a country in Western Europe. "
        "Its population is around sixty-eight million people."
    )


@pytest.fixture
def paris_documents() -> list[Document]:
    return [
        Document(
            content=f"Paris is the capital of France. Fact {i}.",
            metadata={"url": f"https://example.com/paris/{i}"},
        )
        for i in range(3)
    ]


@pytest.fixture
def extractor() -> FakeExtractor:
    return FakeExtractor()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def generator() -> EchoGenerator:
    return EchoGenerator()


@pytest.fixture
def context(extractor, store, generator) -> AppContext:
    return AppContext(
        config=AppConfig(),
        extractor=extractor,
        store=store,
        generator=generator,
    )
