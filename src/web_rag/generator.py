"""Generator — answers a prompt over retrieved context via Ollama."""

import logging
from collections.abc import Sequence

import httpx
import ollama

from web_rag.config import LLMConfig
from web_rag.errors import GenerationError
from web_rag.models import Document, GenerationResult

logger = logging.getLogger(__name__)


def _build_context_string(documents: Sequence[Document]) -> str:
    """Format context documents as ``[url]: content`` blocks."""
    parts = [f"[{doc.url}]: {doc.content}" for doc in documents]
    return "\n\n".join(parts)


def build_user_message(prompt: str, documents: Sequence[Document]) -> str:
    """Append the context documents, if any, to *prompt*."""
    if not documents:
        return prompt
    return (
        f"{prompt}\n\n"
        "Use the following information to complete your task:\n\n"
        f"{_build_context_string(documents)}"
    )


class OllamaGenerator:
    """Single request/response generation against an Ollama server."""

    provider_name = "ollama"

    def __init__(
        self,
        config: LLMConfig | None = None,
        client: ollama.AsyncClient | None = None,
    ) -> None:
        self._config = config or LLMConfig()
        self._owns_client = client is None
        self._client = client or ollama.AsyncClient(host=self._config.host)

    @property
    def default_model(self) -> str:
        return self._config.model

    async def generate(
        self,
        model: str,
        prompt: str,
        context: Sequence[Document] = (),
    ) -> GenerationResult:
        """Ask *model* to respond to *prompt* given *context*.

        Raises:
            GenerationError: If the server is unreachable, rejects the
                request, or returns no content.
        """
        try:
            response = await self._client.chat(
                model=model,
                messages=[
                    {"role": "user", "content": build_user_message(prompt, context)},
                ],
                options={
                    "temperature": self._config.temperature,
                    "num_predict": self._config.max_tokens,
                },
            )
        except ollama.ResponseError as exc:
            raise GenerationError(
                f"Model {model!r} failed (HTTP {exc.status_code}): {exc.error}",
                self.provider_name,
            ) from exc
        except (httpx.HTTPError, ConnectionError) as exc:
            raise GenerationError(
                f"Cannot reach model server: {exc}", self.provider_name
            ) from exc

        text = response["message"]["content"]
        if not text:
            raise GenerationError(
                f"Model {model!r} returned an empty response", self.provider_name
            )

        logger.debug("Generated %d characters with %s", len(text), model)
        return GenerationResult(text=text, model=model)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.close()
