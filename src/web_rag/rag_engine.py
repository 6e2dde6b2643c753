"""RAG engine — retrieves context from the vector store and asks the
model to answer from it."""

import logging

from web_rag.context import AppContext
from web_rag.validation import validate_question

logger = logging.getLogger(__name__)

_INSTRUCTIONS = (
    "You are a helpful AI assistant that can answer questions. "
    "Use only the context provided to answer the question. "
    "If you don't know, do not make up an answer."
)


def build_prompt(question: str) -> str:
    """Interpolate the literal *question* into the fixed answer template."""
    return f"{_INSTRUCTIONS}\n\nQuestion: {question}"


async def rag_flow(context: AppContext, question: str) -> str:
    """Answer *question* from the documents most similar to it.

    An empty retrieval is not an error: the model is still asked and is
    expected to decline.

    Args:
        context: Application context holding the collaborators.
        question: The user's natural-language question.

    Returns:
        The model's answer text, unmodified.

    Raises:
        ValidationError: If *question* is empty.
        RetrievalError: If the vector store query fails.
        GenerationError: If the model call fails.
    """
    question = validate_question(question).unwrap()

    documents = await context.store.read(question, k=context.config.vector_store.top_k)
    logger.debug("Retrieved %d context documents", len(documents))

    result = await context.generator.generate(
        context.config.llm.model,
        build_prompt(question),
        documents,
    )

    logger.info("Answered question with %d context documents", len(documents))
    return result.text
