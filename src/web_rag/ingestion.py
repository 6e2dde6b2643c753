"""Ingestion pipeline — extract, chunk, tag and index a web page."""

import logging

from web_rag.context import AppContext
from web_rag.models import IndexResult
from web_rag.text_chunker import chunk_text, tag_chunks
from web_rag.validation import validate_url

logger = logging.getLogger(__name__)


async def index_web_page(context: AppContext, url: str) -> IndexResult:
    """Index the readable text of *url* into the vector store.

    A page without readable content is indexed as zero documents rather
    than treated as a failure. Errors from the collaborators propagate
    unchanged.

    Args:
        context: Application context holding the collaborators.
        url: Absolute http(s) URL of the page.

    Returns:
        The URL and the number of documents written.

    Raises:
        ValidationError: If *url* is not an absolute http(s) URL.
        ExtractionError: If the page cannot be fetched.
        StoreError: If the write to the vector store fails.
    """
    url = validate_url(url).unwrap()

    text = await context.extractor.extract(url)
    chunks = chunk_text(text, context.config.chunk)
    logger.debug("Split %s into %d chunks", url, len(chunks))

    documents = tag_chunks(chunks, {"url": url})
    written = await context.store.write(documents)

    logger.info("Indexed %s (%d documents)", url, written)
    return IndexResult(url=url, documents=written)
