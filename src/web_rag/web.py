"""FastAPI web interface for the RAG service."""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from web_rag import rag_engine
from web_rag.config import AppConfig
from web_rag.context import AppContext, create_context
from web_rag.errors import (
    ConfigError,
    ExtractionError,
    GenerationError,
    StoreError,
    ValidationError,
    WebRagError,
)
from web_rag.ingestion import index_web_page

logger = logging.getLogger(__name__)

_config = AppConfig()

# Checked in order, so subclasses must precede their bases.
_STATUS_CODES: list[tuple[type[WebRagError], int]] = [
    (ValidationError, 422),
    (ConfigError, 500),
    (ExtractionError, 502),
    (StoreError, 502),
    (GenerationError, 502),
]


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Build the application context on startup and close it on shutdown."""
    context = create_context(_config)
    application.state.context = context
    yield
    await context.aclose()


app = FastAPI(
    title="Web RAG",
    lifespan=lifespan,
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
)

router = APIRouter(prefix="/api/v1")


def get_context(request: Request) -> AppContext:
    """FastAPI dependency — return the application context from app state."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return context


@app.exception_handler(WebRagError)
async def _handle_error(request: Request, exc: WebRagError) -> JSONResponse:
    status_code = next(
        (code for cls, code in _STATUS_CODES if isinstance(exc, cls)), 500
    )
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


class IndexRequest(BaseModel):
    url: str


class IndexResponse(BaseModel):
    status: str
    url: str
    documents: int


class AskRequest(BaseModel):
    question: str


class AskResponse(BaseModel):
    answer: str


class HealthResponse(BaseModel):
    status: str
    collection: str
    documents: int


@router.get("/health", response_model=HealthResponse)
async def api_health(context: AppContext = Depends(get_context)):
    try:
        documents = await context.store.count()
        status = "healthy"
    except StoreError:
        documents = 0
        status = "degraded"

    return HealthResponse(
        status=status,
        collection=context.config.vector_store.collection_name,
        documents=documents,
    )


@router.post("/index", response_model=IndexResponse)
async def api_index(body: IndexRequest, context: AppContext = Depends(get_context)):
    result = await index_web_page(context, body.url)
    return IndexResponse(status="ok", url=result.url, documents=result.documents)


@router.post("/ask", response_model=AskResponse)
async def api_ask(body: AskRequest, context: AppContext = Depends(get_context)):
    answer = await rag_engine.rag_flow(context, body.question)
    return AskResponse(answer=answer)


app.include_router(router)
