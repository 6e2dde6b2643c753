"""CLI interface for the RAG service."""

import argparse
import asyncio
import logging
import sys

from web_rag import rag_engine
from web_rag.config import AppConfig, LLMConfig
from web_rag.context import create_context
from web_rag.errors import WebRagError
from web_rag.ingestion import index_web_page


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


async def index(urls: list[str], config: AppConfig | None = None) -> int:
    """Index each URL in turn and return the total number of documents.

    Args:
        urls: Absolute http(s) URLs of the pages to index.
        config: Application configuration. Uses defaults if not provided.
    """
    context = create_context(config)
    total = 0
    try:
        for url in urls:
            print(f"\n🌐 Indexing {url}")
            result = await index_web_page(context, url)
            print(f"  Stored {result.documents} documents")
            total += result.documents
    finally:
        await context.aclose()

    print(f"\n✅ Indexing complete! ({total} documents stored)")
    return total


async def ask(question: str, config: AppConfig | None = None) -> str:
    """Answer a single question and print the result."""
    context = create_context(config)
    try:
        answer = await rag_engine.rag_flow(context, question)
    finally:
        await context.aclose()

    print(f"\n{answer}\n")
    return answer


async def chat(config: AppConfig | None = None) -> None:
    """Start an interactive question/answer session.

    Exits on 'quit', 'exit', 'q', EOF, or KeyboardInterrupt. Errors from
    a single question are reported and the session continues.
    """
    context = create_context(config)
    cfg = context.config

    print(f"\n📚 RAG Chat (collection: {cfg.vector_store.collection_name})")
    print(f"🤖 Using Ollama model: {cfg.llm.model}")
    print("\nType your question (or 'quit' to exit):\n")

    try:
        while True:
            try:
                question = input("You: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nGoodbye!")
                break

            if not question:
                continue
            if question.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            try:
                answer = await rag_engine.rag_flow(context, question)
            except WebRagError as exc:
                print(f"\n⚠️  {exc}\n")
                continue
            print(f"\nAssistant:\n{answer}\n")
    finally:
        await context.aclose()


def serve(config: AppConfig | None = None) -> None:
    """Run the HTTP interface with uvicorn."""
    import uvicorn

    cfg = config or AppConfig()
    uvicorn.run("web_rag.web:app", host=cfg.server.host, port=cfg.server.port)


def main() -> None:
    """CLI entry point — parse arguments and dispatch to a sub-command."""
    parser = argparse.ArgumentParser(
        description="Web RAG — index web pages and ask questions about them",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # index
    index_p = subparsers.add_parser("index", help="Index one or more web pages")
    index_p.add_argument("urls", nargs="+", help="Page URLs")

    # ask
    ask_p = subparsers.add_parser("ask", help="Answer a single question")
    ask_p.add_argument("question", help="Question text")
    ask_p.add_argument("--model", type=str, default=None, help="Ollama model name")

    # chat
    chat_p = subparsers.add_parser("chat", help="Start interactive chat")
    chat_p.add_argument("--model", type=str, default=None, help="Ollama model name")

    # serve
    subparsers.add_parser("serve", help="Run the HTTP API")

    args = parser.parse_args()
    _setup_logging(args.verbose)

    cfg = AppConfig()
    if getattr(args, "model", None):
        cfg = AppConfig(llm=LLMConfig(model=args.model))

    try:
        if args.command == "index":
            asyncio.run(index(args.urls, cfg))
        elif args.command == "ask":
            asyncio.run(ask(args.question, cfg))
        elif args.command == "chat":
            asyncio.run(chat(cfg))
        elif args.command == "serve":
            serve(cfg)
        else:
            parser.print_help()
            sys.exit(1)
    except WebRagError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
