"""Allow running the package with ``python -m web_rag``."""

from web_rag.cli import main

main()
