"""Entry point for running GridXO via ``python -m gridxo``."""

from __future__ import annotations

import logging

import uvicorn

from .config import get_settings


def main() -> None:
    """Start the FastAPI-powered GridXO web server."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "gridxo.ui:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
