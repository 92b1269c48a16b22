from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app


def create_app() -> FastAPI:
    """Create the full app served by `ekeys serve`."""
    return create_api_app()


# Convenience for uvicorn: `uvicorn ekeys.runtime.app:app`
app = create_app()
