from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from .routes import mount_keyframes_api


def create_api_app(*, allow_origins: list[str] | None = None) -> FastAPI:
    app = FastAPI(title="ekeys", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins or [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_keyframes_api(app)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/version")
    def version() -> dict[str, str]:
        return {"version": __version__}

    return app
