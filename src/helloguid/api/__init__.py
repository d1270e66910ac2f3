from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .._version import __version__
from ..core.registry import InMemoryRegistry
from .routes import mount_identifier_api


def create_api_app(registry: InMemoryRegistry | None = None) -> FastAPI:
    if registry is None:
        registry = InMemoryRegistry()

    app = FastAPI(title="helloguid", version=__version__)
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_identifier_api(app, registry)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app


__all__ = ["create_api_app", "mount_identifier_api"]
