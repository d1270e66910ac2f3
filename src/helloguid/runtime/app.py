from __future__ import annotations

import logging

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import InMemoryRegistry
from .web import mount_frontend

logger = logging.getLogger(__name__)


def create_app(registry: InMemoryRegistry | None = None) -> FastAPI:
    """Create the full app: API + (optional) web form.

    Each call owns its own registry unless one is passed in.
    """

    app = create_api_app(registry)

    # If the web form assets are packaged, serve them. Otherwise API-only still works.
    try:
        mount_frontend(app)
    except FileNotFoundError:
        logger.info("Web form assets not found; serving API only")

    return app
