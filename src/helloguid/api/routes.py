from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import FastAPI, HTTPException

from ..core.errors import IdentifierCollision, InvalidName, RegistryError, RegistryUnavailable
from ..core.registry import InMemoryRegistry

logger = logging.getLogger(__name__)


def _raise_http(ex: RegistryError) -> NoReturn:
    if isinstance(ex, InvalidName):
        status = 400
    elif isinstance(ex, IdentifierCollision):
        status = 409
    elif isinstance(ex, RegistryUnavailable):
        status = 503
    else:
        status = 500
    logger.warning("Rejected registry request (%d): %s", status, ex)
    raise HTTPException(status_code=status, detail=str(ex))


def mount_identifier_api(app: FastAPI, registry: InMemoryRegistry) -> None:
    """Expose `registry` as the retrieve/generate protocol.

    - GET  /api/identifier?name=...   -> {"identifier": str | null}
    - POST /api/identifier {"name"}   -> {"identifier": str}
    - GET  /api/identifiers           -> [{"name", "identifier", "createdAt"}, ...]
    """

    @app.get("/api/identifier")
    def retrieve_identifier(name: str | None = None) -> dict:
        if name is None:
            raise HTTPException(status_code=400, detail="Missing query param: name")
        try:
            identifier = registry.retrieve(name)
        except RegistryError as ex:
            _raise_http(ex)
        return {"identifier": identifier}

    @app.post("/api/identifier")
    def generate_identifier(body: dict) -> dict:
        if "name" not in body:
            raise HTTPException(status_code=400, detail="Missing field: name")
        try:
            identifier = registry.generate(body.get("name"))
        except RegistryError as ex:
            _raise_http(ex)
        return {"identifier": identifier}

    @app.get("/api/identifiers")
    def list_identifiers() -> list[dict]:
        return [entry.to_dict() for entry in registry.entries()]
