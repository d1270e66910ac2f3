from __future__ import annotations

import logging
import threading
from typing import Callable, Protocol, runtime_checkable

from .entries import RegistryEntry, is_canonical_identifier, new_identifier, validate_name
from .errors import IdentifierCollision

logger = logging.getLogger(__name__)


@runtime_checkable
class Registry(Protocol):
    """Name -> identifier lookup with read-or-create semantics.

    - `retrieve(name)` returns the stored identifier, or None when absent.
    - `generate(name)` mints and stores an identifier for `name`. Calling it for a
      name that already has one returns the existing identifier unchanged.

    Both raise `InvalidName` for an empty or non-string name.
    """

    def retrieve(self, name: str) -> str | None: ...

    def generate(self, name: str) -> str: ...


class InMemoryRegistry:
    """Process-scoped registry backed by a dict.

    All reads and writes go through one lock, so `generate` is an atomic
    check-and-set and at most one identifier is ever minted per name.
    """

    def __init__(self, mint: Callable[[], str] = new_identifier) -> None:
        self._lock = threading.RLock()
        self._mint = mint
        self._entries: dict[str, RegistryEntry] = {}
        # identifier -> name, to detect collisions
        self._issued: dict[str, str] = {}

    def retrieve(self, name: str) -> str | None:
        key = validate_name(name)
        with self._lock:
            entry = self._entries.get(key)
        logger.debug("retrieve %r -> %s", key, "hit" if entry is not None else "absent")
        return entry.identifier if entry is not None else None

    def generate(self, name: str) -> str:
        key = validate_name(name)
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                logger.debug("generate %r: already registered, returning existing identifier", key)
                return existing.identifier

            identifier = self._mint()
            if not is_canonical_identifier(identifier):
                raise IdentifierCollision(str(identifier))
            owner = self._issued.get(identifier)
            if owner is not None:
                logger.error("Identifier collision: %s already assigned to %r", identifier, owner)
                raise IdentifierCollision(identifier, owner)

            entry = RegistryEntry(name=key, identifier=identifier)
            self._entries[key] = entry
            self._issued[identifier] = key

        logger.info("Registered %r as %s", key, identifier)
        return identifier

    def get_entry(self, name: str) -> RegistryEntry | None:
        key = validate_name(name)
        with self._lock:
            return self._entries.get(key)

    def entries(self) -> list[RegistryEntry]:
        with self._lock:
            out = list(self._entries.values())
        # Stable ordering for listings; the mapping itself is unordered.
        out.sort(key=lambda e: e.name)
        return out

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return name in self._entries
