from __future__ import annotations

from .entries import RegistryEntry, is_canonical_identifier, new_identifier, validate_name
from .errors import IdentifierCollision, InvalidName, RegistryError, RegistryUnavailable
from .registry import InMemoryRegistry, Registry

__all__ = [
    "RegistryEntry",
    "validate_name",
    "new_identifier",
    "is_canonical_identifier",
    "RegistryError",
    "InvalidName",
    "RegistryUnavailable",
    "IdentifierCollision",
    "Registry",
    "InMemoryRegistry",
]
