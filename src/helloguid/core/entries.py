from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field

from .errors import InvalidName


@dataclass(frozen=True)
class RegistryEntry:
    name: str
    identifier: str
    created_at: float = field(default_factory=time.time)

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "identifier": self.identifier,
            "createdAt": float(self.created_at),
        }


def validate_name(name: object) -> str:
    """Return `name` unchanged if it is a usable registry key.

    Keys are case-sensitive and are not stripped, so only the empty string and
    non-string values are rejected.
    """
    if not isinstance(name, str) or not name:
        raise InvalidName(name)
    return name


def new_identifier() -> str:
    """Mint a random 128-bit identifier in 8-4-4-4-12 hex form."""
    return str(uuid.uuid4())


def is_canonical_identifier(value: object) -> bool:
    if not isinstance(value, str) or len(value) != 36:
        return False
    try:
        return str(uuid.UUID(value)) == value
    except ValueError:
        return False
