from __future__ import annotations


class RegistryError(Exception):
    """Base class for every failure surfaced by a registry."""


class InvalidName(RegistryError, ValueError):
    """Raised when a name is empty or not text."""

    def __init__(self, name: object, message: str | None = None) -> None:
        self.name = name
        if message is None:
            if isinstance(name, str):
                message = "name cannot be empty"
            else:
                message = f"name must be a string, got {type(name).__name__}"
        super().__init__(message)


class RegistryUnavailable(RegistryError):
    """Raised when the backing store or the transport to it fails."""


class IdentifierCollision(RegistryError):
    """Raised when a freshly minted identifier is already taken or malformed."""

    def __init__(
        self,
        identifier: str | None,
        existing_name: str | None = None,
        message: str | None = None,
    ) -> None:
        self.identifier = identifier
        self.existing_name = existing_name
        if message is None:
            if existing_name is None:
                message = f"Minted identifier {identifier!r} is not a canonical GUID"
            else:
                message = f"Identifier {identifier!r} is already assigned to {existing_name!r}"
        super().__init__(message)
