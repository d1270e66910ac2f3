from __future__ import annotations

from ._version import __version__
from .application import NAME_PROMPT, WELCOME_MESSAGE, Application, InputOutput, compose_greeting
from .core import (
    IdentifierCollision,
    InMemoryRegistry,
    InvalidName,
    Registry,
    RegistryEntry,
    RegistryError,
    RegistryUnavailable,
)
from .io import ConsoleIO, ScriptedIO
from .runtime.server import HelloServer, run
from .sdk.client import HelloClient

__all__ = [
    "__version__",
    "run",
    "HelloServer",
    "HelloClient",
    "Application",
    "InputOutput",
    "compose_greeting",
    "WELCOME_MESSAGE",
    "NAME_PROMPT",
    "Registry",
    "InMemoryRegistry",
    "RegistryEntry",
    "RegistryError",
    "InvalidName",
    "RegistryUnavailable",
    "IdentifierCollision",
    "ConsoleIO",
    "ScriptedIO",
]
