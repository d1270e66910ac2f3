from __future__ import annotations

from .app import create_app
from .server import HelloServer, run

__all__ = ["create_app", "HelloServer", "run"]
