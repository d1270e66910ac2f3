from __future__ import annotations

from .client import HelloClient

__all__ = ["HelloClient"]
