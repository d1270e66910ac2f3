from __future__ import annotations

from .console import ConsoleIO, ScriptedIO

__all__ = ["ConsoleIO", "ScriptedIO"]
