from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, TextIO


class ConsoleIO:
    """Terminal adapter: prompts on stdout, reads one line from stdin."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def get_input(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("No input available")
        # Only the line terminator is removed; surrounding spaces are part of the name.
        return line.rstrip("\r\n")

    def display_output(self, message: str) -> None:
        self.stdout.write(message + "\n")
        self.stdout.flush()


class ScriptedIO:
    """Adapter that answers prompts from a fixed list and records output."""

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self._inputs: deque[str] = deque(inputs)
        self.prompts: list[str] = []
        self.outputs: list[str] = []

    def get_input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._inputs:
            raise EOFError(f"No scripted answer left for prompt {prompt!r}")
        return self._inputs.popleft()

    def display_output(self, message: str) -> None:
        self.outputs.append(message)
