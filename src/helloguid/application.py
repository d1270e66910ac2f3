from __future__ import annotations

from typing import Protocol, runtime_checkable

from .core.registry import Registry

WELCOME_MESSAGE = "Welcome to the persistent Hello World application!"
NAME_PROMPT = "Please enter your name: "


@runtime_checkable
class InputOutput(Protocol):
    """What the application needs from a UI: ask for text and show text."""

    def get_input(self, prompt: str) -> str: ...

    def display_output(self, message: str) -> None: ...


def compose_greeting(name: str, identifier: str) -> str:
    return "Hello, " + name + "! Your unique GUID is: " + identifier


class Application:
    """Greets the user with the identifier registered for their name.

    The registry may be local (`InMemoryRegistry`) or remote (`HelloClient`);
    the flow is the same. Errors from the UI or the registry are not caught
    here: the run aborts and the caller decides how to report it.
    """

    def __init__(self, io: InputOutput, registry: Registry) -> None:
        self.io = io
        self.registry = registry

    def run(self) -> str:
        self.io.display_output(WELCOME_MESSAGE)
        name = self.io.get_input(NAME_PROMPT)

        identifier = self.registry.retrieve(name)
        if identifier is None:
            identifier = self.registry.generate(name)

        greeting = compose_greeting(name, identifier)
        self.io.display_output(greeting)
        return greeting
