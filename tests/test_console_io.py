from __future__ import annotations

import io

import pytest

from helloguid import Application, ConsoleIO, InMemoryRegistry


def test_console_prompts_and_reads_line() -> None:
    out = io.StringIO()
    console = ConsoleIO(stdin=io.StringIO("  Alice \n"), stdout=out)

    assert console.get_input("Name? ") == "  Alice "
    assert out.getvalue() == "Name? "


def test_console_raises_eof_when_input_is_exhausted() -> None:
    console = ConsoleIO(stdin=io.StringIO(""), stdout=io.StringIO())
    with pytest.raises(EOFError):
        console.get_input("Name? ")


def test_console_application_transcript() -> None:
    out = io.StringIO()
    reg = InMemoryRegistry()
    Application(ConsoleIO(stdin=io.StringIO("Alice\r\n"), stdout=out), reg).run()

    lines = out.getvalue().splitlines()
    assert lines[0] == "Welcome to the persistent Hello World application!"
    assert lines[1] == f"Please enter your name: Hello, Alice! Your unique GUID is: {reg.retrieve('Alice')}"
