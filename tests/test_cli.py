from __future__ import annotations

import io

import pytest

from helloguid.__main__ import main


def test_greet_with_local_registry(monkeypatch, capsys) -> None:
    monkeypatch.delenv("HELLOGUID_URL", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("Alice\n"))

    assert main(["greet"]) == 0

    out = capsys.readouterr().out
    assert "Welcome to the persistent Hello World application!" in out
    assert "Hello, Alice! Your unique GUID is: " in out


def test_greet_against_server(monkeypatch, capsys) -> None:
    import helloguid

    server = helloguid.run(host="127.0.0.1", port=0, open_browser=False, new_server=True)
    try:
        g1 = server.generate("Alice")
        monkeypatch.setattr("sys.stdin", io.StringIO("Alice\n"))

        assert main(["greet", "--url", f"{server.host}:{server.port}"]) == 0
        assert f"Hello, Alice! Your unique GUID is: {g1}" in capsys.readouterr().out
    finally:
        server.shutdown()


def test_greet_reports_failures_on_stderr(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main(["greet", "--url", ""]) == 1
    captured = capsys.readouterr()
    assert "error: name cannot be empty" in captured.err
    assert "Hello," not in captured.out


def test_greet_reports_unreachable_server(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("Alice\n"))
    # Port 9 (discard) is not expected to run a helloguid server.
    assert main(["greet", "--url", "http://127.0.0.1:9"]) == 1
    assert "error:" in capsys.readouterr().err


def test_greet_without_input(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["greet", "--url", ""]) == 1
    assert "no name entered" in capsys.readouterr().err


def test_greet_ignores_bad_port_in_environment(monkeypatch, capsys) -> None:
    monkeypatch.setenv("HELLOGUID_PORT", "abc")
    monkeypatch.setattr("sys.stdin", io.StringIO("Alice\n"))

    assert main(["greet", "--url", ""]) == 0
    assert "Hello, Alice! Your unique GUID is: " in capsys.readouterr().out


def _fake_serve(monkeypatch) -> dict:
    import time

    from helloguid import InMemoryRegistry
    from helloguid.runtime.server import HelloServer

    seen: dict = {}

    def fake_run(**kwargs) -> HelloServer:
        seen.update(kwargs)
        url = f"http://{kwargs['host']}:{kwargs['port']}/"
        return HelloServer(host=kwargs["host"], port=kwargs["port"], url=url, registry=InMemoryRegistry())

    def interrupt(seconds: float) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr("helloguid.__main__.run", fake_run)
    monkeypatch.setattr(time, "sleep", interrupt)
    return seen


def test_serve_port_flag_wins_over_bad_environment(monkeypatch, capsys) -> None:
    monkeypatch.setenv("HELLOGUID_PORT", "abc")
    seen = _fake_serve(monkeypatch)

    assert main(["serve", "--port", "9000", "--no-browser"]) == 0
    assert seen["port"] == 9000
    assert seen["new_server"] is True
    assert capsys.readouterr().out.strip() == "http://127.0.0.1:9000/"


def test_serve_uses_environment_port(monkeypatch) -> None:
    monkeypatch.setenv("HELLOGUID_PORT", "9100")
    monkeypatch.setenv("HELLOGUID_HOST", "0.0.0.0")
    seen = _fake_serve(monkeypatch)

    assert main(["serve", "--no-browser"]) == 0
    assert (seen["host"], seen["port"]) == ("0.0.0.0", 9100)


def test_serve_reports_bad_environment_port(monkeypatch, capsys) -> None:
    monkeypatch.setenv("HELLOGUID_PORT", "abc")
    seen = _fake_serve(monkeypatch)

    assert main(["serve", "--no-browser"]) == 1
    assert "error: HELLOGUID_PORT must be an integer" in capsys.readouterr().err
    assert seen == {}


def test_invalid_log_level_flag_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as info:
        main(["--log-level", "foo", "greet"])
    assert info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_invalid_log_level_environment_is_reported(monkeypatch, capsys) -> None:
    monkeypatch.setenv("HELLOGUID_LOG_LEVEL", "foo")
    monkeypatch.setattr("sys.stdin", io.StringIO("Alice\n"))

    assert main(["greet", "--url", ""]) == 1
    assert "error: HELLOGUID_LOG_LEVEL" in capsys.readouterr().err


def test_log_level_flag_is_case_insensitive(monkeypatch, capsys) -> None:
    monkeypatch.setenv("HELLOGUID_LOG_LEVEL", "foo")
    monkeypatch.setattr("sys.stdin", io.StringIO("Alice\n"))

    assert main(["--log-level", "DEBUG", "greet", "--url", ""]) == 0
