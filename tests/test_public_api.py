from __future__ import annotations


def test_package_paths_work() -> None:
    from helloguid.api import create_api_app
    from helloguid.api.routes import mount_identifier_api
    from helloguid.core.registry import InMemoryRegistry, Registry
    from helloguid.io.console import ConsoleIO, ScriptedIO
    from helloguid.runtime.server import HelloServer, run
    from helloguid.runtime.web import mount_frontend
    from helloguid.sdk.client import HelloClient

    assert create_api_app is not None
    assert mount_identifier_api is not None
    assert InMemoryRegistry is not None
    assert Registry is not None
    assert ConsoleIO is not None
    assert ScriptedIO is not None
    assert HelloServer is not None
    assert run is not None
    assert mount_frontend is not None
    assert HelloClient is not None


def test_top_level_exports() -> None:
    import helloguid

    for name in helloguid.__all__:
        assert getattr(helloguid, name) is not None
