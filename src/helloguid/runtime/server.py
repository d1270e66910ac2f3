from __future__ import annotations

import contextlib
import logging
import os
import socket
import threading
import time
import webbrowser
from dataclasses import dataclass, field

import uvicorn

from ..config import normalize_base_url
from ..core.errors import RegistryUnavailable
from ..core.registry import InMemoryRegistry
from ..sdk.client import HelloClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HelloServer:
    host: str
    port: int
    url: str
    registry: InMemoryRegistry = field(repr=False)
    _server: uvicorn.Server | None = field(default=None, repr=False, compare=False)

    def as_client(self, *, timeout_s: float = 10.0) -> HelloClient:
        """Return an HTTP client for this server."""
        return HelloClient(self.url.rstrip("/"), timeout_s=timeout_s)

    def retrieve(self, name: str) -> str | None:
        """Look up `name` in this server's registry without going through HTTP."""
        return self.registry.retrieve(name)

    def generate(self, name: str) -> str:
        """Mint (or return the existing) identifier for `name` in this server's registry."""
        return self.registry.generate(name)

    def shutdown(self) -> None:
        """Ask the background uvicorn server to exit."""
        if self._server is not None:
            self._server.should_exit = True


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if a helloguid server is reachable."""
    return HelloClient(base_url).healthy(timeout_s=timeout_s)


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    open_browser: bool = True,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 10.0,
    registry: InMemoryRegistry | None = None,
) -> HelloServer | HelloClient:
    """Start helloguid (API + web form) with a single Python call.

    Behavior:
    - If HELLOGUID_URL is set, we *attach* to that existing server (client mode) unless
      `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at http://{host}:{port},
      we attach to it (client mode) unless `new_server=True`.
    - Otherwise we start a new local server (server mode) and return a `HelloServer`.

    Notes:
    - `port=0` means "pick a free port", so there's nothing to attach to.
    - The new server runs in a daemon thread; its registry lives as long as the process.
    - Passing `registry` always starts a new server that serves it; attaching would
      leave the injected registry unused.
    """

    env_url = normalize_base_url(os.getenv("HELLOGUID_URL", ""))

    if registry is not None and not new_server:
        logger.info("A registry was passed in; starting a new server instead of attaching")
        new_server = True

    # 1) Try attaching to an explicitly provided server.
    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to existing server at %s", env_url)
            if open_browser:
                webbrowser.open(env_url + "/")
            return HelloClient(env_url)
        logger.warning("HELLOGUID_URL=%s is not reachable; starting a new server", env_url)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to existing server at %s", default_url)
            if open_browser:
                webbrowser.open(default_url + "/")
            return HelloClient(default_url)

    # 3) Start a fresh server.
    if port == 0:
        port = _find_free_port(host)

    if registry is None:
        registry = InMemoryRegistry()
    app = create_app(registry)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + startup_timeout_s
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            server.should_exit = True
            raise RegistryUnavailable(f"Server on {host}:{port} failed to start")
        time.sleep(0.01)

    url = f"http://{host}:{port}/"
    logger.info("helloguid server listening on %s", url)
    if open_browser:
        webbrowser.open(url)

    return HelloServer(host=host, port=port, url=url, registry=registry, _server=server)
