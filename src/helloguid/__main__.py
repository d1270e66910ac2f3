from __future__ import annotations

import argparse
import logging
import sys
import time

from .application import Application
from .config import DEFAULT_PORT, LOG_LEVELS, Settings, load_settings, normalize_base_url
from .core.errors import RegistryError
from .core.registry import InMemoryRegistry, Registry
from .io.console import ConsoleIO
from .runtime.server import HelloServer, run
from .sdk.client import HelloClient


def _serve(args: argparse.Namespace, settings: Settings) -> int:
    srv = run(
        host=args.host or settings.host,
        port=settings.port,
        open_browser=not args.no_browser,
        log_level=settings.log_level,
        new_server=True,
    )
    if not isinstance(srv, HelloServer):
        raise RuntimeError(f"Expected a new server, got {srv!r}")
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        srv.shutdown()
    return 0


def _greet(args: argparse.Namespace, settings: Settings) -> int:
    url = normalize_base_url(args.url if args.url is not None else settings.url)
    registry: Registry = HelloClient(url) if url else InMemoryRegistry()

    app = Application(ConsoleIO(), registry)
    try:
        app.run()
    except RegistryError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("error: no name entered", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="helloguid", description="helloguid: persistent hello world with per-name GUIDs")
    p.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default=None,
        help="logging level (default: $HELLOGUID_LOG_LEVEL or info)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="start the registry server")
    serve.add_argument("--host", default=None, help="default: $HELLOGUID_HOST or 127.0.0.1")
    serve.add_argument("--port", type=int, default=None, help="default: $HELLOGUID_PORT or 8000")
    serve.add_argument("--no-browser", action="store_true")
    serve.set_defaults(func=_serve)

    greet = sub.add_parser("greet", help="greet on the console")
    greet.add_argument("--url", default=None, help="server to use (default: $HELLOGUID_URL); a local registry when empty")
    greet.set_defaults(func=_greet)

    args = p.parse_args(argv)

    # greet never binds a port, so HELLOGUID_PORT is irrelevant to it.
    port = args.port if args.command == "serve" else DEFAULT_PORT
    try:
        settings = load_settings(port=port, log_level=args.log_level)
    except ValueError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1

    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    return int(args.func(args, settings))


if __name__ == "__main__":
    sys.exit(main())
