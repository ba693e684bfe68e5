"""Listener lifecycle: bind, announce, serve, shut down."""

from __future__ import annotations

import signal

import structlog
from flask import Flask
from werkzeug.serving import BaseWSGIServer, WSGIRequestHandler, make_server

from fargate_hello.app import create_app
from fargate_hello.config import AppSettings

log = structlog.get_logger(__name__)


class ShutdownRequested(Exception):
    """Raised from the SIGTERM/SIGINT handler to leave the accept loop."""


SHUTDOWN_SIGNALS = (signal.SIGTERM, signal.SIGINT)


def _request_shutdown(signum, frame):
    raise ShutdownRequested(signum)


def build_server(app: Flask, settings: AppSettings) -> BaseWSGIServer:
    """Bind the listener for ``app``.

    werkzeug reports a failed bind (port in use, permission denied) on
    stderr and exits with status 1, so this either returns a bound
    server or ends the process.
    """
    handler = type(
        "RequestHandler",
        (WSGIRequestHandler,),
        {"timeout": settings.request_timeout},
    )
    return make_server(
        settings.host,
        settings.port,
        app,
        threaded=True,
        request_handler=handler,
    )


def run(settings: AppSettings) -> None:
    """Serve until SIGTERM or Ctrl-C.

    Shutdown handlers are in place before ``listening`` is logged, and
    repeat signals are ignored while the listener is torn down.
    """
    server = build_server(create_app(), settings)

    previous = {sig: signal.signal(sig, _request_shutdown) for sig in SHUTDOWN_SIGNALS}
    try:
        log.info("listening", host=settings.host, port=server.port)
        server.serve_forever()
    except ShutdownRequested:
        pass
    finally:
        for sig in SHUTDOWN_SIGNALS:
            signal.signal(sig, signal.SIG_IGN)
        server.server_close()
        log.info("stopped", port=server.port)
        for sig, handler in previous.items():
            signal.signal(sig, handler)
