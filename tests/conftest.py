"""Shared pytest fixtures for fargate-hello tests."""

from __future__ import annotations

import logging
import socket
from collections.abc import Generator

import pytest
import structlog
from click.testing import CliRunner
from flask import Flask
from flask.testing import FlaskClient

from fargate_hello.app import create_app

SETTINGS_ENV_VARS = (
    "HOST",
    "PORT",
    "APP_HOST",
    "APP_PORT",
    "APP_REQUEST_TIMEOUT",
    "APP_LOG_JSON",
    "APP_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment out of settings resolution."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger and structlog state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    levels = {name: logging.getLogger(name).level for name in ("fargate_hello", "werkzeug")}
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def app() -> Flask:
    app = create_app()
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def occupied_port() -> Generator[int]:
    """A loopback port held by a listening socket for the test's duration."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen()
    try:
        yield sock.getsockname()[1]
    finally:
        sock.close()
