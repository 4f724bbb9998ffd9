"""
pytest configuration and fixtures.
"""

import socket
import threading
from typing import Generator

import pytest
from werkzeug.serving import make_server

from mock_api import ServerConfig, create_app
from mock_api.config import get_config


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Each test resolves the environment from scratch."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(
        environment_name="testing",
        version="9.9.9",
        port=3000,
        hostname="test-host",
    )


@pytest.fixture
def app(config):
    app = create_app(config)
    app.testing = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def free_port() -> int:
    """A port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('127.0.0.1', 0))
        return s.getsockname()[1]


class LiveServer:
    """Runs a WSGI app on a real socket in a background thread."""

    def __init__(self, wsgi_app):
        self._server = make_server('127.0.0.1', 0, wsgi_app, threaded=True)
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self._server.server_address[1]}"

    def start(self):
        self._thread.start()
        return self

    def stop(self):
        self._server.shutdown()
        self._server.server_close()
        self._thread.join(timeout=5.0)


@pytest.fixture
def serve() -> Generator:
    """Factory fixture: serve(wsgi_app) starts a LiveServer, stopped on teardown."""
    started = []

    def _serve(wsgi_app) -> LiveServer:
        server = LiveServer(wsgi_app).start()
        started.append(server)
        return server

    yield _serve

    for server in started:
        server.stop()


@pytest.fixture
def live_server(app, serve) -> LiveServer:
    return serve(app)
