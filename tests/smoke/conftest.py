"""
Smoke-test fixtures for the Task Store service.

Starts the application on a real socket in a background thread so the
smoke suite talks to it over HTTP with ``requests``, the same way a
client would.

Key SDET Concepts Demonstrated:
- Session-scoped live server fixture
- Readiness polling instead of fixed sleeps
- Clean server shutdown at the end of the session
"""

import threading
import time
from collections.abc import Generator

import pytest
import requests
from werkzeug.serving import make_server

from task_store import create_app


def wait_for_server(url: str, timeout: int = 10, interval: float = 0.1) -> None:
    """Poll the task listing until the server answers."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            response = requests.get(f"{url}/tasks", timeout=2)
            if response.status_code == 200:
                return
        except requests.RequestException:
            pass
        time.sleep(interval)
    raise RuntimeError(f"Task store at {url} did not become ready within {timeout}s")


@pytest.fixture(scope="session")
def live_app():
    """Create a dedicated app (and store) for the live server."""
    return create_app("testing")


@pytest.fixture(scope="session")
def live_server(live_app) -> Generator[str, None, None]:
    """
    Serve the app on an ephemeral port with a threaded server.

    Yields:
        str: Base URL of the running server.
    """
    server = make_server("127.0.0.1", 0, live_app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    base_url = f"http://127.0.0.1:{server.server_port}"
    wait_for_server(base_url)

    yield base_url

    server.shutdown()
    thread.join(timeout=5)


@pytest.fixture
def base_url(live_server, live_app) -> str:
    """Provide the live server URL with the store reset to seed data."""
    live_app.extensions["task_store"].reset()
    return live_server
