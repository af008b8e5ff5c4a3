import pytest
from starlette.testclient import TestClient

from sessioncounter.app import create_app
from sessioncounter.config import ApplicationConfig, Environment


@pytest.fixture
def config():
    """Testing preset: fixed secret key, quiet logging."""
    return ApplicationConfig.for_environment(Environment.TESTING)


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def static_client(config):
    """Client for an app built without the live timer stream."""
    config.web.live = False
    with TestClient(create_app(config)) as client:
        yield client


class FakeClock:
    """Monotonic clock whose time only moves when `sleep` is awaited."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, delay: float):
        self.sleeps.append(delay)
        self.now += delay


@pytest.fixture
def fake_clock():
    return FakeClock()
