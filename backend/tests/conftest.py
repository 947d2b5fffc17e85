import os
import sys
import pytest

# Ensure the backend root (containing the `stopclock` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from stopclock import create_app, db, socketio
from stopclock.services.game.clock import Sampler
from stopclock.services.game.session import GameController


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    ANALYTICS_STORE_URL = 'sqlite://'
    ANALYTICS_STORE_KEY = 'test-key'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    TICK_INTERVAL_MS = 10
    RECENT_ACTIVITY_LIMIT = 20


class OfflineConfig(TestConfig):
    ANALYTICS_STORE_URL = None
    ANALYTICS_STORE_KEY = None


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def now_ms(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def offline_app():
    application = create_app(OfflineConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def offline_client(offline_app):
    return offline_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


@pytest.fixture()
def clock():
    return FakeClock(now=1_000)


@pytest.fixture()
def spawned():
    """Background tasks handed to the sampler; recorded instead of run."""
    return []


@pytest.fixture()
def emitted():
    return []


@pytest.fixture()
def controller(clock, spawned, emitted):
    sampler = Sampler(10, spawn=lambda fn, *args: spawned.append((fn, args)), sleep=lambda _s: None)
    return GameController(
        sampler,
        clock=clock,
        emit=lambda event_type, metadata: emitted.append((event_type, metadata)),
    )
