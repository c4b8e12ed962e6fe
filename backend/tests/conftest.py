import os
import sys
import pytest

# Ensure the backend root (containing the `slidepuzzle` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from slidepuzzle import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DB_NAME = 'testDB'
    TOKEN_MAX_AGE_SEC = 7200
    LEADERBOARD_LIMIT = 10
    SEED_DEMO_SCORES = False
    CORS_ORIGINS = ['*']


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import slidepuzzle.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def login(client):
    """Log in (or auto-register) a username and return its bearer headers."""
    def _login(username='Alice'):
        res = client.post('/api/auth/login-or-register', json={'username': username})
        assert res.status_code == 200
        return {'Authorization': f"Bearer {res.get_json()['token']}"}
    return _login


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
