import pytest

from app import create_app
from extensions import db
from tests.factories import ADMIN_EMAIL, ADMIN_PASSWORD


@pytest.fixture
def app():
    app = create_app('testing', {
        'ADMIN_EMAIL': ADMIN_EMAIL,
        'ADMIN_PASSWORD': ADMIN_PASSWORD,
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def session(app):
    # Requests issued while this context is active share its `g`; keep to one client.
    with app.app_context():
        yield db.session


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(app):
    client = app.test_client()
    resp = client.post('/api/auth/login', json={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client
