import pytest

from yelpcamp import create_app
from yelpcamp.config import TestConfig
from yelpcamp.context import get_store
from yelpcamp.extensions import db


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return get_store(app)


@pytest.fixture()
def alice(store):
    return store.register_user('alice', 'secret').unwrap()


@pytest.fixture()
def login(client):
    def _login(username='alice', password='secret'):
        return client.post('/login', data={'username': username, 'password': password})
    return _login


@pytest.fixture()
def campground(store):
    return store.create_campground('Pine Ridge', 'http://img.example/pine.jpg', 'quiet').unwrap()
