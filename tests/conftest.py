import pytest

from africash.config import TestingConfig
from africash.extensions import db
from africash.main import create_app
from africash.services import user_service


@pytest.fixture()
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def ctx(app):
    # direct service calls; client requests must run outside this context
    with app.app_context():
        yield
        db.session.remove()


@pytest.fixture()
def user(ctx):
    return user_service.create_user(
        name="Alice",
        email="alice@x.com",
        phone="+24100000000",
        password_hash="not-used",
    )
