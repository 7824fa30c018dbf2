import os

# config.py refuses to load without a signing secret
os.environ.setdefault('JWT_SECRET', 'test-secret')

import pytest
from app import create_app, db
from config import TestingConfig
from models import Role, User


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.app_context():
        yield app.test_client()


def ensure_user(username, role=Role.READER, password='pass', email=None):
    if not User.query.filter_by(username=username).first():
        u = User(username=username, email=email or f'{username}@example.com', role=Role(role))
        u.set_password(password)
        db.session.add(u)
        db.session.commit()
    return User.query.filter_by(username=username).first()


def login(client, username, password='pass'):
    return client.post('/api/login', json={'email': f'{username}@example.com', 'password': password})
