import json
import os
import sys
import pytest

# Ensure the project root (containing the `trivia` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from flask import g

from trivia import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SESSION_COOKIE_NAME = 'flask_session'
    GAME_SESSION_COOKIE = 'session'
    SESSION_TTL_DAYS = 7
    SESSION_COOKIE_SECURE = False
    STARTING_POINTS = 100
    LEADERBOARD_SIZE = 10
    BCRYPT_LOG_ROUNDS = 4
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'WARNING'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)

    # Requests share the fixture's app context, so the user Flask-Login
    # caches on `g` must be dropped before each one
    @application.before_request
    def forget_cached_user():
        g.pop('_login_user', None)

    with application.app_context():
        # Ensure models are imported so tables are created
        import trivia.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def secure_app():
    """An app configured the way production serves cookies."""

    class SecureConfig(TestConfig):
        SESSION_COOKIE_SECURE = True

    application = create_app(SecureConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_category(flask_app):
    """Creates a category holding the given (text, options, correct_index) questions."""
    from trivia.models import Category, Question

    def _make(name, questions):
        category = Category(name=name)
        db.session.add(category)
        db.session.flush()
        for text, options, correct_index in questions:
            raw = options if isinstance(options, str) else json.dumps(options)
            db.session.add(Question(
                category_id=category.id,
                question_text=text,
                options=raw,
                correct_index=correct_index,
            ))
        db.session.commit()
        return category.id

    return _make


@pytest.fixture()
def science(make_category):
    return make_category('Science', [
        ('What is the chemical symbol for gold?', ['Ag', 'Au', 'Fe', 'Cu'], 1),
        ('What planet is known as the Red Planet?', ['Venus', 'Jupiter', 'Mars', 'Saturn'], 2),
        ('What is the powerhouse of the cell?', ['Nucleus', 'Ribosome', 'Mitochondria', 'Golgi apparatus'], 2),
    ])


@pytest.fixture()
def player(client):
    from helpers import register

    res = register(client)
    assert res.status_code == 200
    return res.get_json()['user']
