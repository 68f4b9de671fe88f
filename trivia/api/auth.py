from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required, current_user
from sqlalchemy.exc import SQLAlchemyError

from trivia import db
from trivia.errors import InvalidCredentials
from trivia.schemas import Credentials, LoginCredentials
from trivia.services import sessions, users

auth = Blueprint('auth', __name__)


def _cookie_name():
    return current_app.config['GAME_SESSION_COOKIE']


def _issue_session(response, user):
    """Replace any session the client presented with a fresh one."""
    previous = request.cookies.get(_cookie_name())
    if previous:
        sessions.invalidate(previous)
    token = sessions.create(user.id)
    ttl_days = int(current_app.config.get('SESSION_TTL_DAYS', 7))
    response.set_cookie(
        _cookie_name(),
        token,
        max_age=ttl_days * 24 * 60 * 60,
        path='/',
        httponly=True,
        samesite='Lax',
        secure=bool(current_app.config.get('SESSION_COOKIE_SECURE', False)),
    )
    return response


@auth.route('/register', methods=['POST'])
def register():
    body = Credentials.parse(request.get_json(silent=True))
    user = users.create_user(body.username, users.hash_password(body.password))
    current_app.logger.info(f"[register] user={user.id} username={user.username}")
    return _issue_session(jsonify({'user': user.to_dict()}), user)


@auth.route('/login', methods=['POST'])
def login():
    body = LoginCredentials.parse(request.get_json(silent=True))
    user = users.find_by_username(body.username)
    if user is None or not users.check_password(user, body.password):
        current_app.logger.info(f"[login-failed] username={body.username}")
        raise InvalidCredentials()
    current_app.logger.info(f"[login] user={user.id}")
    return _issue_session(jsonify({'user': user.to_dict()}), user)


@auth.route('/logout', methods=['POST'])
def logout():
    token = request.cookies.get(_cookie_name())
    try:
        sessions.invalidate(token)
    except SQLAlchemyError as exc:
        # Client state is cleared regardless of whether the delete succeeded
        db.session.rollback()
        current_app.logger.warning(f"[logout-failed] {exc}")
    response = jsonify({'ok': True})
    response.delete_cookie(_cookie_name(), path='/')
    return response


@auth.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify({'user': current_user.to_dict()})
