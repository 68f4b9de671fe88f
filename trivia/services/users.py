from flask import current_app
from sqlalchemy.exc import IntegrityError

from trivia import db, bcrypt
from trivia.errors import DuplicateUsername
from trivia.models import User, utcnow


def hash_password(password: str) -> str:
    return bcrypt.generate_password_hash(password).decode('utf-8')


def check_password(user: User, password: str) -> bool:
    return bcrypt.check_password_hash(user.password_hash, password)


def create_user(username: str, password_hash: str) -> User:
    """Insert a new account with the configured starting balance.

    The unique constraint on ``username`` is the source of truth for
    duplicates; a violation is reported as ``DuplicateUsername``.
    """
    user = User(
        username=username,
        password_hash=password_hash,
        points=int(current_app.config.get('STARTING_POINTS', 100)),
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise DuplicateUsername()
    return user


def find_by_username(username: str):
    return User.query.filter_by(username=username).first()


def update_stats(user_id: int, points_delta: int, correct: bool) -> User:
    """Apply one resolved round to the user's balance and counters.

    Issued as a single UPDATE so points, games played and the answer
    counters move together. Runs inside the caller's transaction.
    """
    values = {
        User.points: User.points + points_delta,
        User.games_played: User.games_played + 1,
        User.updated_at: utcnow(),
    }
    if correct:
        values[User.correct_answers] = User.correct_answers + 1
    else:
        values[User.incorrect_answers] = User.incorrect_answers + 1
    db.session.query(User).filter(User.id == user_id).update(values, synchronize_session=False)
    user = db.session.get(User, user_id)
    db.session.refresh(user)
    return user


def top_players(limit: int):
    return (
        User.query
        .order_by(User.points.desc(), User.id.asc())
        .limit(limit)
        .all()
    )
