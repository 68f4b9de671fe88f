from datetime import timedelta
import secrets

from flask import current_app

from trivia import db
from trivia.models import Session, User, utcnow


def create(user_id: int) -> str:
    """Issue a new opaque session token for the user and persist it."""
    token = secrets.token_urlsafe(32)
    ttl_days = int(current_app.config.get('SESSION_TTL_DAYS', 7))
    db.session.add(Session(id=token, user_id=user_id, expires_at=utcnow() + timedelta(days=ttl_days)))
    db.session.commit()
    return token


def resolve(token):
    """Return the user owning an unexpired session token, else None."""
    if not token:
        return None
    return (
        User.query
        .join(Session, Session.user_id == User.id)
        .filter(Session.id == token, Session.expires_at > utcnow())
        .first()
    )


def invalidate(token) -> None:
    if not token:
        return
    Session.query.filter_by(id=token).delete(synchronize_session=False)
    db.session.commit()
