"""Store and game services.

These modules hold the persistence and game rules used by the HTTP
blueprints, keeping transport concerns separated from core game mechanics.
"""

from contextlib import contextmanager

from trivia import db


@contextmanager
def atomic():
    """Unit of work: commit everything done inside the block, or nothing."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
