from sqlalchemy import func

from trivia import db
from trivia.models import Category, Question


def list_categories_with_counts():
    """All categories with their question counts; empty ones report 0."""
    rows = (
        db.session.query(Category.id, Category.name, func.count(Question.id))
        .outerjoin(Question, Question.category_id == Category.id)
        .group_by(Category.id, Category.name)
        .order_by(Category.id)
        .all()
    )
    return [{'id': cid, 'name': name, 'questionCount': count} for cid, name, count in rows]


def pick_random(category_id: int, exclude_ids=()):
    query = Question.query.filter(Question.category_id == category_id)
    if exclude_ids:
        query = query.filter(Question.id.notin_(list(exclude_ids)))
    return query.order_by(func.random()).limit(1).first()


def get_by_id(question_id: int):
    return db.session.get(Question, question_id)
