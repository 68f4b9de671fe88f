from datetime import datetime, timezone
import json

from flask_login import UserMixin

from trivia import db
from trivia.errors import InvalidQuestionData


def utcnow():
    """Naive UTC timestamp; all stored datetimes are naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    points = db.Column(db.Integer, nullable=False, default=100)
    games_played = db.Column(db.Integer, nullable=False, default=0)
    correct_answers = db.Column(db.Integer, nullable=False, default=0)
    incorrect_answers = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    sessions = db.relationship('Session', back_populates='user', cascade='all, delete')
    rounds = db.relationship('GameRound', back_populates='user', cascade='all, delete')

    @property
    def accuracy(self):
        if not self.games_played:
            return 0
        return self.correct_answers / self.games_played

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'points': self.points,
        }

    def stats_dict(self):
        return {
            'points': self.points,
            'gamesPlayed': self.games_played,
            'correct': self.correct_answers,
            'incorrect': self.incorrect_answers,
            'accuracy': self.accuracy,
        }


class Session(db.Model):
    __tablename__ = 'sessions'
    id = db.Column(db.String(128), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    expires_at = db.Column(db.DateTime, nullable=False)

    user = db.relationship('User', back_populates='sessions')


class Category(db.Model):
    __tablename__ = 'categories'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), unique=True, nullable=False)

    questions = db.relationship('Question', back_populates='category', cascade='all, delete')


class Question(db.Model):
    __tablename__ = 'questions'
    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey('categories.id', ondelete='CASCADE'), nullable=False, index=True)
    question_text = db.Column(db.Text, nullable=False)
    options = db.Column(db.Text, nullable=False)  # JSON-encoded list of strings
    correct_index = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    category = db.relationship('Category', back_populates='questions')
    rounds = db.relationship('GameRound', back_populates='question', cascade='all, delete')

    def option_list(self):
        """Decode the stored options, refusing anything but a list of strings."""
        try:
            parsed = json.loads(self.options)
        except (TypeError, ValueError):
            raise InvalidQuestionData()
        if not isinstance(parsed, list) or not all(isinstance(o, str) for o in parsed):
            raise InvalidQuestionData()
        return parsed


class GameRound(db.Model):
    __tablename__ = 'game_rounds'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    question_id = db.Column(db.Integer, db.ForeignKey('questions.id', ondelete='CASCADE'), nullable=False, index=True)
    wager = db.Column(db.Integer, nullable=False)
    # answer_index, correct and points_delta are set together on resolution
    answer_index = db.Column(db.Integer, nullable=True)
    correct = db.Column(db.Boolean, nullable=True)
    points_delta = db.Column(db.Integer, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    user = db.relationship('User', back_populates='rounds')
    question = db.relationship('Question', back_populates='rounds')

    @property
    def is_resolved(self):
        return self.answer_index is not None
