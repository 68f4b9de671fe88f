"""Error taxonomy shared by the services and the HTTP layer.

Every error carries the status code and client-safe message it maps to, so
route handlers can simply let them propagate. Anything that is not a
``TriviaError`` is treated as an internal failure.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException


class TriviaError(Exception):
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_response(self):
        return jsonify({'error': self.message}), self.status_code


class ValidationError(TriviaError):
    status_code = 400
    message = 'Invalid request'


class Unauthorized(TriviaError):
    status_code = 401
    message = 'Unauthorized'


class InvalidCredentials(Unauthorized):
    message = 'Invalid credentials'


class Conflict(TriviaError):
    status_code = 409
    message = 'Conflict'


class DuplicateUsername(Conflict):
    message = 'Username already taken'


class DomainError(TriviaError):
    status_code = 400
    message = 'Request could not be completed'


class InvalidWager(DomainError):
    message = 'Wager exceeds your available points'


class NoQuestionsAvailable(DomainError):
    message = 'No questions available in this category'


class InvalidQuestionData(DomainError):
    message = 'Invalid question data'


class RoundNotFound(DomainError):
    message = 'Round not found'


class AlreadyAnswered(DomainError):
    message = 'Round already answered'


class QuestionNotFound(DomainError):
    message = 'Question not found'


def register_error_handlers(flask_app):
    @flask_app.errorhandler(TriviaError)
    def handle_trivia_error(exc):
        return exc.to_response()

    @flask_app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        return jsonify({'error': exc.description}), exc.code

    @flask_app.errorhandler(Exception)
    def handle_unexpected(exc):
        flask_app.logger.exception(f"[unhandled] {type(exc).__name__}: {exc}")
        return jsonify({'error': 'Internal server error'}), 500
