from flask import current_app

from trivia import db
from trivia.errors import InvalidWager, NoQuestionsAvailable
from trivia.models import GameRound, Question, User
from trivia.services import questions


def issued_question_ids(user_id: int, category_id: int) -> set:
    """Ids of questions in the category this user has already been dealt."""
    rows = (
        db.session.query(GameRound.question_id)
        .join(Question, Question.id == GameRound.question_id)
        .filter(GameRound.user_id == user_id, Question.category_id == category_id)
        .distinct()
        .all()
    )
    return {qid for (qid,) in rows}


def choose_question(user_id: int, category_id: int) -> Question:
    """Pick an unseen question, falling back to repeats once the category is exhausted."""
    excluded = issued_question_ids(user_id, category_id)
    question = questions.pick_random(category_id, excluded)
    if question is None and excluded:
        current_app.logger.info(f"[round-select] user={user_id} category={category_id} exhausted, allowing repeats")
        question = questions.pick_random(category_id)
    if question is None:
        raise NoQuestionsAvailable()
    return question


def start_round(user: User, category_id: int, wager: int) -> dict:
    """Deal a question to the user and record the wager.

    Returns the round id, question text and options; the correct index is
    only revealed once the round is resolved.
    """
    if wager < 1:
        raise InvalidWager('Wager must be at least 1')
    if wager > user.points:
        raise InvalidWager()

    question = choose_question(user.id, category_id)
    # Parse before persisting so corrupt data never produces a round
    options = question.option_list()

    game_round = GameRound(user_id=user.id, question_id=question.id, wager=wager)
    db.session.add(game_round)
    db.session.commit()

    current_app.logger.info(
        f"[round-start] user={user.id} round={game_round.id} question={question.id} wager={wager}"
    )
    return {
        'id': game_round.id,
        'question': question.question_text,
        'options': options,
    }
