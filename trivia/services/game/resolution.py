from flask import current_app

from trivia import db
from trivia.errors import AlreadyAnswered, QuestionNotFound, RoundNotFound
from trivia.models import GameRound, User
from trivia.services import atomic, questions, users


def score(wager: int, correct: bool) -> int:
    return wager if correct else -wager


def submit_answer(user: User, round_id: int, answer_index: int) -> dict:
    """Resolve one of the user's open rounds.

    Rounds belonging to someone else are reported as missing. The round
    update is conditional on it still awaiting an answer, so a concurrent
    duplicate submission loses and nothing it did is committed.
    """
    game_round = GameRound.query.filter_by(id=round_id, user_id=user.id).first()
    if game_round is None:
        raise RoundNotFound()
    if game_round.is_resolved:
        raise AlreadyAnswered()

    question = questions.get_by_id(game_round.question_id)
    if question is None:
        raise QuestionNotFound()

    correct = answer_index == question.correct_index
    points_delta = score(game_round.wager, correct)

    with atomic():
        claimed = (
            db.session.query(GameRound)
            .filter(
                GameRound.id == game_round.id,
                GameRound.user_id == user.id,
                GameRound.answer_index.is_(None),
            )
            .update(
                {
                    GameRound.answer_index: answer_index,
                    GameRound.correct: correct,
                    GameRound.points_delta: points_delta,
                },
                synchronize_session=False,
            )
        )
        if claimed != 1:
            raise AlreadyAnswered()
        updated = users.update_stats(user.id, points_delta, correct)
        new_balance = updated.points

    current_app.logger.info(
        f"[round-resolve] user={user.id} round={game_round.id} correct={correct} delta={points_delta} balance={new_balance}"
    )
    return {
        'correct': correct,
        'correctIndex': question.correct_index,
        'pointsDelta': points_delta,
        'newBalance': new_balance,
    }
