from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from trivia.schemas import AnswerRequest, StartGameRequest
from trivia.services import questions
from trivia.services.game import start_round, submit_answer

game = Blueprint('game', __name__)


@game.route('/categories', methods=['GET'])
def list_categories():
    return jsonify({'categories': questions.list_categories_with_counts()})


@game.route('/game/start', methods=['POST'])
@login_required
def start_game():
    """
    Deals a question from the chosen category and records the wager.
    """
    body = StartGameRequest.parse(request.get_json(silent=True))
    game_round = start_round(current_user, body.category_id, body.wager)
    return jsonify({'round': game_round})


@game.route('/game/answer', methods=['POST'])
@login_required
def answer():
    """
    Resolves a round: reveals the correct option and applies the wager.
    """
    body = AnswerRequest.parse(request.get_json(silent=True))
    result = submit_answer(current_user, body.round_id, body.answer_index)
    return jsonify(result)
