from trivia import db
from trivia.models import GameRound, Question


def register(client, username='alice', password='password123'):
    return client.post('/api/auth/register', json={'username': username, 'password': password})


def start(client, category_id, wager):
    return client.post('/api/game/start', json={'categoryId': category_id, 'wager': wager})


def answer(client, round_id, answer_index):
    return client.post('/api/game/answer', json={'roundId': round_id, 'answerIndex': answer_index})


def correct_index_for(round_id):
    game_round = db.session.get(GameRound, round_id)
    return db.session.get(Question, game_round.question_id).correct_index


def wrong_index_for(round_id):
    return (correct_index_for(round_id) + 1) % 4
