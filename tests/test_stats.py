from trivia import db
from trivia.models import User

from helpers import answer, correct_index_for, register, start, wrong_index_for


def test_stats_for_new_player(client, player):
    res = client.get('/api/stats')
    assert res.status_code == 200
    assert res.get_json() == {
        'points': 100,
        'gamesPlayed': 0,
        'correct': 0,
        'incorrect': 0,
        'accuracy': 0,
    }


def test_stats_requires_auth(client):
    assert client.get('/api/stats').status_code == 401


def test_stats_track_each_resolution(client, player, science):
    outcomes = [True, False, True, True]
    for won in outcomes:
        round_id = start(client, science, 5).get_json()['round']['id']
        pick = correct_index_for(round_id) if won else wrong_index_for(round_id)
        answer(client, round_id, pick)

    stats = client.get('/api/stats').get_json()
    assert stats['gamesPlayed'] == 4
    assert stats['correct'] == 3
    assert stats['incorrect'] == 1
    assert stats['gamesPlayed'] == stats['correct'] + stats['incorrect']
    assert stats['accuracy'] == 0.75
    assert stats['points'] == 100 + 5 + 5 + 5 - 5


def test_unanswered_rounds_do_not_count(client, player, science):
    start(client, science, 5)
    stats = client.get('/api/stats').get_json()
    assert stats['gamesPlayed'] == 0
    assert stats['points'] == 100


def test_leaderboard_is_public_and_ordered(client, flask_app):
    for i in range(12):
        register(flask_app.test_client(), username=f'player{i:02d}')
    for i, user in enumerate(User.query.order_by(User.id).all()):
        user.points = 50 + i * 7
    db.session.commit()

    res = client.get('/api/leaderboard')
    assert res.status_code == 200
    leaders = res.get_json()['leaders']
    assert len(leaders) == 10
    points = [entry['points'] for entry in leaders]
    assert all(a > b for a, b in zip(points, points[1:]))
    assert leaders[0] == {'username': 'player11', 'points': 50 + 11 * 7}
    assert set(leaders[0]) == {'username', 'points'}


def test_leaderboard_empty(client):
    assert client.get('/api/leaderboard').get_json() == {'leaders': []}
