from trivia import db
from trivia.models import Category, GameRound, Question, Session, User

from helpers import answer, correct_index_for, register, start, wrong_index_for


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_unknown_route_is_json_404(client):
    res = client.get('/api/nope')
    assert res.status_code == 404
    assert 'error' in res.get_json()


def test_full_round_flow(client, science):
    # register
    res = register(client, 'alice', 'password123')
    assert res.status_code == 200
    assert res.get_json()['user']['points'] == 100
    assert client.get_cookie('session') is not None

    # categories
    categories = client.get('/api/categories').get_json()['categories']
    assert categories[0]['questionCount'] == 3

    # start a round
    res = start(client, science, 10)
    assert res.status_code == 200
    game_round = res.get_json()['round']
    assert len(game_round['options']) == 4

    # answer correctly
    res = answer(client, game_round['id'], correct_index_for(game_round['id']))
    assert res.status_code == 200
    result = res.get_json()
    assert result['correct'] is True
    assert result['pointsDelta'] == 10
    assert result['newBalance'] == 110

    # stats
    stats = client.get('/api/stats').get_json()
    assert stats == {'points': 110, 'gamesPlayed': 1, 'correct': 1, 'incorrect': 0, 'accuracy': 1.0}

    # me reflects the new balance
    assert client.get('/api/auth/me').get_json()['user']['points'] == 110

    # leaderboard
    leaders = client.get('/api/leaderboard').get_json()['leaders']
    assert leaders == [{'username': 'alice', 'points': 110}]


def test_wrong_answer_flow(client, science):
    register(client, 'player2', 'secret123')
    round_id = start(client, science, 20).get_json()['round']['id']
    result = answer(client, round_id, wrong_index_for(round_id)).get_json()
    assert result['correct'] is False
    assert result['pointsDelta'] == -20
    assert result['newBalance'] == 80

    stats = client.get('/api/stats').get_json()
    assert stats['points'] == 80
    assert stats['incorrect'] == 1
    assert stats['accuracy'] == 0


def test_logout_then_protected_routes_are_401(client, science):
    register(client)
    assert client.post('/api/auth/logout').status_code == 200
    assert start(client, science, 10).status_code == 401
    assert answer(client, 1, 0).status_code == 401
    assert client.get('/api/stats').status_code == 401
    assert GameRound.query.count() == 0


def test_public_routes_need_no_session(client, science):
    assert client.get('/api/categories').status_code == 200
    assert client.get('/api/leaderboard').status_code == 200


def test_unexpected_failure_is_generic_500(client, player, science, monkeypatch):
    from trivia.services import users

    round_id = start(client, science, 10).get_json()['round']['id']

    def boom(user_id, points_delta, correct):
        raise RuntimeError('connection reset by peer')

    monkeypatch.setattr(users, 'update_stats', boom)
    res = answer(client, round_id, 0)
    assert res.status_code == 500
    assert res.get_json() == {'error': 'Internal server error'}
    assert db.session.get(GameRound, round_id).answer_index is None


def test_cascading_delete_from_user(client, player, science):
    round_id = start(client, science, 10).get_json()['round']['id']
    user = db.session.get(User, player['id'])
    db.session.delete(user)
    db.session.commit()
    assert db.session.get(GameRound, round_id) is None
    assert Session.query.count() == 0


def test_seed_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['seed'])
    assert result.exit_code == 0
    assert Category.query.count() == 5
    assert Question.query.count() == 25
    for question in Question.query.all():
        assert len(question.option_list()) == 4
        assert 0 <= question.correct_index < 4

    # Running again leaves existing categories alone
    result = runner.invoke(args=['seed'])
    assert result.exit_code == 0
    assert 'already exists' in result.output
    assert Question.query.count() == 25


def test_openapi_document(client):
    res = client.get('/api/doc')
    assert res.status_code == 200
    document = res.get_json()
    assert document['openapi'] == '3.0.0'
    assert set(document['paths']) == {
        '/api/auth/register', '/api/auth/login', '/api/auth/logout', '/api/auth/me',
        '/api/categories', '/api/game/start', '/api/game/answer', '/api/stats', '/api/leaderboard',
    }

    start_op = document['paths']['/api/game/start']['post']
    assert start_op['security'] == [{'sessionCookie': []}]
    assert 'security' not in document['paths']['/api/leaderboard']['get']

    schemas = document['components']['schemas']
    start_body = schemas['StartGameRequest']
    assert start_body['properties']['wager']['minimum'] == 1
    assert set(start_body['required']) == {'categoryId', 'wager'}
    answer_body = schemas['AnswerRequest']['properties']['answerIndex']
    assert (answer_body['minimum'], answer_body['maximum']) == (0, 3)
    assert set(schemas['AnswerResponse']['properties']) == {'correct', 'correctIndex', 'pointsDelta', 'newBalance'}
    # Nested models are hoisted into components
    assert 'RoundOut' in schemas
    assert document['components']['securitySchemes']['sessionCookie']['name'] == 'session'
