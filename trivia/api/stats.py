from flask import Blueprint, jsonify, current_app
from flask_login import login_required, current_user

from trivia.services import users

stats = Blueprint('stats', __name__)


@stats.route('/stats', methods=['GET'])
@login_required
def get_stats():
    return jsonify(current_user.stats_dict())


@stats.route('/leaderboard', methods=['GET'])
def leaderboard():
    limit = int(current_app.config.get('LEADERBOARD_SIZE', 10))
    leaders = [{'username': u.username, 'points': u.points} for u in users.top_players(limit)]
    return jsonify({'leaders': leaders})
