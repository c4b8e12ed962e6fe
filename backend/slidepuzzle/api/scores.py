from flask import Blueprint, current_app, jsonify, request
from flask_login import current_user, login_required
from sqlalchemy.exc import SQLAlchemyError

from slidepuzzle import db
from slidepuzzle.services.scores import leaderboard as svc


scores = Blueprint('scores', __name__)


@scores.route('/score', methods=['POST'])
@login_required
def submit_score():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    if 'score' not in data:
        return jsonify({'success': False, 'message': 'Score is required'}), 400

    value = svc.parse_score(data['score'])
    if value is None:
        return jsonify({'success': False, 'message': 'Score must be a number'}), 400

    try:
        entry = svc.submit_score(current_user, value)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[score] insert failed user={current_user.id}")
        return jsonify({'success': False, 'message': 'Failed to add score'}), 500

    current_app.logger.info(f"[score] stored id={entry.id} user={entry.user_id} score={entry.score}")
    return jsonify({'success': True, 'message': 'Score added', 'id': entry.id})


@scores.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    limit = int(current_app.config.get('LEADERBOARD_LIMIT', 10))
    try:
        top = svc.top_scores(limit)
    except SQLAlchemyError:
        current_app.logger.exception('[leaderboard] query failed')
        return jsonify({'error': 'Failed to fetch leaderboard'}), 500
    return jsonify([s.to_dict() for s in top])


@scores.route('/debug', methods=['GET'])
def debug():
    """Dump every stored score (diagnostics only)."""
    try:
        rows = svc.all_scores()
        total = svc.count_scores()
    except SQLAlchemyError:
        current_app.logger.exception('[debug] query failed')
        return jsonify({'error': 'Debug failed'}), 500
    return jsonify({
        'message': 'Debug info',
        'database': current_app.config.get('DB_NAME'),
        'collection': 'scores',
        'totalRecords': total,
        'data': [s.to_dict() for s in rows],
    })
