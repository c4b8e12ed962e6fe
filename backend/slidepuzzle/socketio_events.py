from flask import current_app
from flask_socketio import emit

from slidepuzzle import socketio
from slidepuzzle.services.scores.leaderboard import top_scores


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_get_leaderboard(data=None):
    """Top scores, capped at the configured leaderboard size."""
    cap = int(current_app.config.get('LEADERBOARD_LIMIT', 10))
    limit = cap
    if isinstance(data, dict):
        try:
            limit = max(1, min(cap, int(data.get('limit', cap))))
        except (TypeError, ValueError):
            pass
    emit('leaderboard', [s.to_dict() for s in top_scores(limit)])


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'.

    The server also pushes 'leaderboard_update' to every client here
    whenever a score is stored.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('get_leaderboard', handle_get_leaderboard, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
