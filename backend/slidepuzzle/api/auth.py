from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from slidepuzzle import db
from slidepuzzle.services.auth.accounts import login_or_register as svc_login_or_register
from slidepuzzle.services.auth.tokens import issue_token

auth = Blueprint('auth', __name__)


@auth.route('/login-or-register', methods=['POST'])
def login_or_register():
    """Find or auto-register a user by exact username and hand back a token."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    username = data.get('username')
    if not username or not isinstance(username, str):
        return jsonify({'message': 'Username required'}), 400

    try:
        user = svc_login_or_register(username)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[auth] login-or-register failed username={username!r}")
        return jsonify({'message': 'Auth failed'}), 500

    current_app.logger.info(f"[auth] issued token user={user.id} username={user.username!r}")
    return jsonify({'token': issue_token(user)})
