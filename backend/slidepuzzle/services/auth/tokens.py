from typing import Optional

from flask import current_app
from flask_login import UserMixin
from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer

TOKEN_SALT = 'slidepuzzle-auth-token'


class TokenUser(UserMixin):
    """Caller identity rebuilt from a verified token (never loaded from the DB)."""

    def __init__(self, user_id: str, username: str):
        self.id = user_id
        self.username = username

    def to_dict(self):
        return {'id': self.id, 'username': self.username}


def _serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt=TOKEN_SALT)


def issue_token(user) -> str:
    """Sign the {id, username} claim set for ``user``."""
    return _serializer().dumps({'id': str(user.id), 'username': user.username})


def decode_token(token: Optional[str]) -> Optional[dict]:
    """Return the claims of a valid, unexpired token, else None."""
    if not token:
        return None
    max_age = int(current_app.config.get('TOKEN_MAX_AGE_SEC', 7200))
    try:
        claims = _serializer().loads(token, max_age=max_age)
    except SignatureExpired:
        current_app.logger.info('[auth] rejected expired token')
        return None
    except BadData:
        current_app.logger.info('[auth] rejected malformed or forged token')
        return None
    if not isinstance(claims, dict) or not claims.get('id') or not claims.get('username'):
        return None
    return claims


def identity_from_header(header: Optional[str]) -> Optional[TokenUser]:
    """Parse an ``Authorization: Bearer <token>`` header value."""
    if not header:
        return None
    parts = header.split(' ')
    if len(parts) < 2 or parts[0].lower() != 'bearer':
        return None
    claims = decode_token(parts[1])
    if claims is None:
        return None
    return TokenUser(claims['id'], claims['username'])
