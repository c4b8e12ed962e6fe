from datetime import datetime, timezone

from slidepuzzle import db


def _utcnow():
    return datetime.now(timezone.utc)


def _iso(value):
    return value.isoformat() if value else None


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    scores = db.relationship('Score', back_populates='user', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'createdAt': _iso(self.created_at),
        }


class Score(db.Model):
    __tablename__ = 'scores'
    id = db.Column(db.Integer, primary_key=True)
    # Seeded demo rows are not tied to a user
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    name = db.Column(db.String(64), nullable=False)
    score = db.Column(db.BigInteger, nullable=False, index=True)
    submitted_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    user = db.relationship('User', back_populates='scores')

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'name': self.name,
            'score': self.score,
            'submittedAt': _iso(self.submitted_at),
        }
