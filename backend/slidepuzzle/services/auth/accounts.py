from sqlalchemy.exc import IntegrityError

from slidepuzzle import db
from slidepuzzle.models import User


def login_or_register(username: str) -> User:
    """Return the user with exactly this username, creating it on first sight.

    A concurrent insert of the same name loses on the unique constraint; the
    loser rolls back and picks up the winner's row.
    """
    user = User.query.filter_by(username=username).first()
    if user:
        return user
    user = User(username=username)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        user = User.query.filter_by(username=username).first()
        if user is None:
            raise
    return user
