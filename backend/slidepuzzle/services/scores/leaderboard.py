import math
import re
from typing import Any, List, Optional

from slidepuzzle import db, socketio
from slidepuzzle.models import Score

DEMO_SCORES = [('Alice', 1500), ('Bob', 1200), ('Charlie', 1800)]

_LEADING_INT = re.compile(r'\s*([+-]?\d+)', re.ASCII)

# Scores are stored in a signed 64-bit column
SCORE_MIN = -(2 ** 63)
SCORE_MAX = 2 ** 63 - 1


def parse_score(raw: Any) -> Optional[int]:
    """Leniently parse a submitted score as a base-10 integer.

    Strings yield their leading integer ("42abc" -> 42) and finite numbers
    are truncated toward zero. Anything else, or a value that does not fit the
    score column, is not a number and gives None.
    """
    value = _to_int(raw)
    if value is None or not SCORE_MIN <= value <= SCORE_MAX:
        return None
    return value


def _to_int(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        return int(raw)
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        return int(match.group(1)) if match else None
    return None


def submit_score(identity, value: int) -> Score:
    """Store ``value`` for the token identity and notify live leaderboards."""
    entry = Score(user_id=int(identity.id), name=identity.username, score=value)
    db.session.add(entry)
    db.session.commit()
    socketio.emit('leaderboard_update', entry.to_dict(), namespace='/ws')
    return entry


def top_scores(limit: int = 10) -> List[Score]:
    return Score.query.order_by(Score.score.desc(), Score.id.asc()).limit(limit).all()


def all_scores() -> List[Score]:
    return Score.query.order_by(Score.id.asc()).all()


def count_scores() -> int:
    return Score.query.count()


def seed_demo_scores() -> int:
    """Insert the demo rows when the scores table is empty. Returns rows added."""
    if count_scores() > 0:
        return 0
    for name, value in DEMO_SCORES:
        db.session.add(Score(name=name, score=value))
    db.session.commit()
    return len(DEMO_SCORES)
