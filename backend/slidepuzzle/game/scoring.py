import math

from .levels import MAX_PER_LEVEL, MOVE_PENALTY

COMMENT_BANDS = (
    (90, "Legendary!"),
    (70, "Great job!"),
    (50, "Nice effort!"),
)
DEFAULT_COMMENT = "Keep practicing!"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def cleared_score(moves: int) -> int:
    """Score for a level solved before its timer ran out."""
    return max(0, MAX_PER_LEVEL - moves * MOVE_PENALTY)


def failed_score(correct_tiles: int, size: int, moves: int) -> int:
    """Partial credit for a timed-out level: share of tiles already in place."""
    earned = _round_half_up(correct_tiles / (size * size) * MAX_PER_LEVEL)
    return max(0, earned - moves * MOVE_PENALTY)


def performance_comment(total: int, max_total: int) -> str:
    pct = (total / max_total) * 100 if max_total else 0
    for threshold, comment in COMMENT_BANDS:
        if pct >= threshold:
            return comment
    return DEFAULT_COMMENT
