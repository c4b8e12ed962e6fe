from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

MAX_PER_LEVEL = 1000
MOVE_PENALTY = 2

PLACEHOLDER_IMAGE = "https://via.placeholder.com/200x200/4A90E2/FFFFFF?text=Puzzle+{id}"


@dataclass(frozen=True)
class Level:
    id: int
    size: int
    time_limit: int  # seconds
    image: str  # path relative to the static folder


LEVELS: Tuple[Level, ...] = (
    Level(id=1, size=3, time_limit=60, image="images/image1.jpg"),
    Level(id=2, size=4, time_limit=120, image="images/image2.jpg"),
    Level(id=3, size=5, time_limit=180, image="images/image3.jpg"),
)


def max_total_score(levels: Tuple[Level, ...] = LEVELS) -> int:
    return MAX_PER_LEVEL * len(levels)


def resolve_image(level: Level, static_root: Optional[str]) -> str:
    """Return the level image, or a placeholder when it cannot be found."""
    if static_root and os.path.isfile(os.path.join(static_root, level.image)):
        return level.image
    return PLACEHOLDER_IMAGE.format(id=level.id)
