from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Sequence

from slidepuzzle.client.api import ApiError

from .board import Board, ClickOutcome
from .levels import LEVELS, Level, max_total_score, resolve_image
from .scoring import cleared_score, failed_score, performance_comment
from .timer import CountdownTimer, schedule

logger = logging.getLogger(__name__)

LEADERBOARD_DELAY_SEC = 2.0
LEADERBOARD_ERROR = "Failed to load leaderboard"


class Screen(Enum):
    WELCOME = "welcome"
    PUZZLE = "puzzle"
    RESULTS = "results"
    LEADERBOARD = "leaderboard"


class LevelOutcome(Enum):
    CLEARED = "cleared"
    FAILED = "failed"


class LoginFailed(Exception):
    pass


@dataclass
class GameState:
    """Everything the screens render; owned and mutated only by GameController."""
    screen: Screen = Screen.WELCOME
    username: str = ""
    token: Optional[str] = None
    level_index: int = 0
    total_score: int = 0
    time_left: int = 0
    board: Optional[Board] = None
    image: str = ""
    level_scores: List[int] = field(default_factory=list)
    last_outcome: Optional[LevelOutcome] = None
    comment: str = ""
    submit_error: Optional[str] = None
    leaderboard: List[Dict[str, Any]] = field(default_factory=list)
    leaderboard_error: Optional[str] = None

    @property
    def moves(self) -> int:
        return self.board.moves if self.board else 0


class GameController:
    """Welcome -> Puzzle(level 0..n-1) -> Results -> Leaderboard, with reset to Welcome.

    ``timer_factory(callback)`` must return an object with ``start()`` and
    ``cancel()`` that calls ``callback`` once per second. ``scheduler(delay, fn)``
    must return a cancellable handle for a one-shot delayed call.
    """

    def __init__(
        self,
        api,
        levels: Sequence[Level] = LEVELS,
        rng: Optional[random.Random] = None,
        timer_factory: Callable[[Callable[[], None]], Any] = CountdownTimer,
        scheduler: Callable[[float, Callable[[], None]], Any] = schedule,
        static_root: Optional[str] = None,
        leaderboard_delay: float = LEADERBOARD_DELAY_SEC,
        on_change: Optional[Callable[[GameState], None]] = None,
    ):
        self.api = api
        self.levels = tuple(levels)
        self.rng = rng or random.Random()
        self.timer_factory = timer_factory
        self.scheduler = scheduler
        self.static_root = static_root
        self.leaderboard_delay = leaderboard_delay
        self.on_change = on_change
        self.state = GameState()
        self._lock = threading.RLock()
        self._timer = None
        self._pending_leaderboard = None
        # Bumped per level so a cancelled timer's late tick is ignored
        self._generation = 0
        # Bumped whenever pending screen navigation is invalidated
        self._navigation = 0

    @property
    def level(self) -> Level:
        return self.levels[self.state.level_index]

    def start_game(self, username: str) -> None:
        name = (username or "").strip()
        if not name:
            raise ValueError("Please enter your name")
        try:
            token = self.api.login_or_register(name)
        except ApiError as exc:
            logger.error("Auth failed: %s", exc)
            raise LoginFailed(str(exc)) from exc

        with self._lock:
            self._cancel_pending_leaderboard()
            self.state = GameState(username=name, token=token)
            self.start_level(0)

    def start_level(self, index: int) -> None:
        with self._lock:
            self._stop_timer()
            level = self.levels[index]
            board = Board.build(level.size)
            board.shuffle(self.rng)
            s = self.state
            s.screen = Screen.PUZZLE
            s.level_index = index
            s.board = board
            s.time_left = level.time_limit
            s.image = resolve_image(level, self.static_root)
            self._generation += 1
            self._timer = self.timer_factory(partial(self._on_timer, self._generation))
            self._timer.start()
            logger.info("level %s started: %sx%s, %ss", level.id, level.size, level.size, level.time_limit)
            self._notify()

    def click(self, index: int) -> Optional[ClickOutcome]:
        ticket = None
        with self._lock:
            if self.state.screen is not Screen.PUZZLE or self.state.board is None:
                return None
            outcome = self.state.board.click(index)
            if outcome is ClickOutcome.SOLVED:
                ticket = self._level_cleared()
            else:
                self._notify()
        if ticket is not None:
            self._submit_and_schedule(ticket)
        return outcome

    def tick(self) -> None:
        self._tick(None)

    def finish(self) -> None:
        with self._lock:
            ticket = self._enter_results()
        self._submit_and_schedule(ticket)

    def show_leaderboard(self) -> None:
        self._show_leaderboard(None)

    def reset(self) -> None:
        with self._lock:
            self._stop_timer()
            self._cancel_pending_leaderboard()
            self.state.screen = Screen.WELCOME
            self._notify()

    def _on_timer(self, generation: int) -> None:
        self._tick(generation)

    def _tick(self, generation: Optional[int]) -> None:
        with self._lock:
            if generation is not None and generation != self._generation:
                return
            if self.state.screen is not Screen.PUZZLE:
                return
            self.state.time_left -= 1
            if self.state.time_left > 0:
                self._notify()
                return
            self.state.time_left = 0
            self._stop_timer()
            ticket = self._level_failed()
        self._submit_and_schedule(ticket)

    def _level_cleared(self):
        self._stop_timer()
        s = self.state
        gained = cleared_score(s.moves)
        s.total_score += gained
        s.level_scores.append(gained)
        s.last_outcome = LevelOutcome.CLEARED
        logger.info("level %s cleared in %s moves: +%s", self.level.id, s.moves, gained)
        if s.level_index + 1 < len(self.levels):
            self.start_level(s.level_index + 1)
            return None
        return self._enter_results()

    def _level_failed(self):
        s = self.state
        board = s.board
        gained = failed_score(board.correct_tiles(), board.size, board.moves)
        s.total_score += gained
        s.level_scores.append(gained)
        s.last_outcome = LevelOutcome.FAILED
        logger.info("level %s failed with %s correct tiles: +%s", self.level.id, board.correct_tiles(), gained)
        return self._enter_results()

    def _enter_results(self):
        """Switch to RESULTS (lock held) and return what the submission needs."""
        self._stop_timer()
        self._cancel_pending_leaderboard()
        s = self.state
        s.screen = Screen.RESULTS
        s.comment = performance_comment(s.total_score, max_total_score(self.levels))
        s.submit_error = None
        self._notify()
        return self._navigation, s.token, s.total_score, s.username

    def _submit_and_schedule(self, ticket) -> None:
        navigation, token, total, username = ticket
        error = None
        try:
            self.api.submit_score(token, total, name=username)
        except ApiError as exc:
            logger.error("Save failed: %s", exc)
            error = str(exc)
        with self._lock:
            if navigation != self._navigation:
                return
            if error is not None:
                self.state.submit_error = error
                self._notify()
            self._pending_leaderboard = self.scheduler(
                self.leaderboard_delay, partial(self._show_leaderboard, navigation)
            )

    def _show_leaderboard(self, expected_navigation: Optional[int]) -> None:
        with self._lock:
            if expected_navigation is not None and (
                expected_navigation != self._navigation or self.state.screen is not Screen.RESULTS
            ):
                return
            self._cancel_pending_leaderboard()
            self._stop_timer()
            self.state.screen = Screen.LEADERBOARD
            navigation = self._navigation
            self._notify()
        try:
            entries, error = list(self.api.leaderboard()), None
        except ApiError as exc:
            logger.error("Leaderboard fetch failed: %s", exc)
            entries, error = [], LEADERBOARD_ERROR
        with self._lock:
            if navigation != self._navigation:
                return
            self.state.leaderboard = entries
            self.state.leaderboard_error = error
            self._notify()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _cancel_pending_leaderboard(self) -> None:
        if self._pending_leaderboard is not None:
            self._pending_leaderboard.cancel()
            self._pending_leaderboard = None
        self._navigation += 1

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)
