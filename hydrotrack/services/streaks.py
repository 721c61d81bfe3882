"""
Streak bookkeeping.

A streak counts consecutive calendar days whose total intake reached the daily
goal. The stored record is advanced at most once per day: the first update of
a day decides the outcome, later updates the same day return the record as is.
"""
import logging
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Optional

from hydrotrack.services.hydration import total_intake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreakState:
    current_streak: int
    longest_streak: int
    last_updated: date


def goal_met(total: float, goal: float) -> bool:
    return round(total, 3) >= goal


def initial_streak(met: bool, today: date) -> StreakState:
    start = 1 if met else 0
    return StreakState(current_streak=start, longest_streak=start, last_updated=today)


def advance_streak(previous: StreakState, met: bool, today: date) -> Optional[StreakState]:
    """
    Next state of an existing streak, or None when it was already updated today
    (or, with a skewed clock, on a later day: last_updated never moves back).
    """
    if previous.last_updated >= today:
        return None

    is_consecutive = previous.last_updated == today - timedelta(days=1)
    if met:
        current = previous.current_streak + 1 if is_consecutive else 1
    else:
        current = 0
    return StreakState(
        current_streak=current,
        longest_streak=max(previous.longest_streak, current),
        last_updated=today,
    )


def is_lapsed(last_updated: date, today: date) -> bool:
    """True when at least one full day passed without an update."""
    return last_updated < today - timedelta(days=1)


def _state_of(streak) -> StreakState:
    return StreakState(
        current_streak=streak.current_streak,
        longest_streak=streak.longest_streak,
        last_updated=streak.last_updated,
    )


def update_streak(storage, user_id: int, today: date):
    """Record today's outcome for the user. Returns (streak, changed)."""
    settings = storage.get_or_create_settings(user_id)
    met = goal_met(total_intake(storage.get_water_intake(user_id, today)), settings.daily_goal)

    streak = storage.get_streak(user_id)
    if streak is None:
        state = initial_streak(met, today)
        streak = storage.create_streak(user_id, **asdict(state))
        logger.info("Streak created for user %s: current=%s", user_id, state.current_streak)
        return streak, True

    state = advance_streak(_state_of(streak), met, today)
    if state is None:
        return streak, False

    streak = storage.update_streak(streak.id, **asdict(state))
    logger.info(
        "Streak updated for user %s: current=%s longest=%s",
        user_id, state.current_streak, state.longest_streak,
    )
    return streak, True


def sweep_lapsed_streaks(storage, today: date) -> int:
    """
    Zero the current count of streaks that missed a day. last_updated and
    longest_streak are left untouched. Returns the number of streaks reset.
    """
    reset = 0
    for streak in storage.get_streaks():
        if streak.current_streak == 0 or not is_lapsed(streak.last_updated, today):
            continue
        try:
            storage.update_streak(streak.id, current_streak=0)
            reset += 1
        except Exception:
            logger.exception("Failed to reset lapsed streak %s (user %s)", streak.id, streak.user_id)
    return reset
