"""
Achievement seeding and unlock evaluation.

Achievements are evaluated automatically after intake and streak writes, and
can also be force-marked through the API. Both paths go through
`mark_achieved`, so an unlocked achievement is never modified again.
"""
import logging
from datetime import date, datetime, timedelta

logger = logging.getLogger(__name__)

INTAKE = "intake"
STREAK = "streak"
LOGGING = "logging"

DEFAULT_ACHIEVEMENTS = [
    {"name": "First Sip", "description": "Log your first water intake",
     "type": INTAKE, "threshold_value": 1},
    {"name": "Hydration Starter", "description": "Reach your daily goal 3 days in a row",
     "type": STREAK, "threshold_value": 3},
    {"name": "Week Warrior", "description": "Reach your daily goal 7 days in a row",
     "type": STREAK, "threshold_value": 7},
    {"name": "Hydration Hero", "description": "Reach your daily goal 30 days in a row",
     "type": STREAK, "threshold_value": 30},
    {"name": "Consistent Logger", "description": "Log water intake 10 days in a row",
     "type": LOGGING, "threshold_value": 10},
]


def ensure_achievements(storage, user_id: int):
    """Return the user's achievements, seeding the defaults on first access."""
    achievements = storage.get_achievements(user_id)
    if achievements:
        return achievements
    for definition in DEFAULT_ACHIEVEMENTS:
        storage.create_achievement(user_id, achieved=False, achieved_date=None, **definition)
    logger.info("Seeded %d default achievements for user %s", len(DEFAULT_ACHIEVEMENTS), user_id)
    return storage.get_achievements(user_id)


def consecutive_logging_days(days, today: date) -> int:
    """
    Length of the run of consecutive logged days ending today. A run that ends
    yesterday still counts, since today may simply not be logged yet.
    """
    logged = set(days)
    day = today if today in logged else today - timedelta(days=1)
    count = 0
    while day in logged:
        count += 1
        day -= timedelta(days=1)
    return count


def collect_progress(storage, user_id: int, today: date) -> dict:
    """Current value of every achievement type for the user."""
    intakes = storage.get_water_intake(user_id)
    streak = storage.get_streak(user_id)
    return {
        INTAKE: len(intakes),
        STREAK: streak.current_streak if streak else 0,
        LOGGING: consecutive_logging_days((i.timestamp.date() for i in intakes), today),
    }


def mark_achieved(storage, achievement, when: datetime):
    if achievement.achieved:
        return achievement
    logger.info("Achievement unlocked for user %s: %s", achievement.user_id, achievement.name)
    return storage.update_achievement(achievement.id, achieved=True, achieved_date=when)


def evaluate_achievements(storage, user_id: int, now: datetime) -> list:
    """Unlock every pending achievement whose threshold is reached; returns the newly unlocked ones."""
    achievements = ensure_achievements(storage, user_id)
    pending = [a for a in achievements if not a.achieved]
    if not pending:
        return []

    progress = collect_progress(storage, user_id, now.date())
    unlocked = []
    for achievement in pending:
        if progress.get(achievement.type, 0) >= achievement.threshold_value:
            unlocked.append(mark_achieved(storage, achievement, now))
    return unlocked
