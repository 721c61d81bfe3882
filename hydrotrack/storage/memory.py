import random
from collections import defaultdict
from dataclasses import dataclass, field

from hydrotrack.models import (
    Achievement, HydrationTip, ReminderMessage, ReminderSettings,
    Settings, Streak, User, WaterIntake,
)
from hydrotrack.utils.timeutils import day_bounds
from .base import Storage


def _column_defaults(model):
    """Scalar and callable column defaults, as the database would apply them on insert."""
    values = {}
    for column in model.__table__.columns:
        default = column.default
        if default is None:
            continue
        if default.is_scalar:
            values[column.key] = default.arg
        elif default.is_callable:
            values[column.key] = default.arg(None)
    return values


@dataclass
class MemoryState:
    users: dict = field(default_factory=dict)
    settings: dict = field(default_factory=dict)
    water_intake: dict = field(default_factory=dict)
    reminder_settings: dict = field(default_factory=dict)
    streaks: dict = field(default_factory=dict)
    achievements: dict = field(default_factory=dict)
    reminder_messages: dict = field(default_factory=dict)
    hydration_tips: dict = field(default_factory=dict)
    sequences: defaultdict = field(default_factory=lambda: defaultdict(int))


class MemoryStorage(Storage):
    """Map-backed storage; all rows live in a MemoryState owned by this instance."""

    def __init__(self):
        self.state = MemoryState()

    def _insert(self, table: str, model, **fields):
        self.state.sequences[table] += 1
        values = _column_defaults(model)
        values.update(fields)
        values["id"] = self.state.sequences[table]
        obj = model(**values)
        getattr(self.state, table)[obj.id] = obj
        return obj

    def _update(self, table: str, obj_id, fields):
        obj = getattr(self.state, table).get(obj_id)
        if obj is None:
            return None
        for key, value in fields.items():
            setattr(obj, key, value)
        return obj

    def _where(self, table: str, **criteria):
        rows = getattr(self.state, table).values()
        return [
            row for row in sorted(rows, key=lambda r: r.id)
            if all(getattr(row, key) == value for key, value in criteria.items())
        ]

    def _first(self, table: str, **criteria):
        rows = self._where(table, **criteria)
        return rows[0] if rows else None

    # ---------------- Users ----------------
    def get_user(self, user_id):
        return self.state.users.get(user_id)

    def get_user_by_username(self, username):
        return self._first("users", username=username)

    def create_user(self, username, password_hash):
        if self.get_user_by_username(username) is not None:
            raise ValueError(f"Username already exists: {username}")
        return self._insert("users", User, username=username, password=password_hash)

    # ---------------- Settings ----------------
    def get_settings(self, user_id):
        return self._first("settings", user_id=user_id)

    def create_settings(self, user_id, **fields):
        return self._insert("settings", Settings, user_id=user_id, **fields)

    def update_settings(self, settings_id, **fields):
        return self._update("settings", settings_id, fields)

    # ---------------- Water intake ----------------
    def _sorted_intakes(self, rows):
        return sorted(rows, key=lambda r: (r.timestamp, r.id))

    def get_water_intake(self, user_id, day=None):
        rows = self._where("water_intake", user_id=user_id)
        if day is not None:
            start, end = day_bounds(day)
            rows = [r for r in rows if start <= r.timestamp < end]
        return self._sorted_intakes(rows)

    def add_water_intake(self, user_id, amount, timestamp):
        return self._insert("water_intake", WaterIntake, user_id=user_id, amount=amount, timestamp=timestamp)

    def clear_water_intake(self, user_id):
        doomed = [r.id for r in self._where("water_intake", user_id=user_id)]
        for intake_id in doomed:
            del self.state.water_intake[intake_id]
        return len(doomed)

    def get_water_intake_history(self, user_id, start_date, end_date):
        start, _ = day_bounds(start_date)
        _, end = day_bounds(end_date)
        rows = [r for r in self._where("water_intake", user_id=user_id) if start <= r.timestamp < end]
        return self._sorted_intakes(rows)

    # ---------------- Reminder settings ----------------
    def get_reminder_settings(self, user_id):
        return self._first("reminder_settings", user_id=user_id)

    def create_reminder_settings(self, user_id, **fields):
        return self._insert("reminder_settings", ReminderSettings, user_id=user_id, **fields)

    def update_reminder_settings(self, settings_id, **fields):
        return self._update("reminder_settings", settings_id, fields)

    # ---------------- Streaks ----------------
    def get_streak(self, user_id):
        return self._first("streaks", user_id=user_id)

    def get_streaks(self):
        return self._where("streaks")

    def create_streak(self, user_id, **fields):
        return self._insert("streaks", Streak, user_id=user_id, **fields)

    def update_streak(self, streak_id, **fields):
        return self._update("streaks", streak_id, fields)

    # ---------------- Achievements ----------------
    def get_achievements(self, user_id):
        return self._where("achievements", user_id=user_id)

    def get_achievement(self, achievement_id):
        return self.state.achievements.get(achievement_id)

    def create_achievement(self, user_id, **fields):
        return self._insert("achievements", Achievement, user_id=user_id, **fields)

    def update_achievement(self, achievement_id, **fields):
        return self._update("achievements", achievement_id, fields)

    # ---------------- Reminder messages ----------------
    def get_reminder_messages(self, user_id, active_only=False):
        if active_only:
            return self._where("reminder_messages", user_id=user_id, is_active=True)
        return self._where("reminder_messages", user_id=user_id)

    def get_reminder_message(self, message_id):
        return self.state.reminder_messages.get(message_id)

    def create_reminder_message(self, user_id, **fields):
        return self._insert("reminder_messages", ReminderMessage, user_id=user_id, **fields)

    def update_reminder_message(self, message_id, **fields):
        return self._update("reminder_messages", message_id, fields)

    def delete_reminder_message(self, message_id):
        return self.state.reminder_messages.pop(message_id, None) is not None

    # ---------------- Hydration tips ----------------
    def get_hydration_tips(self, category=None):
        if category:
            return self._where("hydration_tips", category=category)
        return self._where("hydration_tips")

    def create_hydration_tip(self, tip, category):
        return self._insert("hydration_tips", HydrationTip, tip=tip, category=category)

    def get_random_hydration_tip(self, category=None):
        tips = self.get_hydration_tips(category)
        return random.choice(tips) if tips else None

    def close(self):
        self.state = MemoryState()
