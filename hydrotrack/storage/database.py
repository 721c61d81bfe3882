from datetime import date, datetime
from typing import Optional

from sqlalchemy import func

from hydrotrack.extensions import db
from hydrotrack.models import (
    Achievement, HydrationTip, ReminderMessage, ReminderSettings,
    Settings, Streak, User, WaterIntake,
)
from hydrotrack.utils.timeutils import day_bounds
from .base import Storage


class DatabaseStorage(Storage):
    """Storage backed by the Flask-SQLAlchemy session; one commit per write."""

    def _commit(self):
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def _add(self, obj):
        db.session.add(obj)
        self._commit()
        return obj

    def _update(self, model, obj_id, fields):
        obj = db.session.get(model, obj_id)
        if obj is None:
            return None
        for key, value in fields.items():
            setattr(obj, key, value)
        self._commit()
        return obj

    # ---------------- Users ----------------
    def get_user(self, user_id):
        return db.session.get(User, user_id)

    def get_user_by_username(self, username):
        return User.query.filter_by(username=username).first()

    def create_user(self, username, password_hash):
        return self._add(User(username=username, password=password_hash))

    # ---------------- Settings ----------------
    def get_settings(self, user_id):
        return Settings.query.filter_by(user_id=user_id).first()

    def create_settings(self, user_id, **fields):
        return self._add(Settings(user_id=user_id, **fields))

    def update_settings(self, settings_id, **fields):
        return self._update(Settings, settings_id, fields)

    # ---------------- Water intake ----------------
    def get_water_intake(self, user_id, day: Optional[date] = None):
        query = WaterIntake.query.filter(WaterIntake.user_id == user_id)
        if day is not None:
            start, end = day_bounds(day)
            query = query.filter(WaterIntake.timestamp >= start, WaterIntake.timestamp < end)
        return query.order_by(WaterIntake.timestamp.asc(), WaterIntake.id.asc()).all()

    def add_water_intake(self, user_id, amount, timestamp: datetime):
        return self._add(WaterIntake(user_id=user_id, amount=amount, timestamp=timestamp))

    def clear_water_intake(self, user_id):
        removed = WaterIntake.query.filter_by(user_id=user_id).delete(synchronize_session=False)
        self._commit()
        return removed

    def get_water_intake_history(self, user_id, start_date, end_date):
        start, _ = day_bounds(start_date)
        _, end = day_bounds(end_date)
        return (
            WaterIntake.query
            .filter(WaterIntake.user_id == user_id,
                    WaterIntake.timestamp >= start,
                    WaterIntake.timestamp < end)
            .order_by(WaterIntake.timestamp.asc(), WaterIntake.id.asc())
            .all()
        )

    # ---------------- Reminder settings ----------------
    def get_reminder_settings(self, user_id):
        return ReminderSettings.query.filter_by(user_id=user_id).first()

    def create_reminder_settings(self, user_id, **fields):
        return self._add(ReminderSettings(user_id=user_id, **fields))

    def update_reminder_settings(self, settings_id, **fields):
        return self._update(ReminderSettings, settings_id, fields)

    # ---------------- Streaks ----------------
    def get_streak(self, user_id):
        return Streak.query.filter_by(user_id=user_id).first()

    def get_streaks(self):
        return Streak.query.order_by(Streak.id.asc()).all()

    def create_streak(self, user_id, **fields):
        return self._add(Streak(user_id=user_id, **fields))

    def update_streak(self, streak_id, **fields):
        return self._update(Streak, streak_id, fields)

    # ---------------- Achievements ----------------
    def get_achievements(self, user_id):
        return Achievement.query.filter_by(user_id=user_id).order_by(Achievement.id.asc()).all()

    def get_achievement(self, achievement_id):
        return db.session.get(Achievement, achievement_id)

    def create_achievement(self, user_id, **fields):
        return self._add(Achievement(user_id=user_id, **fields))

    def update_achievement(self, achievement_id, **fields):
        return self._update(Achievement, achievement_id, fields)

    # ---------------- Reminder messages ----------------
    def get_reminder_messages(self, user_id, active_only=False):
        query = ReminderMessage.query.filter_by(user_id=user_id)
        if active_only:
            query = query.filter_by(is_active=True)
        return query.order_by(ReminderMessage.id.asc()).all()

    def get_reminder_message(self, message_id):
        return db.session.get(ReminderMessage, message_id)

    def create_reminder_message(self, user_id, **fields):
        return self._add(ReminderMessage(user_id=user_id, **fields))

    def update_reminder_message(self, message_id, **fields):
        return self._update(ReminderMessage, message_id, fields)

    def delete_reminder_message(self, message_id):
        message = db.session.get(ReminderMessage, message_id)
        if message is None:
            return False
        db.session.delete(message)
        self._commit()
        return True

    # ---------------- Hydration tips ----------------
    def get_hydration_tips(self, category=None):
        query = HydrationTip.query
        if category:
            query = query.filter_by(category=category)
        return query.order_by(HydrationTip.id.asc()).all()

    def create_hydration_tip(self, tip, category):
        return self._add(HydrationTip(tip=tip, category=category))

    def get_random_hydration_tip(self, category=None):
        query = HydrationTip.query
        if category:
            query = query.filter_by(category=category)
        return query.order_by(func.random()).first()

    def close(self):
        db.session.remove()
