"""
Reminder scheduling.

Each user has at most one repeating APScheduler job. `configure` cancels the
existing job and starts a new one only when the current time is inside the
reminder window on an active day. Every tick re-checks the window and cancels
the job once it is left; the job is started again by the next `configure`.
"""
import logging
import random
from dataclasses import dataclass
from datetime import datetime, time

from flask import current_app

from hydrotrack.storage import get_storage
from hydrotrack.utils import timeutils

logger = logging.getLogger(__name__)

DEFAULT_REMINDER_MESSAGE = "Time to drink water! Stay hydrated."


@dataclass(frozen=True)
class ReminderPlan:
    user_id: int
    interval: int           # minutes
    start: time
    end: time
    active_days: tuple      # Monday first, as datetime.weekday()
    enabled: bool
    sound_enabled: bool = False

    @classmethod
    def from_settings(cls, reminder_settings, settings=None):
        return cls(
            user_id=reminder_settings.user_id,
            interval=reminder_settings.interval,
            start=timeutils.parse_hhmm(reminder_settings.start_time),
            end=timeutils.parse_hhmm(reminder_settings.end_time),
            active_days=reminder_settings.active_days,
            enabled=bool(reminder_settings.active and reminder_settings.notifications_enabled),
            sound_enabled=bool(settings.sound_enabled) if settings is not None else False,
        )


def in_reminder_window(plan: ReminderPlan, now: datetime) -> bool:
    if not plan.active_days[now.weekday()]:
        return False
    return plan.start <= now.time() <= plan.end


def pick_message(messages) -> str:
    active = [m.message for m in messages if m.is_active]
    return random.choice(active) if active else DEFAULT_REMINDER_MESSAGE


def job_id(user_id: int) -> str:
    return f"hydration-reminder-{user_id}"


class ReminderScheduler:
    """Start/stop/reschedule hydration reminders on top of an APScheduler-like scheduler."""

    def __init__(self, app=None, scheduler=None, notifier=None, clock=None):
        self.app = app
        self.scheduler = scheduler
        self.notifier = notifier
        self.clock = clock or (lambda: timeutils.local_now())
        if app is not None:
            self.init_app(app, scheduler, notifier)

    def init_app(self, app, scheduler, notifier):
        self.app = app
        self.scheduler = scheduler
        self.notifier = notifier
        app.extensions["hydrotrack.reminders"] = self

    def is_scheduled(self, user_id: int) -> bool:
        return self.scheduler.get_job(job_id(user_id)) is not None

    def cancel(self, user_id: int) -> bool:
        if not self.is_scheduled(user_id):
            return False
        self.scheduler.remove_job(job_id(user_id))
        logger.info("Reminders cancelled for user %s", user_id)
        return True

    def _cancel_plan(self, plan: ReminderPlan) -> bool:
        # A reconfigured user already has a job carrying a newer plan; leave it running
        job = self.scheduler.get_job(job_id(plan.user_id))
        if job is None or not job.args or job.args[0] is not plan:
            return False
        return self.cancel(plan.user_id)

    def configure(self, plan: ReminderPlan) -> bool:
        """(Re)start reminders for plan.user_id. Returns True when a job was started."""
        self.cancel(plan.user_id)
        if not plan.enabled:
            return False

        now = self.clock()
        if not in_reminder_window(plan, now):
            logger.debug("User %s outside reminder window at %s; not scheduling", plan.user_id, now)
            return False

        self.scheduler.add_job(
            id=job_id(plan.user_id),
            func=self.tick,
            args=[plan],
            trigger="interval",
            minutes=plan.interval,
            replace_existing=True,
        )
        logger.info("Reminders every %s min scheduled for user %s", plan.interval, plan.user_id)
        return True

    def configure_user(self, storage, user_id: int) -> bool:
        reminder_settings = storage.get_or_create_reminder_settings(user_id)
        settings = storage.get_or_create_settings(user_id)
        return self.configure(ReminderPlan.from_settings(reminder_settings, settings))

    def tick(self, plan: ReminderPlan) -> bool:
        """One timer firing. Returns True when a reminder was handed to the notifier."""
        with self.app.app_context():
            now = self.clock()
            if not in_reminder_window(plan, now):
                self._cancel_plan(plan)
                return False
            try:
                messages = get_storage().get_reminder_messages(plan.user_id, active_only=True)
                self.notifier.notify(plan.user_id, pick_message(messages), plan.sound_enabled)
            except Exception:
                logger.exception("Reminder tick failed for user %s", plan.user_id)
                return False
            return True


def get_reminder_scheduler() -> ReminderScheduler:
    return current_app.extensions["hydrotrack.reminders"]
