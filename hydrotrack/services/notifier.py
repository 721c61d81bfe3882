"""
Reminder delivery over Socket.IO.

The client reports its notification permission (`default`, `granted`,
`denied`). A reminder for a user who has not answered yet asks for permission
and is held until the client reports `granted`. Users who denied notifications
get a single "blocked" banner and nothing else.
"""
import enum
import logging

from flask import current_app

logger = logging.getLogger(__name__)

REMINDER_TITLE = "Hydration Reminder"
BLOCKED_MESSAGE = (
    "Notifications are blocked. Enable them in your browser settings "
    "to receive hydration reminders."
)

EVENT_REMINDER = "hydration_reminder"
EVENT_REQUEST_PERMISSION = "request_notification_permission"
EVENT_BLOCKED = "notifications_blocked"


class PermissionState(str, enum.Enum):
    DEFAULT = "default"
    GRANTED = "granted"
    DENIED = "denied"


def user_room(user_id: int) -> str:
    return f"user:{user_id}"


class ReminderNotifier:
    def __init__(self, emit=None):
        # emit(event, payload, room)
        self._emit = emit
        self._permissions = {}
        self._pending = {}
        self._blocked_shown = set()

    def init_app(self, app, emit):
        self._emit = emit
        app.extensions["hydrotrack.notifier"] = self

    def permission(self, user_id: int) -> PermissionState:
        return self._permissions.get(user_id, PermissionState.DEFAULT)

    def set_permission(self, user_id: int, state) -> None:
        state = PermissionState(state)
        self._permissions[user_id] = state
        logger.info("Notification permission for user %s: %s", user_id, state.value)
        if state is PermissionState.GRANTED:
            held = self._pending.pop(user_id, None)
            if held is not None:
                self.notify(user_id, *held)
        elif state is PermissionState.DENIED:
            self._pending.pop(user_id, None)

    def notify(self, user_id: int, message: str, sound: bool = False) -> bool:
        """Deliver a reminder. Returns True when the reminder event itself was emitted."""
        state = self.permission(user_id)
        room = user_room(user_id)

        if state is PermissionState.GRANTED:
            self._emit(EVENT_REMINDER, {"title": REMINDER_TITLE, "message": message, "sound": sound}, room)
            logger.debug("Reminder sent to user %s", user_id)
            return True

        if state is PermissionState.DEFAULT:
            self._pending[user_id] = (message, sound)
            self._emit(EVENT_REQUEST_PERMISSION, {}, room)
            return False

        if user_id not in self._blocked_shown:
            self._blocked_shown.add(user_id)
            self._emit(EVENT_BLOCKED, {"message": BLOCKED_MESSAGE}, room)
        return False

    def pending(self, user_id: int):
        return self._pending.get(user_id)


def get_notifier() -> ReminderNotifier:
    return current_app.extensions["hydrotrack.notifier"]
