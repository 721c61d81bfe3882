"""
Socket.IO handlers. The access-token cookie sent with the handshake
authenticates the connection; each user listens in room `user:<id>`.
"""
import logging

from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from flask_socketio import emit, join_room
from jwt.exceptions import PyJWTError
from marshmallow import ValidationError

from hydrotrack.extensions import socketio
from hydrotrack.schemas import NotificationPermissionSchema
from hydrotrack.services.notifier import get_notifier, user_room
from hydrotrack.services.reminders import get_reminder_scheduler
from hydrotrack.storage import get_storage
from hydrotrack.utils.validation import format_validation_error

logger = logging.getLogger(__name__)

permission_schema = NotificationPermissionSchema()


def _current_user_id():
    try:
        verify_jwt_in_request()
    except (JWTExtendedException, PyJWTError):
        return None
    return int(get_jwt_identity())


@socketio.on("connect")
def handle_connect(auth=None):
    user_id = _current_user_id()
    if user_id is None or get_storage().get_user(user_id) is None:
        raise ConnectionRefusedError("unauthorized")

    join_room(user_room(user_id))
    scheduled = get_reminder_scheduler().configure_user(get_storage(), user_id)
    logger.info("Socket connected for user %s; reminders running: %s", user_id, scheduled)


@socketio.on("notification_permission")
def handle_notification_permission(data):
    user_id = _current_user_id()
    if user_id is None:
        emit("error", {"message": "Unauthorized"})
        return

    try:
        state = permission_schema.load(data or {})["state"]
    except ValidationError as err:
        emit("error", {"message": format_validation_error(err.messages)})
        return

    get_notifier().set_permission(user_id, state)
