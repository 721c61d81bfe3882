from flask import current_app, jsonify

from hydrotrack.schemas import (
    ReminderMessageCreateSchema, ReminderMessageSchema, ReminderMessageUpdateSchema,
    ReminderSettingsSchema, ReminderSettingsUpdateSchema,
)
from hydrotrack.services.reminders import get_reminder_scheduler
from hydrotrack.storage import get_storage
from hydrotrack.utils.decorators import get_owned_or_abort, login_required
from hydrotrack.utils.validation import load_body
from . import api_bp

reminder_settings_schema = ReminderSettingsSchema()
reminder_settings_update_schema = ReminderSettingsUpdateSchema()
message_schema = ReminderMessageSchema()
messages_schema = ReminderMessageSchema(many=True)
message_create_schema = ReminderMessageCreateSchema()
message_update_schema = ReminderMessageUpdateSchema()


# ============================================================
# REMINDER SETTINGS
# ============================================================

@api_bp.route("/reminder-settings", methods=["GET"])
@login_required
def get_reminder_settings(current_user):
    reminder_settings = get_storage().get_or_create_reminder_settings(current_user.id)
    return jsonify(reminder_settings_schema.dump(reminder_settings))


@api_bp.route("/reminder-settings", methods=["PATCH"])
@login_required
def update_reminder_settings(current_user):
    data = load_body(reminder_settings_update_schema)
    storage = get_storage()

    reminder_settings = storage.get_or_create_reminder_settings(current_user.id)
    if data:
        reminder_settings = storage.update_reminder_settings(reminder_settings.id, **data)

    scheduled = get_reminder_scheduler().configure_user(storage, current_user.id)
    current_app.logger.info(
        f"Reminder settings updated for user {current_user.id}; reminders running: {scheduled}"
    )

    payload = reminder_settings_schema.dump(reminder_settings)
    payload["scheduled"] = scheduled
    return jsonify(payload)


# ============================================================
# REMINDER MESSAGES
# ============================================================

@api_bp.route("/reminder-messages", methods=["GET"])
@login_required
def list_reminder_messages(current_user):
    messages = get_storage().get_reminder_messages(current_user.id)
    return jsonify(messages_schema.dump(messages))


@api_bp.route("/reminder-messages", methods=["POST"])
@login_required
def create_reminder_message(current_user):
    data = load_body(message_create_schema)
    data["message"] = data["message"].strip()
    message = get_storage().create_reminder_message(current_user.id, **data)
    return jsonify(message_schema.dump(message)), 201


@api_bp.route("/reminder-messages/<int:message_id>", methods=["PATCH"])
@login_required
def update_reminder_message(current_user, message_id):
    storage = get_storage()
    get_owned_or_abort(storage.get_reminder_message(message_id), current_user.id, "Reminder message")

    data = load_body(message_update_schema)
    if "message" in data:
        data["message"] = data["message"].strip()
    message = storage.update_reminder_message(message_id, **data)
    return jsonify(message_schema.dump(message))


@api_bp.route("/reminder-messages/<int:message_id>", methods=["DELETE"])
@login_required
def delete_reminder_message(current_user, message_id):
    storage = get_storage()
    get_owned_or_abort(storage.get_reminder_message(message_id), current_user.id, "Reminder message")

    storage.delete_reminder_message(message_id)
    return jsonify({"message": "Reminder message deleted"})
