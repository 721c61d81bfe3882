from flask import current_app, jsonify

from hydrotrack.schemas import SettingsSchema, SettingsUpdateSchema
from hydrotrack.services.reminders import get_reminder_scheduler
from hydrotrack.storage import get_storage
from hydrotrack.utils.decorators import login_required
from hydrotrack.utils.validation import load_body
from . import api_bp

settings_schema = SettingsSchema()
settings_update_schema = SettingsUpdateSchema()


# ---------------- API: Get settings ----------------
@api_bp.route("/settings", methods=["GET"])
@login_required
def get_settings(current_user):
    settings = get_storage().get_or_create_settings(current_user.id)
    return jsonify(settings_schema.dump(settings))


# ---------------- API: Update settings ----------------
@api_bp.route("/settings", methods=["PATCH"])
@login_required
def update_settings(current_user):
    data = load_body(settings_update_schema)
    storage = get_storage()

    settings = storage.get_or_create_settings(current_user.id)
    settings = storage.update_settings(settings.id, **data)
    current_app.logger.info(f"Settings updated for user {current_user.id}: {sorted(data)}")

    # Sound flag travels with the reminder job
    if "sound_enabled" in data:
        get_reminder_scheduler().configure_user(storage, current_user.id)

    return jsonify(settings_schema.dump(settings))
