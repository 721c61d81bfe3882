from flask import jsonify

from hydrotrack.schemas import AchievementSchema
from hydrotrack.services.achievements import ensure_achievements, mark_achieved
from hydrotrack.storage import get_storage
from hydrotrack.utils import timeutils
from hydrotrack.utils.decorators import get_owned_or_abort, login_required
from . import api_bp

achievement_schema = AchievementSchema()
achievements_schema = AchievementSchema(many=True)


@api_bp.route("/achievements", methods=["GET"])
@login_required
def list_achievements(current_user):
    achievements = ensure_achievements(get_storage(), current_user.id)
    return jsonify(achievements_schema.dump(achievements))


@api_bp.route("/achievements/<int:achievement_id>", methods=["GET"])
@login_required
def get_achievement(current_user, achievement_id):
    achievement = get_owned_or_abort(
        get_storage().get_achievement(achievement_id), current_user.id, "Achievement"
    )
    return jsonify(achievement_schema.dump(achievement))


@api_bp.route("/achievements/<int:achievement_id>", methods=["PATCH"])
@login_required
def unlock_achievement(current_user, achievement_id):
    """Force-mark an achievement as achieved; already achieved ones are returned unchanged."""
    storage = get_storage()
    achievement = get_owned_or_abort(storage.get_achievement(achievement_id), current_user.id, "Achievement")
    achievement = mark_achieved(storage, achievement, timeutils.local_now())
    return jsonify(achievement_schema.dump(achievement))
