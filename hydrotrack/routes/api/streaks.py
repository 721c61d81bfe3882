from flask import jsonify

from hydrotrack.schemas import AchievementSchema, StreakSchema
from hydrotrack.services.achievements import evaluate_achievements
from hydrotrack.services.streaks import update_streak
from hydrotrack.storage import get_storage
from hydrotrack.utils import timeutils
from hydrotrack.utils.decorators import login_required
from . import api_bp

streak_schema = StreakSchema()
achievements_schema = AchievementSchema(many=True)


# ---------------- API: Get streak ----------------
@api_bp.route("/streaks", methods=["GET"])
@login_required
def get_streak(current_user):
    streak = get_storage().get_streak(current_user.id)
    if streak is None:
        # Nothing recorded yet; the first PATCH creates the row
        return jsonify({
            "id": None,
            "userId": current_user.id,
            "currentStreak": 0,
            "longestStreak": 0,
            "lastUpdated": None,
        })
    return jsonify(streak_schema.dump(streak))


# ---------------- API: Record today's outcome ----------------
@api_bp.route("/streaks", methods=["PATCH"])
@login_required
def patch_streak(current_user):
    storage = get_storage()
    now = timeutils.local_now()

    streak, changed = update_streak(storage, current_user.id, now.date())
    unlocked = evaluate_achievements(storage, current_user.id, now) if changed else []

    payload = streak_schema.dump(streak)
    payload["unlockedAchievements"] = achievements_schema.dump(unlocked)
    return jsonify(payload)
