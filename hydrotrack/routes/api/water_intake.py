from flask import current_app, jsonify

from hydrotrack.schemas import (
    AchievementSchema, WaterHistoryQuerySchema, WaterIntakeCreateSchema, WaterIntakeSchema,
)
from hydrotrack.services.achievements import evaluate_achievements
from hydrotrack.services.hydration import daily_totals, summarize_day, total_intake
from hydrotrack.storage import get_storage
from hydrotrack.utils import timeutils
from hydrotrack.utils.decorators import login_required
from hydrotrack.utils.validation import load_body
from . import api_bp

intake_schema = WaterIntakeSchema()
intakes_schema = WaterIntakeSchema(many=True)
intake_create_schema = WaterIntakeCreateSchema()
history_query_schema = WaterHistoryQuerySchema()
achievements_schema = AchievementSchema(many=True)


# ---------------- API: Today's intake ----------------
@api_bp.route("/water-intake", methods=["GET"])
@login_required
def get_water_intake(current_user):
    storage = get_storage()
    today = timeutils.local_today()

    intakes = storage.get_water_intake(current_user.id, today)
    settings = storage.get_or_create_settings(current_user.id)
    summary = summarize_day(total_intake(intakes), settings.daily_goal)

    return jsonify({
        "intakes": intakes_schema.dump(intakes),
        "totalIntake": summary.total_intake,
        "dailyGoal": summary.daily_goal,
        "progress": summary.progress,
        "remaining": summary.remaining,
    })


# ---------------- API: Log intake ----------------
@api_bp.route("/water-intake", methods=["POST"])
@login_required
def add_water_intake(current_user):
    data = load_body(intake_create_schema)
    storage = get_storage()
    now = timeutils.local_now()

    intake = storage.add_water_intake(current_user.id, data["amount"], now)
    total = total_intake(storage.get_water_intake(current_user.id, now.date()))
    unlocked = evaluate_achievements(storage, current_user.id, now)

    return jsonify({
        "intake": intake_schema.dump(intake),
        "totalIntake": total,
        "unlockedAchievements": achievements_schema.dump(unlocked),
    })


# ---------------- API: Reset intake ----------------
@api_bp.route("/water-intake", methods=["DELETE"])
@login_required
def clear_water_intake(current_user):
    removed = get_storage().clear_water_intake(current_user.id)
    current_app.logger.info(f"Cleared {removed} intake records for user {current_user.id}")
    return jsonify({"message": "Water intake data reset successfully", "removed": removed})


# ---------------- API: History ----------------
@api_bp.route("/water-intake/history", methods=["POST"])
@login_required
def get_water_history(current_user):
    data = load_body(history_query_schema)
    start, end = data["start_date"], data["end_date"]

    max_days = current_app.config["MAX_HISTORY_DAYS"]
    if (end - start).days >= max_days:
        return jsonify({"message": f"Date range may span at most {max_days} days"}), 400

    intakes = get_storage().get_water_intake_history(current_user.id, start, end)
    return jsonify({
        "intakes": intakes_schema.dump(intakes),
        "dailyTotals": daily_totals(intakes, start, end),
    })
