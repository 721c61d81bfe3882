from flask import current_app, jsonify, request

from hydrotrack.schemas import HydrationTipSchema
from hydrotrack.storage import get_storage
from hydrotrack.utils.decorators import login_required
from . import api_bp

tip_schema = HydrationTipSchema()
tips_schema = HydrationTipSchema(many=True)

TIP_CATEGORIES = ("general", "health", "habit")

DEFAULT_TIPS = [
    ("Start your day with a glass of water to rehydrate after sleep.", "habit"),
    ("Keep a reusable water bottle with you so water is always within reach.", "habit"),
    ("Drink a glass of water before each meal.", "habit"),
    ("Thirst is an early sign of dehydration; drink before you feel thirsty.", "health"),
    ("Mild dehydration can cause headaches, fatigue and poor concentration.", "health"),
    ("Drink extra water during exercise and in hot weather to replace lost fluids.", "health"),
    ("Fruits and vegetables like cucumber and watermelon count toward your water intake.", "general"),
    ("Pale yellow urine is a good sign that you are well hydrated.", "general"),
    ("Add a slice of lemon or a few mint leaves if plain water feels boring.", "general"),
]


def ensure_tips(storage):
    tips = storage.get_hydration_tips()
    if tips:
        return tips
    for tip, category in DEFAULT_TIPS:
        storage.create_hydration_tip(tip, category)
    current_app.logger.info(f"Seeded {len(DEFAULT_TIPS)} hydration tips")
    return storage.get_hydration_tips()


def _category_arg():
    category = request.args.get("category") or None
    if category is not None and category not in TIP_CATEGORIES:
        return None, (jsonify({"message": f"Unknown category: {category}"}), 400)
    return category, None


@api_bp.route("/hydration-tips", methods=["GET"])
@login_required
def list_hydration_tips(current_user):
    category, error = _category_arg()
    if error:
        return error
    storage = get_storage()
    ensure_tips(storage)
    return jsonify(tips_schema.dump(storage.get_hydration_tips(category)))


@api_bp.route("/hydration-tips/random", methods=["GET"])
@login_required
def random_hydration_tip(current_user):
    category, error = _category_arg()
    if error:
        return error
    storage = get_storage()
    ensure_tips(storage)

    tip = storage.get_random_hydration_tip(category)
    if tip is None:
        return jsonify({"message": "No hydration tips found"}), 404
    return jsonify(tip_schema.dump(tip))
