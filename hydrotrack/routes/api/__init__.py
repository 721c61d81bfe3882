# hydrotrack/routes/api/__init__.py
from flask import Blueprint

api_bp = Blueprint("api", __name__)

# Importing the modules registers their routes on the blueprint
from . import settings, water_intake, reminders, streaks, achievements, hydration_tips  # noqa: E402,F401
