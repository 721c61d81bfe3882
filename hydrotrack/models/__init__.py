from .user import User
from .settings import Settings
from .water_intake import WaterIntake
from .reminder_settings import ReminderSettings, DAY_FIELDS
from .streak import Streak
from .achievement import Achievement
from .reminder_message import ReminderMessage
from .hydration_tip import HydrationTip

__all__ = [
    "User", "Settings", "WaterIntake",
    "ReminderSettings", "DAY_FIELDS",
    "Streak", "Achievement",
    "ReminderMessage", "HydrationTip",
]
