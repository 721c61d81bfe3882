from .user import UserSchema, RegisterSchema, LoginSchema
from .settings import SettingsSchema, SettingsUpdateSchema
from .water_intake import WaterIntakeSchema, WaterIntakeCreateSchema, WaterHistoryQuerySchema
from .reminders import (
    ReminderSettingsSchema, ReminderSettingsUpdateSchema,
    ReminderMessageSchema, ReminderMessageCreateSchema, ReminderMessageUpdateSchema,
    NotificationPermissionSchema,
)
from .progress import StreakSchema, AchievementSchema, HydrationTipSchema

__all__ = [
    "UserSchema", "RegisterSchema", "LoginSchema",
    "SettingsSchema", "SettingsUpdateSchema",
    "WaterIntakeSchema", "WaterIntakeCreateSchema", "WaterHistoryQuerySchema",
    "ReminderSettingsSchema", "ReminderSettingsUpdateSchema",
    "ReminderMessageSchema", "ReminderMessageCreateSchema", "ReminderMessageUpdateSchema",
    "NotificationPermissionSchema",
    "StreakSchema", "AchievementSchema", "HydrationTipSchema",
]
