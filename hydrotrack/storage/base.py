"""Storage interface shared by the relational and in-memory backends."""
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional

from hydrotrack.models import (
    Achievement, HydrationTip, ReminderMessage, ReminderSettings,
    Settings, Streak, User, WaterIntake,
)


class Storage(ABC):

    # ---------------- Users ----------------
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, username: str, password_hash: str) -> User: ...

    # ---------------- Settings ----------------
    @abstractmethod
    def get_settings(self, user_id: int) -> Optional[Settings]: ...

    @abstractmethod
    def create_settings(self, user_id: int, **fields) -> Settings: ...

    @abstractmethod
    def update_settings(self, settings_id: int, **fields) -> Optional[Settings]: ...

    # ---------------- Water intake ----------------
    @abstractmethod
    def get_water_intake(self, user_id: int, day: Optional[date] = None) -> list[WaterIntake]:
        """All intakes of a user, or only those logged on `day`, oldest first."""

    @abstractmethod
    def add_water_intake(self, user_id: int, amount: float, timestamp: datetime) -> WaterIntake: ...

    @abstractmethod
    def clear_water_intake(self, user_id: int) -> int:
        """Delete every intake of the user; returns the number removed."""

    @abstractmethod
    def get_water_intake_history(self, user_id: int, start_date: date, end_date: date) -> list[WaterIntake]:
        """Intakes logged between start_date and end_date, both inclusive."""

    # ---------------- Reminder settings ----------------
    @abstractmethod
    def get_reminder_settings(self, user_id: int) -> Optional[ReminderSettings]: ...

    @abstractmethod
    def create_reminder_settings(self, user_id: int, **fields) -> ReminderSettings: ...

    @abstractmethod
    def update_reminder_settings(self, settings_id: int, **fields) -> Optional[ReminderSettings]: ...

    # ---------------- Streaks ----------------
    @abstractmethod
    def get_streak(self, user_id: int) -> Optional[Streak]: ...

    @abstractmethod
    def get_streaks(self) -> list[Streak]: ...

    @abstractmethod
    def create_streak(self, user_id: int, **fields) -> Streak: ...

    @abstractmethod
    def update_streak(self, streak_id: int, **fields) -> Optional[Streak]: ...

    # ---------------- Achievements ----------------
    @abstractmethod
    def get_achievements(self, user_id: int) -> list[Achievement]: ...

    @abstractmethod
    def get_achievement(self, achievement_id: int) -> Optional[Achievement]: ...

    @abstractmethod
    def create_achievement(self, user_id: int, **fields) -> Achievement: ...

    @abstractmethod
    def update_achievement(self, achievement_id: int, **fields) -> Optional[Achievement]: ...

    # ---------------- Reminder messages ----------------
    @abstractmethod
    def get_reminder_messages(self, user_id: int, active_only: bool = False) -> list[ReminderMessage]: ...

    @abstractmethod
    def get_reminder_message(self, message_id: int) -> Optional[ReminderMessage]: ...

    @abstractmethod
    def create_reminder_message(self, user_id: int, **fields) -> ReminderMessage: ...

    @abstractmethod
    def update_reminder_message(self, message_id: int, **fields) -> Optional[ReminderMessage]: ...

    @abstractmethod
    def delete_reminder_message(self, message_id: int) -> bool: ...

    # ---------------- Hydration tips ----------------
    @abstractmethod
    def get_hydration_tips(self, category: Optional[str] = None) -> list[HydrationTip]: ...

    @abstractmethod
    def create_hydration_tip(self, tip: str, category: str) -> HydrationTip: ...

    @abstractmethod
    def get_random_hydration_tip(self, category: Optional[str] = None) -> Optional[HydrationTip]: ...

    def close(self) -> None:
        """Release backend resources at application teardown."""

    # ---------------- Create on first miss ----------------
    def get_or_create_settings(self, user_id: int) -> Settings:
        return self.get_settings(user_id) or self.create_settings(user_id)

    def get_or_create_reminder_settings(self, user_id: int) -> ReminderSettings:
        return self.get_reminder_settings(user_id) or self.create_reminder_settings(user_id)
