from datetime import datetime
from werkzeug.security import check_password_hash
from hydrotrack.extensions import db

USERS_TABLE = "users"


class User(db.Model):
    __tablename__ = USERS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # One-to-one
    settings = db.relationship("Settings", back_populates="user", uselist=False, cascade="all, delete-orphan")
    reminder_settings = db.relationship("ReminderSettings", back_populates="user", uselist=False, cascade="all, delete-orphan")
    streak = db.relationship("Streak", back_populates="user", uselist=False, cascade="all, delete-orphan")

    # Logs / derived rows
    water_intakes = db.relationship("WaterIntake", back_populates="user", lazy="dynamic", cascade="all, delete-orphan")
    achievements = db.relationship("Achievement", back_populates="user", lazy="dynamic", cascade="all, delete-orphan")
    reminder_messages = db.relationship("ReminderMessage", back_populates="user", lazy="dynamic", cascade="all, delete-orphan")

    # Helpers
    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password, password)
