# models/settings.py
from hydrotrack.extensions import db


class Settings(db.Model):
    __tablename__ = "settings"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)

    daily_goal = db.Column(db.Float, nullable=False, default=2.5)  # liters
    default_cup_size = db.Column(db.Integer, nullable=False, default=350)  # ml
    sound_enabled = db.Column(db.Boolean, nullable=False, default=False)

    user = db.relationship("User", back_populates="settings")
