from hydrotrack.extensions import db

# Column names in weekday() order
DAY_FIELDS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class ReminderSettings(db.Model):
    __tablename__ = "reminder_settings"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)

    active = db.Column(db.Boolean, nullable=False, default=True)
    interval = db.Column(db.Integer, nullable=False, default=60)  # minutes
    start_time = db.Column(db.String(5), nullable=False, default="08:00")
    end_time = db.Column(db.String(5), nullable=False, default="20:00")

    monday = db.Column(db.Boolean, nullable=False, default=True)
    tuesday = db.Column(db.Boolean, nullable=False, default=True)
    wednesday = db.Column(db.Boolean, nullable=False, default=True)
    thursday = db.Column(db.Boolean, nullable=False, default=True)
    friday = db.Column(db.Boolean, nullable=False, default=True)
    saturday = db.Column(db.Boolean, nullable=False, default=False)
    sunday = db.Column(db.Boolean, nullable=False, default=False)

    notifications_enabled = db.Column(db.Boolean, nullable=False, default=True)

    user = db.relationship("User", back_populates="reminder_settings")

    @property
    def active_days(self):
        return tuple(bool(getattr(self, day)) for day in DAY_FIELDS)
