from hydrotrack.extensions import db


class Achievement(db.Model):
    __tablename__ = "achievements"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(255), nullable=False)
    type = db.Column(
        db.String(20),
        db.CheckConstraint("type IN ('intake','streak','logging')"),
        nullable=False
    )
    threshold_value = db.Column(db.Integer, nullable=False)

    achieved = db.Column(db.Boolean, nullable=False, default=False)
    achieved_date = db.Column(db.DateTime, nullable=True)

    user = db.relationship("User", back_populates="achievements")

    __table_args__ = (
        db.UniqueConstraint("user_id", "name", name="uq_achievement_user_name"),
    )
