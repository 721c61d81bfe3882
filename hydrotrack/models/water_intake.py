from hydrotrack.extensions import db


class WaterIntake(db.Model):
    __tablename__ = "water_intake"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    amount = db.Column(db.Float, db.CheckConstraint("amount > 0"), nullable=False)  # liters
    timestamp = db.Column(db.DateTime, nullable=False, index=True)

    user = db.relationship("User", back_populates="water_intakes")

    __table_args__ = (
        db.Index("idx_water_intake_user_timestamp", "user_id", "timestamp"),
    )
