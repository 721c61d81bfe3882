from hydrotrack.extensions import db


class HydrationTip(db.Model):
    __tablename__ = "hydration_tips"

    id = db.Column(db.Integer, primary_key=True)
    tip = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(20), nullable=False, default="general", index=True)
