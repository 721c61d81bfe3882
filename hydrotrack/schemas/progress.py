from hydrotrack.extensions import ma
from hydrotrack.models import Achievement, HydrationTip, Streak
from .base import CamelCaseMixin


class StreakSchema(CamelCaseMixin, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Streak
        include_fk = True


class AchievementSchema(CamelCaseMixin, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Achievement
        include_fk = True


class HydrationTipSchema(CamelCaseMixin, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = HydrationTip
