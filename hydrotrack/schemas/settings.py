from marshmallow import fields, validate

from hydrotrack.extensions import ma
from hydrotrack.models import Settings
from .base import CamelCaseMixin


class SettingsSchema(CamelCaseMixin, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Settings
        include_fk = True


class SettingsUpdateSchema(CamelCaseMixin, ma.Schema):
    daily_goal = fields.Float(required=True, validate=validate.Range(min=0.5, max=10))
    default_cup_size = fields.Integer(validate=validate.Range(min=50, max=2000))
    sound_enabled = fields.Boolean()
