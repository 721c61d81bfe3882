from marshmallow import fields, validate

from hydrotrack.extensions import ma
from hydrotrack.models import ReminderMessage, ReminderSettings
from hydrotrack.utils.timeutils import TIME_PATTERN
from .base import CamelCaseMixin

_time_of_day = validate.Regexp(TIME_PATTERN, error="Must be a time in HH:MM (24h) format")


class ReminderSettingsSchema(CamelCaseMixin, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = ReminderSettings
        include_fk = True


class ReminderSettingsUpdateSchema(CamelCaseMixin, ma.Schema):
    active = fields.Boolean()
    interval = fields.Integer(validate=validate.Range(min=15, max=240))
    start_time = fields.String(validate=_time_of_day)
    end_time = fields.String(validate=_time_of_day)
    monday = fields.Boolean()
    tuesday = fields.Boolean()
    wednesday = fields.Boolean()
    thursday = fields.Boolean()
    friday = fields.Boolean()
    saturday = fields.Boolean()
    sunday = fields.Boolean()
    notifications_enabled = fields.Boolean()


class ReminderMessageSchema(CamelCaseMixin, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = ReminderMessage
        include_fk = True


class ReminderMessageCreateSchema(CamelCaseMixin, ma.Schema):
    message = fields.String(required=True, validate=validate.Length(min=5, max=200))
    is_active = fields.Boolean()


class ReminderMessageUpdateSchema(CamelCaseMixin, ma.Schema):
    message = fields.String(validate=validate.Length(min=5, max=200))
    is_active = fields.Boolean()


class NotificationPermissionSchema(ma.Schema):
    state = fields.String(required=True, validate=validate.OneOf(["default", "granted", "denied"]))
