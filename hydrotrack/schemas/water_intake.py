from marshmallow import ValidationError, fields, validate, validates_schema

from hydrotrack.extensions import ma
from hydrotrack.models import WaterIntake
from .base import CamelCaseMixin


class WaterIntakeSchema(CamelCaseMixin, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = WaterIntake
        include_fk = True


class WaterIntakeCreateSchema(CamelCaseMixin, ma.Schema):
    amount = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))


class WaterHistoryQuerySchema(CamelCaseMixin, ma.Schema):
    start_date = fields.Date(required=True)
    end_date = fields.Date(required=True)

    @validates_schema
    def validate_range(self, data, **kwargs):
        if data["end_date"] < data["start_date"]:
            raise ValidationError("endDate must not be before startDate", "endDate")
