from marshmallow import fields, validate

from hydrotrack.extensions import ma
from hydrotrack.models import User
from .base import CamelCaseMixin


class UserSchema(CamelCaseMixin, ma.SQLAlchemyAutoSchema):
    class Meta:
        model = User
        exclude = ("password",)


class RegisterSchema(CamelCaseMixin, ma.Schema):
    username = fields.String(required=True, validate=validate.Length(min=3, max=50))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=6, max=128))


class LoginSchema(CamelCaseMixin, ma.Schema):
    username = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))
