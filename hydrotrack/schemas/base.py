from marshmallow import EXCLUDE


def camelcase(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(part.title() for part in rest)


class CamelCaseMixin:
    """Expose snake_case attributes as camelCase JSON keys."""

    class Meta:
        unknown = EXCLUDE

    def on_bind_field(self, field_name, field_obj):
        field_obj.data_key = camelcase(field_obj.data_key or field_name)
