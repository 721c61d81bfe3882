from flask import request
from marshmallow import ValidationError

INVALID_JSON_MESSAGE = "Validation error: request body must be valid JSON"


def format_validation_error(messages) -> str:
    """Flatten marshmallow error messages into one human-readable line."""
    if isinstance(messages, str):
        return messages
    if isinstance(messages, list):
        return " ".join(format_validation_error(m) for m in messages)

    parts = []
    for field, problems in messages.items():
        text = format_validation_error(problems)
        parts.append(text if field == "_schema" else f"{field}: {text}")
    return "Validation error: " + "; ".join(parts) if parts else "Validation error"


def load_body(schema, partial=False) -> dict:
    """Validate the JSON body; marshmallow's ValidationError becomes a 400 upstream."""
    payload = request.get_json(silent=True)
    if payload is None:
        # An empty body loads as {}; anything else that is not JSON is rejected
        if request.content_length:
            raise ValidationError(INVALID_JSON_MESSAGE)
        payload = {}
    return schema.load(payload, partial=partial)
