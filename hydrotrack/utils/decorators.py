# hydrotrack/utils/decorators.py
from functools import wraps

from flask import abort
from flask_jwt_extended import get_jwt_identity, jwt_required

from hydrotrack.storage import get_storage


def login_required(view_func):
    """
    Require a valid JWT cookie and pass the matching user to the view as
    `current_user`.
    """
    @wraps(view_func)
    @jwt_required()
    def wrapper(*args, **kwargs):
        user = get_storage().get_user(int(get_jwt_identity()))
        if user is None:
            abort(401, description="User no longer exists")
        kwargs['current_user'] = user
        return view_func(*args, **kwargs)
    return wrapper


def get_owned_or_abort(entity, user_id, label):
    """Return entity when it belongs to user_id; 404 when missing, 403 when owned by someone else."""
    if entity is None:
        abort(404, description=f"{label} not found")
    if entity.user_id != user_id:
        abort(403, description=f"You do not have access to this {label.lower()}")
    return entity
