from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies
from werkzeug.security import generate_password_hash

from hydrotrack.extensions import limiter
from hydrotrack.schemas import LoginSchema, RegisterSchema, UserSchema
from hydrotrack.storage import get_storage
from hydrotrack.utils.decorators import login_required
from hydrotrack.utils.validation import load_body

auth_bp = Blueprint("auth", __name__)
user_schema = UserSchema()
register_schema = RegisterSchema()
login_schema = LoginSchema()


def auth_rate_limit():
    return current_app.config["AUTH_RATE_LIMIT"]


def _login_response(user, status):
    access_token = create_access_token(identity=str(user.id))
    response = jsonify(user_schema.dump(user))
    set_access_cookies(response, access_token)
    return response, status


@auth_bp.route("/register", methods=["POST"])
@limiter.limit(auth_rate_limit)
def register():
    data = load_body(register_schema)
    username = data["username"].strip()
    storage = get_storage()

    if storage.get_user_by_username(username):
        return jsonify({"message": "Username already exists"}), 400

    user = storage.create_user(username, generate_password_hash(data["password"]))
    current_app.logger.info(f"Registered user {user.id} ({user.username})")
    return _login_response(user, 201)


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(auth_rate_limit)
def login():
    data = load_body(login_schema)
    user = get_storage().get_user_by_username(data["username"].strip())

    if not user or not user.check_password(data["password"]):
        current_app.logger.info(f"Login failed for {data['username']!r}")
        return jsonify({"message": "Invalid username or password"}), 401

    return _login_response(user, 200)


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify({"message": "Logged out"})
    unset_jwt_cookies(response)
    return response, 200


@auth_bp.route("/user", methods=["GET"])
@login_required
def get_user(current_user):
    return jsonify(user_schema.dump(current_user))
