import logging
import os
from logging.handlers import RotatingFileHandler

from flask import Flask, jsonify
from flask_cors import CORS

from hydrotrack.config import config
from hydrotrack.errors import register_error_handlers
from hydrotrack.extensions import db, jwt, limiter, ma, migrate, scheduler, socketio
from hydrotrack.services.notifier import ReminderNotifier
from hydrotrack.services.reminders import ReminderScheduler
from hydrotrack.storage import init_storage

# Handlers must be registered before the first socketio.init_app
from hydrotrack import sockets  # noqa: F401


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)
    logging.getLogger("hydrotrack").setLevel(level)

    log_file = app.config.get("LOG_FILE")
    if not log_file:
        return
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    ))
    handler.setLevel(level)
    app.logger.addHandler(handler)
    logging.getLogger("hydrotrack").addHandler(handler)


def configure_scheduler(app):
    """Bind the shared APScheduler to this app and start it once."""
    if scheduler.running:
        return
    scheduler.init_app(app)
    if app.config.get("SCHEDULER_AUTOSTART", True):
        scheduler.start()


def create_app(config_name=None):
    app = Flask(__name__)
    config_name = config_name or os.getenv("FLASK_CONFIG", "default")
    app.config.from_object(config[config_name])

    configure_logging(app)

    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    CORS(app, supports_credentials=True, resources={r"/api/*": {
        "origins": app.config["CORS_ORIGINS"],
        "allow_headers": ["Content-Type"],
        "methods": ["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    }})
    socketio.init_app(
        app,
        async_mode=app.config["SOCKETIO_ASYNC_MODE"],
        cors_allowed_origins=app.config["CORS_ORIGINS"],
    )

    init_storage(app)
    configure_scheduler(app)

    notifier = ReminderNotifier()
    notifier.init_app(app, lambda event, payload, room: socketio.emit(event, payload, to=room))
    ReminderScheduler().init_app(app, scheduler, notifier)

    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return jsonify({"message": "Not authenticated"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return jsonify({"message": "Invalid token"}), 401

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 401

    register_error_handlers(app)

    from hydrotrack.routes.auth import auth_bp
    from hydrotrack.routes.api import api_bp
    from hydrotrack.jobs import register_jobs

    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(api_bp, url_prefix="/api")

    with app.app_context():
        db.create_all()

    register_jobs(app)

    app.logger.info(f"HydroTrack started with '{config_name}' config")
    return app
