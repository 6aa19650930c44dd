import logging
import os

from flask import Flask
from werkzeug.exceptions import HTTPException

from .config import DevelopmentConfig, ProductionConfig
from .extensions import db, migrate, ma, cors, bcrypt


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=False)
    if config_object is None:
        env = os.getenv("FLASK_ENV", "development")
        config_object = ProductionConfig if env == "production" else DevelopmentConfig
    app.config.from_object(config_object)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger("africash").setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # models must be registered on the metadata before tables are touched
    from africash.models import user, transaction, withdrawal, user_session  # noqa: F401

    # initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)
    origins = [o.strip() for o in app.config["CORS_ORIGINS"].split(",")]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": origins}},
        supports_credentials=True,
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "OPTIONS"],
    )
    bcrypt.init_app(app)

    # the session store exists before any component that authenticates
    from africash.services.session_service import session_store
    session_store.init_app(app)

    # register blueprints
    from africash.routes.auth_routes import bp as auth_bp
    from africash.routes.wallet_routes import bp as wallet_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(wallet_bp)

    register_error_handlers(app)
    return app


def register_error_handlers(app):
    from africash.utils.exceptions import ServiceError
    from africash.utils.response_formatter import error_response

    @app.errorhandler(ServiceError)
    def service_error(e):
        if e.status >= 500:
            app.logger.error("Service failure: %s", e.message)
            return error_response("Internal server error", status=e.status)
        return error_response(e.message, field=e.field, status=e.status)

    @app.errorhandler(HTTPException)
    def http_error(e):
        return error_response(e.description or e.name, status=e.code)

    @app.errorhandler(Exception)
    def server_error(e):
        app.logger.exception("Unhandled error")
        db.session.rollback()
        return error_response("Internal server error", status=500)
