import logging
import secrets
from datetime import datetime

import flask_login
from flask import session

from africash.extensions import db, login_manager
from africash.models.user_session import UserSession
from africash.utils.response_formatter import error_response

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Server-side session records keyed by an opaque random token.

    Flask-Login keeps the token in the signed session cookie and resolves it
    through ``load_user`` on every request. Records expire after
    ``SESSION_LIFETIME``; the expiry slides forward on each request made
    with a live session.
    """

    def __init__(self, app=None):
        self.lifetime = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.lifetime = app.config["SESSION_LIFETIME"]

        if app.config.get("SESSION_TABLE_AUTOCREATE"):
            with app.app_context():
                UserSession.__table__.create(db.engine, checkfirst=True)

        login_manager.init_app(app)
        app.extensions["session_store"] = self

    def create(self, user):
        record = UserSession(
            token=secrets.token_urlsafe(32),
            user_id=user.id,
            expires_at=datetime.utcnow() + self.lifetime,
        )
        db.session.add(record)
        db.session.commit()
        return record

    def load(self, token):
        if not token:
            return None
        record = db.session.get(UserSession, token)
        if record is None:
            return None
        if record.is_expired():
            db.session.delete(record)
            db.session.commit()
            return None
        return record

    def touch(self, record):
        record.expires_at = datetime.utcnow() + self.lifetime
        db.session.commit()

    def destroy(self, token):
        if token:
            UserSession.query.filter_by(token=token).delete()
            db.session.commit()

    def start(self, user):
        """Open a session for ``user`` and bind it to the current request."""
        if flask_login.current_user.is_authenticated:
            self.end()
        record = self.create(user)
        user.session_token = record.token
        session.permanent = True
        flask_login.login_user(user)
        return record

    def end(self):
        if flask_login.current_user.is_authenticated:
            self.destroy(flask_login.current_user.get_id())
        flask_login.logout_user()


session_store = SessionStore()


@login_manager.user_loader
def load_user(token):
    record = session_store.load(token)
    if record is None or record.user is None:
        return None
    session_store.touch(record)
    user = record.user
    user.session_token = record.token
    return user


@login_manager.unauthorized_handler
def unauthorized():
    return error_response("Unauthorized", status=401)
