from africash.extensions import db
from datetime import datetime


class UserSession(db.Model):
    __tablename__ = "user_sessions"

    token = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)

    user = db.relationship("User")

    def is_expired(self, now=None):
        return (now or datetime.utcnow()) >= self.expires_at
