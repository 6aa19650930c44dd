from africash.extensions import db
from datetime import datetime
from decimal import Decimal
from flask_login import UserMixin


def money(value):
    return f"{Decimal(value):.2f}" if value is not None else None


def isoformat(value):
    return value.isoformat() + "Z" if value else None


class User(UserMixin, db.Model):
    __tablename__ = "users"

    # token of the user_sessions row this instance was loaded through
    session_token = None

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    phone = db.Column(db.String(50), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    referral_code = db.Column(db.String(50), nullable=True)
    balance = db.Column(db.Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    is_activated = db.Column(db.Boolean, nullable=False, default=False)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def get_id(self):
        return self.session_token

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "referralCode": self.referral_code,
            "balance": money(self.balance),
            "isActivated": self.is_activated,
            "isAdmin": self.is_admin,
            "createdAt": isoformat(self.created_at),
        }
