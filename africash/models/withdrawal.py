from africash.extensions import db
from datetime import datetime
from africash.models.user import User, money, isoformat

WITHDRAWAL_STATUSES = ("pending", "approved", "rejected")


class Withdrawal(db.Model):
    __tablename__ = "withdrawals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    amount = db.Column(db.Numeric(10, 2), nullable=False)
    method = db.Column(db.String(50), nullable=False)
    phone_number = db.Column(db.String(50), nullable=False)
    status = db.Column(db.String(30), nullable=False, default="pending")

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    user = db.relationship("User", backref=db.backref("withdrawals", lazy="dynamic"))

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "amount": money(self.amount),
            "method": self.method,
            "phoneNumber": self.phone_number,
            "status": self.status,
            "createdAt": isoformat(self.created_at),
        }
