from africash.extensions import db
from datetime import datetime
from africash.models.user import User, money, isoformat

TRANSACTION_TYPES = ("earn", "withdraw", "bonus")


class Transaction(db.Model):
    __tablename__ = "transactions"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    type = db.Column(db.String(20), nullable=False)
    # signed: credits positive, debits negative
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    description = db.Column(db.String(255))

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    user = db.relationship("User", backref=db.backref("transactions", lazy="dynamic"))

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "type": self.type,
            "amount": money(self.amount),
            "description": self.description,
            "createdAt": isoformat(self.created_at),
        }
