from decimal import Decimal, ROUND_HALF_UP

from africash.extensions import db
from africash.models.transaction import Transaction, TRANSACTION_TYPES
from africash.models.withdrawal import Withdrawal

CENT = Decimal("0.01")
# largest value a Numeric(10, 2) column holds
MAX_AMOUNT = Decimal("99999999.99")


def to_money(amount):
    return Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)


def append_transaction(user_id, tx_type, amount, description=""):
    """Insert a ledger entry. The caller owns commit/rollback."""
    if tx_type not in TRANSACTION_TYPES:
        raise ValueError(f"unknown transaction type {tx_type!r}")

    tx = Transaction(
        user_id=user_id,
        type=tx_type,
        amount=to_money(amount),
        description=description,
    )
    db.session.add(tx)
    db.session.flush()
    return tx


def list_transactions(user_id):
    return (
        Transaction.query
        .filter_by(user_id=user_id)
        .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        .all()
    )


def create_withdrawal(user_id, amount, method, phone_number):
    wd = Withdrawal(
        user_id=user_id,
        amount=to_money(amount),
        method=method,
        phone_number=phone_number,
        status="pending",
    )
    db.session.add(wd)
    db.session.flush()
    return wd


def list_withdrawals(user_id):
    return (
        Withdrawal.query
        .filter_by(user_id=user_id)
        .order_by(Withdrawal.created_at.desc(), Withdrawal.id.desc())
        .all()
    )
