import logging
from decimal import Decimal, InvalidOperation

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from africash.extensions import db
from africash.services import ledger_service, user_service
from africash.services.ledger_service import MAX_AMOUNT, to_money
from africash.utils.exceptions import (
    ServiceError,
    ValidationError,
    InsufficientFundsError,
    InternalError,
)

logger = logging.getLogger(__name__)


def _apply(user_id, amount, tx_type, description):
    user = user_service.get_user_for_update(user_id)
    amount = to_money(amount)

    new_balance = to_money(Decimal(user.balance or 0) + amount)
    if new_balance < 0:
        raise InsufficientFundsError()
    if new_balance > MAX_AMOUNT:
        raise ValidationError("Balance limit exceeded", field="amount")

    user_service.set_balance(user.id, new_balance)
    ledger_service.append_transaction(user.id, tx_type, amount, description)

    logger.info(
        "Balance change user_id=%s type=%s delta=%s balance=%s",
        user.id, tx_type, amount, new_balance,
    )
    return user


def _commit_or_rollback(work):
    try:
        result = work()
        db.session.commit()
        return result
    except ServiceError:
        db.session.rollback()
        raise
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Wallet update failed")
        raise InternalError("Internal server error")


def apply_delta(user_id, amount, tx_type, description=""):
    """
    The only path that changes ``User.balance``.

    The row is locked, the new balance is computed in Decimal and rounded
    to cents, and the ledger entry is written in the same transaction, so
    either both persist or neither does.
    """
    return _commit_or_rollback(lambda: _apply(user_id, amount, tx_type, description))


def task_catalog():
    return [
        {
            "id": task_id,
            "title": task["title"],
            "reward": f"{task['reward']:.2f}",
            "duration": task["duration"],
        }
        for task_id, task in current_app.config["TASK_REWARDS"].items()
    ]


def reward_for_task(task_id, client_amount=None):
    task = current_app.config["TASK_REWARDS"].get(task_id)
    if task:
        return to_money(task["reward"])

    if not current_app.config.get("TRUST_CLIENT_REWARD_AMOUNT", True):
        raise ValidationError("Unknown task", field="taskId")

    logger.warning("Unknown task_id=%s, crediting client amount %s", task_id, client_amount)
    try:
        amount = to_money(client_amount)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError("Amount is required for this task", field="amount")
    if not amount.is_finite() or amount <= 0:
        raise ValidationError("Amount must be positive", field="amount")
    if amount > MAX_AMOUNT:
        raise ValidationError("Amount is too large", field="amount")
    return amount


def earn(user_id, task_id, client_amount=None):
    reward = reward_for_task(task_id, client_amount)
    user = apply_delta(user_id, reward, "earn", f"Completed task: {task_id}")
    return user, reward


def grant_bonus(user_id, amount, description="Bonus"):
    return apply_delta(user_id, amount, "bonus", description)


def request_withdrawal(user_id, amount, method, phone_number):
    amount = to_money(amount)
    if amount <= 0:
        raise ValidationError("Amount must be positive", field="amount")

    def work():
        user = user_service.get_user_for_update(user_id)
        if Decimal(user.balance or 0) < amount:
            logger.info(
                "Withdrawal refused user_id=%s amount=%s balance=%s",
                user_id, amount, user.balance,
            )
            raise InsufficientFundsError()

        wd = ledger_service.create_withdrawal(user.id, amount, method, phone_number)
        _apply(user.id, -amount, "withdraw", f"Withdrawal request via {method}")
        return wd

    wd = _commit_or_rollback(work)
    logger.info("Withdrawal requested id=%s user_id=%s amount=%s", wd.id, user_id, amount)
    return wd
