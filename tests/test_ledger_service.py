from decimal import Decimal

import pytest

from africash.services import ledger_service


def test_append_and_list_newest_first(user):
    ledger_service.append_transaction(user.id, "bonus", Decimal("5"), "Welcome Bonus")
    ledger_service.append_transaction(user.id, "earn", 0.05, "Completed task: diamond_1")
    ledger_service.append_transaction(user.id, "withdraw", Decimal("-1.5"), "Withdrawal request via mtn")

    txs = ledger_service.list_transactions(user.id)
    assert [t.type for t in txs] == ["withdraw", "earn", "bonus"]
    assert [t.amount for t in txs] == [Decimal("-1.50"), Decimal("0.05"), Decimal("5.00")]


def test_amount_is_stored_to_the_cent(user):
    tx = ledger_service.append_transaction(user.id, "earn", "0.105", "rounding")
    assert tx.amount == Decimal("0.11")
    assert tx.to_dict()["amount"] == "0.11"


def test_unknown_type_is_rejected(user):
    with pytest.raises(ValueError):
        ledger_service.append_transaction(user.id, "refund", 1, "nope")


def test_list_is_scoped_to_user(user):
    from africash.services import user_service

    other = user_service.create_user("Bob", "bob@x.com", "+24122222222", "x")
    ledger_service.append_transaction(other.id, "earn", 1, "other")

    assert ledger_service.list_transactions(user.id) == []
    assert len(ledger_service.list_transactions(other.id)) == 1


def test_withdrawal_defaults_to_pending(user):
    wd = ledger_service.create_withdrawal(user.id, Decimal("2"), "wave", "+24111111111")
    assert wd.status == "pending"
    assert wd.amount == Decimal("2.00")

    second = ledger_service.create_withdrawal(user.id, Decimal("3"), "mtn", "+24111111111")
    assert [w.id for w in ledger_service.list_withdrawals(user.id)] == [second.id, wd.id]
