from flask import Blueprint, request, current_app
from flask_login import current_user, login_required

from africash.schemas.user_schema import ActivateSchema
from africash.schemas.wallet_schema import EarnSchema, WithdrawSchema
from africash.services import ledger_service, user_service, wallet_service
from africash.utils.response_formatter import json_response
from africash.utils.validation import load_payload

bp = Blueprint("wallet", __name__, url_prefix="/api")

activate_schema = ActivateSchema()
earn_schema = EarnSchema()
withdraw_schema = WithdrawSchema()


@bp.route("/tasks", methods=["GET"])
def tasks():
    return json_response(wallet_service.task_catalog())


@bp.route("/activate", methods=["POST"])
@login_required
def activate():
    data = load_payload(activate_schema, request.get_json(silent=True))
    uid = current_user.id

    # honor system: no payment verification
    user = user_service.set_activated(uid, True)
    current_app.logger.info(
        "Account activated user_id=%s reference=%s", uid, data.get("transaction_id")
    )
    return json_response(user.to_dict())


@bp.route("/earn", methods=["POST"])
@login_required
def earn():
    data = load_payload(earn_schema, request.get_json(silent=True))
    user, _ = wallet_service.earn(
        current_user.id,
        data["task_id"],
        data.get("amount"),
    )
    return json_response({
        "balance": user.to_dict()["balance"],
        "message": "Earnings collected successfully",
    })


@bp.route("/withdraw", methods=["POST"])
@login_required
def withdraw():
    data = load_payload(withdraw_schema, request.get_json(silent=True))
    wd = wallet_service.request_withdrawal(
        current_user.id,
        amount=data["amount"],
        method=data["method"],
        phone_number=data["phone_number"],
    )
    return json_response(wd.to_dict(), status=201)


@bp.route("/withdrawals", methods=["GET"])
@login_required
def list_withdrawals():
    items = ledger_service.list_withdrawals(current_user.id)
    return json_response([w.to_dict() for w in items])


@bp.route("/transactions", methods=["GET"])
@login_required
def transactions():
    items = ledger_service.list_transactions(current_user.id)
    return json_response([t.to_dict() for t in items])
