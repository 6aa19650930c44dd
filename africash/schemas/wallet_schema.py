from decimal import ROUND_HALF_UP

from flask import current_app
from marshmallow import EXCLUDE, ValidationError, fields, validate, validates

from africash.extensions import ma
from africash.services.ledger_service import MAX_AMOUNT


class EarnSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    # advisory; the reward table decides for known tasks
    amount = fields.Decimal(load_default=None, allow_none=True, validate=validate.Range(max=MAX_AMOUNT))
    task_id = fields.String(data_key="taskId", required=True, validate=validate.Length(min=1, max=50))


class WithdrawSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    amount = fields.Decimal(
        required=True,
        places=2,
        rounding=ROUND_HALF_UP,
        validate=validate.Range(max=MAX_AMOUNT),
    )
    phone_number = fields.String(data_key="phoneNumber", required=True, validate=validate.Length(min=8, max=50))
    method = fields.String(required=True)

    @validates("amount")
    def validate_amount(self, value, **kwargs):
        minimum = current_app.config["MIN_WITHDRAWAL_AMOUNT"]
        if value < minimum:
            raise ValidationError(f"Minimum withdrawal is {minimum:.2f}")

    @validates("method")
    def validate_method(self, value, **kwargs):
        methods = current_app.config["WITHDRAWAL_METHODS"]
        if value not in methods:
            raise ValidationError(f"Method must be one of: {', '.join(methods)}")
