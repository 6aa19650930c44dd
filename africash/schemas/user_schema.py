from marshmallow import EXCLUDE, ValidationError, fields, validate, validates, post_load

from africash.extensions import ma
from africash.utils.auth_utils import MAX_PASSWORD_BYTES, password_too_long


class RegisterSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=2, max=255))
    email = fields.Email(required=True, validate=validate.Length(max=255))
    phone = fields.String(required=True, validate=validate.Length(min=8, max=50))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=6, max=128))
    referral_code = fields.String(
        data_key="referralCode",
        load_default=None,
        allow_none=True,
        validate=validate.Length(max=50),
    )

    @validates("password")
    def validate_password(self, value, **kwargs):
        if password_too_long(value):
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    @post_load
    def normalize(self, data, **kwargs):
        data["name"] = data["name"].strip()
        data["email"] = data["email"].strip().lower()
        data["phone"] = data["phone"].strip()
        if data.get("referral_code") is not None:
            data["referral_code"] = data["referral_code"].strip() or None
        return data


class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True, validate=validate.Length(min=1, max=255))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))

    @post_load
    def normalize(self, data, **kwargs):
        data["email"] = data["email"].strip().lower()
        return data


class ActivateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    transaction_id = fields.String(
        data_key="transactionId",
        load_default=None,
        allow_none=True,
        validate=validate.Length(max=100),
    )
