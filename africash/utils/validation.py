from marshmallow import ValidationError as SchemaValidationError

from africash.utils.exceptions import ValidationError


def _first_error(schema, messages):
    for name, field in schema.fields.items():
        key = field.data_key or name
        if key in messages:
            return key, messages[key]
    key = next(iter(messages))
    return (None if key == "_schema" else key), messages[key]


def load_payload(schema, data):
    """Deserialize ``data`` or raise ValidationError naming the first bad field."""
    try:
        return schema.load(data if data is not None else {})
    except SchemaValidationError as err:
        messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
        field, detail = _first_error(schema, messages)
        while isinstance(detail, (list, dict)) and detail:
            detail = detail[0] if isinstance(detail, list) else next(iter(detail.values()))
        message = f"{field}: {detail}" if field else str(detail)
        raise ValidationError(message, field=field)
