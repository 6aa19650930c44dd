from flask import jsonify


def json_response(payload, status=200):
    return jsonify(payload), status


def error_response(message, field=None, status=400):
    err = {"message": message}
    if field:
        err["field"] = field
    return jsonify(err), status
