# backend/http_utils.py

from flask import jsonify, request

from errors import InvalidInput


def json_body() -> dict:
    """Request JSON as a dict; anything else is a client error."""
    data = request.get_json(silent=True)
    if data is None:
        if request.get_data(cache=True):
            raise InvalidInput("Malformed JSON body")
        return {}
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data


def success(data=None, status=200, message=None):
    body = {"status": "success"}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def positive_int_arg(name, default, maximum=None):
    """Query-string int; missing, non-numeric or < 1 gives the default."""
    try:
        value = int(request.args.get(name, ""))
    except ValueError:
        return default
    if value < 1:
        return default
    if maximum is not None:
        value = min(value, maximum)
    return value
