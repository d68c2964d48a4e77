"""Decorators for authenticated routes."""

from functools import wraps

from flask import g, jsonify


def login_required(f):
    """Reject the request with 401 unless a user is loaded from the session.

    Usage:
    @login_required
    def protected_view():
        ...
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if g.get("user") is None:
            return jsonify(message="Unauthorized - No session"), 401
        return f(*args, **kwargs)

    return decorated_function
