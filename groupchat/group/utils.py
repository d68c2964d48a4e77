"""Utility functions for the group blueprint."""

from datetime import datetime

from flask import request
from werkzeug.datastructures import ImmutableMultiDict

from groupchat.errors import ValidationError


def serialize_group(group):
    """Return a JSON-ready copy of a resolved group with ISO timestamps."""
    data = dict(group)
    for field in ("createdAt", "updatedAt"):
        value = data.get(field)
        if isinstance(value, datetime):
            data[field] = value.isoformat()
    return data


def validated_json_form(form_class):
    """Build ``form_class`` from the JSON body and validate it.

    The first validation message is raised as a ValidationError.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    form = form_class(formdata=ImmutableMultiDict(payload), meta={"csrf": False})
    if not form.validate():
        messages = next(iter(form.errors.values()))
        raise ValidationError(messages[0])
    return form
