"""Routes for the group blueprint."""

from flask import current_app, g, jsonify

from groupchat.auth.decorators import login_required

from . import bp
from .forms import GroupForm, MemberForm
from .models import GroupDeleted
from .utils import serialize_group, validated_json_form


def _group_service():
    return current_app.extensions["group_service"]


@bp.route("", methods=["POST"], strict_slashes=False)
@login_required
def create_group():
    """Create a new group administered by the current user."""
    form = validated_json_form(GroupForm)
    group = _group_service().create_group(
        g.user["uid"],
        name=form.name.data,
        members=form.members.data,
        description=form.description.data,
        group_pic=form.groupPic.data,
    )
    return jsonify(success=True, group=serialize_group(group)), 201


@bp.route("", methods=["GET"], strict_slashes=False)
@login_required
def view_groups():
    """List the current user's groups, most recently active first."""
    groups = _group_service().list_groups_for_user(g.user["uid"])
    return jsonify([serialize_group(group) for group in groups]), 200


@bp.route("/<string:group_id>", methods=["GET"])
@login_required
def view_group(group_id):
    """Display a single group to one of its members."""
    group = _group_service().get_group_details(g.user["uid"], group_id)
    return jsonify(serialize_group(group)), 200


@bp.route("/<string:group_id>/members", methods=["POST"])
@login_required
def add_member(group_id):
    """Add a user to a group."""
    form = validated_json_form(MemberForm)
    group = _group_service().add_member(g.user["uid"], group_id, form.userId.data)
    return jsonify(success=True, group=serialize_group(group)), 200


@bp.route("/<string:group_id>/members", methods=["DELETE"])
@login_required
def remove_member(group_id):
    """Remove a user from a group, or leave it."""
    form = validated_json_form(MemberForm)
    result = _group_service().remove_member(
        g.user["uid"], group_id, form.userId.data
    )
    if isinstance(result, GroupDeleted):
        return jsonify(result.to_dict()), 200
    return jsonify(success=True, group=serialize_group(result)), 200
