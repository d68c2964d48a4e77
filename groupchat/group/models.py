"""Data models for the group blueprint."""

from __future__ import annotations

from dataclasses import dataclass

from groupchat.core.types import APIResponse, FirestoreDocument
from groupchat.user.models import Profile

GROUP_DELETED_MESSAGE = "Group deleted as no members remain"


class Group(FirestoreDocument, total=False):
    """A group document in Firestore.

    ``admin`` and ``members`` hold user ids as stored, or profiles once the
    group has been resolved for a response.
    """

    name: str
    description: str
    groupPic: str
    admin: str | Profile
    members: list[str] | list[Profile]
    streamChannelId: str


@dataclass(frozen=True)
class GroupDeleted:
    """Returned instead of a group when its last member leaves."""

    group_id: str
    message: str = GROUP_DELETED_MESSAGE

    def to_dict(self) -> APIResponse:
        """Response body confirming the deletion."""
        return {"success": True, "message": self.message}
