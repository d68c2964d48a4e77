"""Firestore persistence for group documents."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, cast

from firebase_admin import firestore
from google.api_core.exceptions import NotFound

from groupchat.constants import (
    CREATED_AT,
    GROUP_CHANNEL_ID,
    GROUP_MEMBERS,
    GROUPS_COLLECTION,
    UPDATED_AT,
)

from ..models import Group

if TYPE_CHECKING:
    from google.cloud.firestore_v1.base_document import DocumentSnapshot
    from google.cloud.firestore_v1.client import Client


def utcnow() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


def _to_group(snapshot: DocumentSnapshot) -> Group:
    data = snapshot.to_dict() or {}
    data["id"] = snapshot.id
    return cast(Group, data)


class GroupStore:
    """Reads and writes the groups collection.

    Timestamps are stamped here on every write. Member updates overwrite the
    whole list, so concurrent writers resolve as last writer wins.
    """

    def __init__(self, db: Client, clock: Callable[[], datetime] = utcnow) -> None:
        """Initialize the store with a Firestore client."""
        self.db = db
        self.clock = clock

    @property
    def collection(self) -> Any:
        """The groups collection reference."""
        return self.db.collection(GROUPS_COLLECTION)

    def create(self, data: dict[str, Any]) -> Group:
        """Persist a new group and return it with its generated id."""
        now = self.clock()
        group_data = {**data, CREATED_AT: now, UPDATED_AT: now}
        group_ref = self.collection.document()
        group_ref.set(group_data)
        return cast(Group, {**group_data, "id": group_ref.id})

    def get(self, group_id: str) -> Group | None:
        """Fetch a group by id, or None when it does not exist."""
        snapshot = self.collection.document(group_id).get()
        if not snapshot.exists:
            return None
        return _to_group(snapshot)

    def list_for_member(self, user_id: str) -> list[Group]:
        """Fetch every group the user belongs to, in no particular order."""
        query = self.collection.where(
            filter=firestore.FieldFilter(GROUP_MEMBERS, "array_contains", user_id)
        )
        return [_to_group(doc) for doc in query.stream()]

    def update_members(self, group_id: str, members: list[str]) -> Group | None:
        """Replace the member list of a group and bump its update time.

        Returns None when the group no longer exists.
        """
        group_ref = self.collection.document(group_id)
        try:
            group_ref.update({GROUP_MEMBERS: members, UPDATED_AT: self.clock()})
        except NotFound:
            return None
        return self.get(group_id)

    def delete(self, group_id: str) -> None:
        """Remove a group document."""
        self.collection.document(group_id).delete()

    def channel_id_exists(self, channel_id: str) -> bool:
        """Check whether any group already uses the channel id."""
        query = self.collection.where(
            filter=firestore.FieldFilter(GROUP_CHANNEL_ID, "==", channel_id)
        ).limit(1)
        return any(True for _ in query.stream())
