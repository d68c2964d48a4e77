"""Read access to user documents and their public profile projection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, cast

from groupchat.constants import (
    USER_FULL_NAME,
    USER_LEARNING_LANGUAGE,
    USER_NATIVE_LANGUAGE,
    USER_PROFILE_PIC,
    USERS_COLLECTION,
)

from .models import Profile, User

if TYPE_CHECKING:
    from google.cloud.firestore_v1.base_document import DocumentSnapshot
    from google.cloud.firestore_v1.client import Client


def to_profile(user_id: str, user_data: dict[str, Any] | None) -> Profile:
    """Project a user document onto the fields other members may see.

    A missing document still yields a profile carrying the id, so a group
    never loses its admin or a member from its response.
    """
    data = user_data or {}
    return {
        "id": user_id,
        "displayName": data.get(USER_FULL_NAME),
        "avatarUrl": data.get(USER_PROFILE_PIC),
        "nativeLanguage": data.get(USER_NATIVE_LANGUAGE),
        "learningLanguage": data.get(USER_LEARNING_LANGUAGE),
    }


class ProfileDirectory:
    """Resolves user ids to profiles from the users collection."""

    def __init__(self, db: Client) -> None:
        """Initialize the directory with a Firestore client."""
        self.db = db

    def get_user(self, user_id: str) -> User | None:
        """Fetch a user by their ID."""
        user_doc = cast("DocumentSnapshot", self._user_ref(user_id).get())
        if not user_doc.exists:
            return None
        data = user_doc.to_dict()
        if data is None:
            return None
        data["id"] = user_id
        data["uid"] = user_id
        return cast(User, data)

    def get_profiles(self, user_ids: Iterable[str]) -> dict[str, Profile]:
        """Fetch the profiles of the given users, keyed by user id."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        user_refs = [self._user_ref(user_id) for user_id in unique_ids]
        found = {
            doc.id: doc.to_dict() for doc in self.db.get_all(user_refs) if doc.exists
        }
        return {
            user_id: to_profile(user_id, found.get(user_id)) for user_id in unique_ids
        }

    def _user_ref(self, user_id: str) -> Any:
        return self.db.collection(USERS_COLLECTION).document(user_id)
