"""Service layer for group membership and admin rules."""

from __future__ import annotations

import logging
import random
import secrets
import time
from collections.abc import Callable, Iterable
from typing import Any

from groupchat.constants import (
    CHANNEL_ID_ALPHABET,
    CHANNEL_ID_MAX_ATTEMPTS,
    CHANNEL_ID_PREFIX,
    CHANNEL_ID_SUFFIX_LENGTH,
    GROUP_PICTURE_POOL_SIZE,
    GROUP_PICTURE_URL_TEMPLATE,
)
from groupchat.errors import (
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from groupchat.user.services import ProfileDirectory, to_profile

from ..models import Group, GroupDeleted
from .channels import ChannelDirectory, LoggingChannelDirectory
from .store import GroupStore

logger = logging.getLogger(__name__)


def _clean_id(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _clean_text(value: Any) -> str:
    return "" if value is None else str(value)


class GroupService:
    """Service class for group-related operations.

    Every operation takes the caller id from the authenticated session; it
    is never read from request input.
    """

    def __init__(
        self,
        store: GroupStore,
        profiles: ProfileDirectory,
        channels: ChannelDirectory | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
        picture_pool_size: int = GROUP_PICTURE_POOL_SIZE,
    ) -> None:
        """Initialize the service with its collaborators."""
        self.store = store
        self.profiles = profiles
        self.channels = channels or LoggingChannelDirectory()
        self.rng = rng if rng is not None else secrets.SystemRandom()
        self.clock = clock
        self.picture_pool_size = picture_pool_size

    def create_group(
        self,
        caller_id: str,
        name: str | None,
        members: Iterable[Any] | None,
        description: Any = None,
        group_pic: Any = None,
    ) -> Group:
        """Create a group administered by the caller.

        The caller always ends up in the member list, first, whether or not
        they were part of ``members``.
        """
        name = name.strip() if isinstance(name, str) else _clean_id(name)
        member_ids = [_clean_id(member) for member in members or []]
        member_ids = [member_id for member_id in member_ids if member_id]
        if not name or not member_ids:
            raise ValidationError("Group name and at least one member are required")

        all_members = list(dict.fromkeys([caller_id, *member_ids]))
        channel_id = self._new_channel_id()

        group = self.store.create(
            {
                "name": name,
                "description": _clean_text(description),
                "groupPic": _clean_text(group_pic) or self._random_group_picture(),
                "admin": caller_id,
                "members": all_members,
                "streamChannelId": channel_id,
            }
        )
        logger.info(
            f"User {caller_id} created group {group['id']} "
            f"with {len(all_members)} members"
        )
        self.channels.sync_channel(channel_id, all_members)
        return self._resolve(group)

    def list_groups_for_user(self, caller_id: str) -> list[Group]:
        """Return the caller's groups, most recently updated first."""
        groups = self.store.list_for_member(caller_id)
        groups.sort(key=lambda group: group["updatedAt"], reverse=True)

        # One profile lookup per distinct user across all groups.
        user_ids = [uid for group in groups for uid in self._user_ids(group)]
        profiles = self.profiles.get_profiles(user_ids)
        return [self._resolve(group, profiles) for group in groups]

    def get_group_details(self, caller_id: str, group_id: str) -> Group:
        """Return a group the caller is a member of."""
        group = self._get_group(group_id)
        if caller_id not in group.get("members", []):
            raise ForbiddenError("You are not a member of this group")
        return self._resolve(group)

    def add_member(self, caller_id: str, group_id: str, user_id: Any) -> Group:
        """Append a user to a group. Only the admin may add members."""
        user_id = _clean_id(user_id)
        group = self._get_group(group_id)
        if group.get("admin") != caller_id:
            raise ForbiddenError("Only group admin can add members")
        if not user_id:
            raise ValidationError("User ID is required")

        members = list(group.get("members", []))
        if user_id in members:
            raise ConflictError("User is already a member")

        members.append(user_id)
        updated = self._save_members(group_id, members)
        logger.info(f"User {caller_id} added {user_id} to group {group_id}")
        self.channels.sync_channel(updated["streamChannelId"], members)
        return self._resolve(updated)

    def remove_member(
        self, caller_id: str, group_id: str, user_id: Any
    ) -> Group | GroupDeleted:
        """Remove a user from a group, deleting the group once it is empty.

        The admin may remove anyone; any member may remove themselves. The
        admin may only leave when they are the last member.
        """
        user_id = _clean_id(user_id)
        group = self._get_group(group_id)
        admin_id = group.get("admin")
        if caller_id not in (admin_id, user_id):
            raise ForbiddenError("Not authorized to remove this member")

        members = list(group.get("members", []))
        if user_id == admin_id and len(members) > 1:
            raise ValidationError(
                "Admin cannot leave group with other members. "
                "Transfer admin rights first."
            )

        if user_id not in members:
            if caller_id != admin_id:
                raise ForbiddenError("You are not a member of this group")
            return self._resolve(group)

        remaining = [member for member in members if member != user_id]
        if not remaining:
            self.store.delete(group_id)
            logger.info(f"Group {group_id} deleted as no members remain")
            self.channels.close_channel(group["streamChannelId"])
            return GroupDeleted(group_id=group_id)

        updated = self._save_members(group_id, remaining)
        logger.info(f"User {caller_id} removed {user_id} from group {group_id}")
        self.channels.sync_channel(updated["streamChannelId"], remaining)
        return self._resolve(updated)

    def _get_group(self, group_id: str) -> Group:
        group = self.store.get(group_id)
        if group is None:
            raise NotFoundError("Group not found")
        return group

    def _save_members(self, group_id: str, members: list[str]) -> Group:
        updated = self.store.update_members(group_id, members)
        if updated is None:
            # Deleted concurrently by another request.
            raise NotFoundError("Group not found")
        return updated

    def _new_channel_id(self) -> str:
        """Generate a channel id no stored group uses yet."""
        for _ in range(CHANNEL_ID_MAX_ATTEMPTS):
            millis = int(self.clock() * 1000)
            suffix = "".join(
                self.rng.choice(CHANNEL_ID_ALPHABET)
                for _ in range(CHANNEL_ID_SUFFIX_LENGTH)
            )
            channel_id = f"{CHANNEL_ID_PREFIX}-{millis}-{suffix}"
            if not self.store.channel_id_exists(channel_id):
                return channel_id
        raise InternalError("Could not generate a unique channel id")

    def _random_group_picture(self) -> str:
        number = self.rng.randint(1, self.picture_pool_size)
        return GROUP_PICTURE_URL_TEMPLATE.format(number=number)

    @staticmethod
    def _user_ids(group: Group) -> list[str]:
        return [group["admin"], *group.get("members", [])]

    def _resolve(self, group: Group, profiles: dict[str, Any] | None = None) -> Group:
        """Replace the admin and member ids with their profiles."""
        if profiles is None:
            profiles = self.profiles.get_profiles(self._user_ids(group))

        def profile(user_id: str) -> Any:
            return profiles.get(user_id) or to_profile(user_id, None)

        resolved = dict(group)
        resolved["admin"] = profile(group["admin"])
        resolved["members"] = [profile(uid) for uid in group.get("members", [])]
        return resolved  # type: ignore[return-value]
