"""Hand-off of group channels to the external chat provider."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class ChannelDirectory(Protocol):
    """The chat provider side of a group: a channel id and its member ids."""

    def sync_channel(self, channel_id: str, member_ids: list[str]) -> None:
        """Make the channel's members match the group's members."""

    def close_channel(self, channel_id: str) -> None:
        """Drop the channel of a deleted group."""


class LoggingChannelDirectory:
    """Default directory that records channel changes in the log."""

    def sync_channel(self, channel_id: str, member_ids: list[str]) -> None:
        """Log the channel's current member list."""
        logger.info(f"Channel {channel_id} members: {', '.join(member_ids)}")

    def close_channel(self, channel_id: str) -> None:
        """Log the channel's removal."""
        logger.info(f"Channel {channel_id} closed")
