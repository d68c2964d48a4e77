"""Services backing the group blueprint."""

from .channels import ChannelDirectory, LoggingChannelDirectory
from .group_service import GroupService
from .store import GroupStore

__all__ = [
    "ChannelDirectory",
    "GroupService",
    "GroupStore",
    "LoggingChannelDirectory",
]
