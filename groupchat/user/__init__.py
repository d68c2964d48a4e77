"""User profiles consumed by the group service."""
