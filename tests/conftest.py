"""Common utilities for tests."""

from datetime import datetime, timedelta, timezone

from mockfirestore import MockFirestore

from tests.mock_utils import patch_mockfirestore

patch_mockfirestore()


class FakeClock:
    """A clock that moves forward one second on every reading."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


def add_user(db: MockFirestore, user_id: str, **fields) -> None:
    """Create a user document with sensible profile defaults."""
    data = {
        "fullName": f"User {user_id}",
        "profilePic": f"https://example.com/{user_id}.png",
        "nativeLanguage": "english",
        "learningLanguage": "spanish",
        "email": f"{user_id}@example.com",
    }
    data.update(fields)
    db.collection("users").document(user_id).set(data)
