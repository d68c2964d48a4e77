"""Data models for user profiles."""

from __future__ import annotations

from typing import TypedDict

from groupchat.core.types import FirestoreDocument


class User(FirestoreDocument, total=False):
    """A user document in Firestore."""

    email: str
    fullName: str
    profilePic: str
    nativeLanguage: str
    learningLanguage: str
    uid: str


class Profile(TypedDict):
    """Public projection of a user, embedded in group responses."""

    id: str
    displayName: str | None
    avatarUrl: str | None
    nativeLanguage: str | None
    learningLanguage: str | None
