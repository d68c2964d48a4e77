from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from mockfirestore import MockFirestore

from groupchat.user.services import ProfileDirectory, to_profile
from tests.conftest import add_user


class TestProfileDirectory(unittest.TestCase):
    def setUp(self) -> None:
        self.db = MockFirestore()
        add_user(self.db, "u1", fullName="Ana", nativeLanguage="portuguese")
        self.directory = ProfileDirectory(self.db)

    def test_get_user(self) -> None:
        user = self.directory.get_user("u1")

        self.assertIsNotNone(user)
        self.assertEqual(user["uid"], "u1")
        self.assertEqual(user["fullName"], "Ana")

    def test_get_user_not_found(self) -> None:
        self.assertIsNone(self.directory.get_user("missing"))

    def test_get_profiles(self) -> None:
        profiles = self.directory.get_profiles(["u1", "missing", "u1"])

        self.assertEqual(list(profiles), ["u1", "missing"])
        self.assertEqual(
            profiles["u1"],
            {
                "id": "u1",
                "displayName": "Ana",
                "avatarUrl": "https://example.com/u1.png",
                "nativeLanguage": "portuguese",
                "learningLanguage": "spanish",
            },
        )
        self.assertEqual(profiles["missing"], to_profile("missing", None))

    def test_profile_hides_private_fields(self) -> None:
        profile = self.directory.get_profiles(["u1"])["u1"]

        self.assertNotIn("email", profile)

    def test_get_profiles_uses_one_batched_read(self) -> None:
        db = MagicMock()
        found = MagicMock(id="u1", exists=True)
        found.to_dict.return_value = {"fullName": "Ana"}
        missing = MagicMock(id="u2", exists=False)
        db.get_all.return_value = [found, missing]

        profiles = ProfileDirectory(db).get_profiles(["u1", "u1", "u2"])

        db.get_all.assert_called_once()
        self.assertEqual(len(db.get_all.call_args[0][0]), 2)
        db.collection.return_value.document.return_value.get.assert_not_called()
        self.assertEqual(profiles["u1"]["displayName"], "Ana")
        self.assertEqual(
            profiles["u2"],
            {
                "id": "u2",
                "displayName": None,
                "avatarUrl": None,
                "nativeLanguage": None,
                "learningLanguage": None,
            },
        )

    def test_get_profiles_without_ids_skips_read(self) -> None:
        db = MagicMock()

        self.assertEqual(ProfileDirectory(db).get_profiles([]), {})
        db.get_all.assert_not_called()


if __name__ == "__main__":
    unittest.main()
