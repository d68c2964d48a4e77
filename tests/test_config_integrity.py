"""Test to ensure configuration integrity, specifically for Firebase setup."""

import os
import unittest
from unittest.mock import MagicMock, patch

from mockfirestore import MockFirestore

from groupchat import create_app
from groupchat.group.services import GroupService


class TestConfigIntegrity(unittest.TestCase):
    """Test case for configuration integrity."""

    @patch("firebase_admin.initialize_app")
    def test_injected_db_skips_firebase(self, mock_init_app) -> None:
        """An injected client is used as is and Firebase is never initialized."""
        db = MockFirestore()
        app = create_app({"TESTING": True}, db=db)

        mock_init_app.assert_not_called()
        service = app.extensions["group_service"]
        self.assertIsInstance(service, GroupService)
        self.assertIs(service.store.db, db)
        self.assertIs(app.extensions["profile_directory"].db, db)

    @patch("groupchat.firestore.client")
    @patch("firebase_admin.initialize_app")
    def test_testing_mode_uses_default_client(
        self, mock_init_app, mock_client
    ) -> None:
        mock_client.return_value = MagicMock()

        app = create_app({"TESTING": True})

        mock_init_app.assert_not_called()
        service = app.extensions["group_service"]
        self.assertIs(service.store.db, mock_client.return_value)

    def test_config_from_environment(self) -> None:
        env = {
            "SECRET_KEY": "s3cret",
            "CORS_ORIGIN": "https://chat.example.com",
            "GROUP_PICTURE_POOL_SIZE": "12",
        }
        with patch.dict(os.environ, env):
            app = create_app({"TESTING": True}, db=MockFirestore())

        self.assertEqual(app.config["SECRET_KEY"], "s3cret")
        self.assertEqual(app.config["CORS_ORIGIN"], "https://chat.example.com")
        self.assertEqual(app.extensions["group_service"].picture_pool_size, 12)

    def test_test_config_overrides_environment(self) -> None:
        with patch.dict(os.environ, {"SECRET_KEY": "from-env"}):
            app = create_app(
                {"TESTING": True, "SECRET_KEY": "from-test"}, db=MockFirestore()
            )

        self.assertEqual(app.config["SECRET_KEY"], "from-test")


if __name__ == "__main__":
    unittest.main()
