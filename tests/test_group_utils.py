"""Tests for group blueprint helpers."""

import unittest
from datetime import datetime, timezone

from mockfirestore import MockFirestore

from groupchat import create_app
from groupchat.errors import ValidationError
from groupchat.group.forms import GroupForm, MemberForm
from groupchat.group.services import LoggingChannelDirectory
from groupchat.group.utils import serialize_group, validated_json_form


class TestSerializeGroup(unittest.TestCase):
    def test_timestamps_become_iso_strings(self):
        created = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
        group = {"id": "g1", "createdAt": created, "updatedAt": created}

        data = serialize_group(group)

        self.assertEqual(data["createdAt"], "2024-03-01T12:30:00+00:00")
        self.assertEqual(data["updatedAt"], "2024-03-01T12:30:00+00:00")
        self.assertIs(group["createdAt"], created)


class TestValidatedJsonForm(unittest.TestCase):
    def setUp(self):
        self.app = create_app({"TESTING": True}, db=MockFirestore())

    def test_members_keep_order_and_drop_blanks(self):
        body = {"name": "Group", "members": ["u2", " ", "u3", 7]}
        with self.app.test_request_context(method="POST", json=body):
            form = validated_json_form(GroupForm)

        self.assertEqual(form.members.data, ["u2", "u3", "7"])
        self.assertFalse(form.groupPic.data)

    def test_first_error_is_raised(self):
        with self.app.test_request_context(method="DELETE", json={"userId": ""}):
            with self.assertRaises(ValidationError) as ctx:
                validated_json_form(MemberForm)

        self.assertEqual(ctx.exception.message, "User ID is required")

    def test_missing_body(self):
        with self.app.test_request_context(method="POST"):
            with self.assertRaises(ValidationError):
                validated_json_form(MemberForm)


class TestLoggingChannelDirectory(unittest.TestCase):
    def test_logs_channel_changes(self):
        directory = LoggingChannelDirectory()
        logger_name = "groupchat.group.services.channels"

        with self.assertLogs(logger_name, level="INFO") as logs:
            directory.sync_channel("group-1-abc", ["u1", "u2"])
            directory.close_channel("group-1-abc")

        self.assertIn("group-1-abc members: u1, u2", logs.output[0])
        self.assertIn("group-1-abc closed", logs.output[1])


if __name__ == "__main__":
    unittest.main()
