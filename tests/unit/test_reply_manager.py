"""Tests for ReplyManager."""

from unittest.mock import MagicMock

import pytest

from core.exceptions import InvalidIdentifierError, NotFoundError, ValidationError
from core.outcomes import Empty, Items
from utils.reply_manager import ReplyManager


class TestCreateReply:
    """Test suite for ReplyManager.create_reply."""

    def test_create_reply(self, reply_manager, thread, teacher):
        reply = reply_manager.create_reply(str(thread.thread_id), teacher.user_id, "Good question")

        assert reply.reply_id is not None
        assert reply.thread_id == thread.thread_id
        assert reply.user_id == teacher.user_id
        assert reply.correct is False

    @pytest.mark.parametrize("content", [None, "", "i", "a" * 501, 42])
    def test_invalid_content(self, reply_manager, thread, teacher, content):
        with pytest.raises(ValidationError) as exc_info:
            reply_manager.create_reply(thread.thread_id, teacher.user_id, content)

        assert exc_info.value.error == "Invalid content."

    def test_missing_user(self, reply_manager, thread):
        with pytest.raises(ValidationError) as exc_info:
            reply_manager.create_reply(thread.thread_id, None, "Good question")

        assert exc_info.value.error == (
            "Missing required fields: user_id and content are required."
        )

    def test_unknown_thread(self, reply_manager, teacher):
        with pytest.raises(NotFoundError) as exc_info:
            reply_manager.create_reply("77", teacher.user_id, "Good question")

        assert exc_info.value.error == "Thread with ID 77 not found."

    def test_unknown_user(self, reply_manager, thread):
        with pytest.raises(NotFoundError) as exc_info:
            reply_manager.create_reply(thread.thread_id, 999, "Good question")

        assert exc_info.value.error == "User with ID 999 not found."


class TestGetReply:
    """Test suite for fetching replies."""

    def test_get_reply(self, reply_manager, reply):
        fetched = reply_manager.get_reply(str(reply.reply_id))

        assert fetched.content == "Check the course page."

    def test_missing_reply(self, reply_manager):
        with pytest.raises(NotFoundError) as exc_info:
            reply_manager.get_reply("31")

        assert exc_info.value.error == "Reply with ID 31 not found."

    @pytest.mark.parametrize("raw", ["-5", "reply", "2147483648"])
    def test_malformed_id_fails_before_storage_access(self, raw):
        db = MagicMock()

        with pytest.raises(InvalidIdentifierError) as exc_info:
            ReplyManager(db).get_reply(raw)

        assert exc_info.value.error == "Invalid Reply ID."
        db.query.assert_not_called()

    def test_without_id_returns_every_reply(self, reply_manager, reply):
        assert [r.reply_id for r in reply_manager.get_reply()] == [reply.reply_id]

    def test_without_id_and_no_replies_returns_empty_list(self, reply_manager):
        assert reply_manager.get_reply() == []

    def test_list_replies_empty_is_not_found_outcome(self, reply_manager):
        outcome = reply_manager.list_replies()

        assert isinstance(outcome, Empty)
        assert outcome.message == "No replies found in the database"


class TestScopedListings:
    """Test suite for listings scoped by thread and/or user."""

    def test_by_thread(self, reply_manager, reply, thread):
        outcome = reply_manager.list_replies_for_thread(thread.thread_id)

        assert isinstance(outcome, Items)
        assert [r.reply_id for r in outcome.items] == [reply.reply_id]

    def test_by_thread_without_replies(self, reply_manager, thread):
        outcome = reply_manager.list_replies_for_thread(thread.thread_id)

        assert isinstance(outcome, Empty)
        assert outcome.message == f"No replies found for thread with ID {thread.thread_id}."

    def test_by_unknown_thread(self, reply_manager):
        with pytest.raises(NotFoundError):
            reply_manager.list_replies_for_thread("8")

    def test_by_user(self, reply_manager, reply, teacher):
        outcome = reply_manager.list_replies_for_user(teacher.user_id)

        assert isinstance(outcome, Items)

    def test_by_user_without_replies(self, reply_manager, reply, student):
        assert isinstance(reply_manager.list_replies_for_user(student.user_id), Empty)

    def test_by_unknown_user(self, reply_manager):
        with pytest.raises(NotFoundError) as exc_info:
            reply_manager.list_replies_for_user("8")

        assert exc_info.value.error == "User with ID 8 not found."

    def test_by_thread_and_user(self, reply_manager, reply, thread, teacher):
        outcome = reply_manager.list_replies_for_thread_and_user(thread.thread_id, teacher.user_id)

        assert isinstance(outcome, Items)

    def test_by_thread_and_other_user(self, reply_manager, reply, thread, student):
        outcome = reply_manager.list_replies_for_thread_and_user(thread.thread_id, student.user_id)

        assert isinstance(outcome, Empty)

    def test_thread_is_checked_before_user(self, reply_manager):
        with pytest.raises(NotFoundError) as exc_info:
            reply_manager.list_replies_for_thread_and_user("5", "6")

        assert exc_info.value.error == "Thread with ID 5 not found."

    def test_missing_user_in_existing_thread(self, reply_manager, thread):
        with pytest.raises(NotFoundError) as exc_info:
            reply_manager.list_replies_for_thread_and_user(thread.thread_id, "6")

        assert exc_info.value.error == "User with ID 6 not found."


class TestUpdateReply:
    """Test suite for ReplyManager.update_reply."""

    def test_mark_correct(self, reply_manager, reply):
        updated = reply_manager.update_reply(reply.reply_id, {"correct": True})

        assert updated.correct is True

    def test_edit_content(self, reply_manager, reply):
        updated = reply_manager.update_reply(reply.reply_id, {"content": "Edited"})

        assert updated.content == "Edited"

    def test_unknown_fields(self, reply_manager, reply):
        with pytest.raises(ValidationError) as exc_info:
            reply_manager.update_reply(reply.reply_id, {"thread_id": 2, "content": "x y"})

        assert exc_info.value.error == "Invalid fields: thread_id"

    def test_empty_update(self, reply_manager, reply):
        with pytest.raises(ValidationError):
            reply_manager.update_reply(reply.reply_id, {})

    @pytest.mark.parametrize("content", ["", "   ", 3, None])
    def test_content_must_be_non_empty_string(self, reply_manager, reply, content):
        with pytest.raises(ValidationError) as exc_info:
            reply_manager.update_reply(reply.reply_id, {"content": content})

        assert exc_info.value.error == "Content must be a non-empty string."

    @pytest.mark.parametrize("correct", ["true", 1, None])
    def test_correct_must_be_boolean(self, reply_manager, reply, correct):
        with pytest.raises(ValidationError) as exc_info:
            reply_manager.update_reply(reply.reply_id, {"correct": correct})

        assert exc_info.value.error == "The 'correct' field must be a boolean value."

    def test_missing_reply(self, reply_manager):
        with pytest.raises(NotFoundError):
            reply_manager.update_reply("404", {"correct": True})


class TestDeleteReply:
    """Test suite for ReplyManager.delete_reply."""

    def test_delete_reply(self, reply_manager, reply):
        reply_id = reply.reply_id

        reply_manager.delete_reply(reply_id)

        with pytest.raises(NotFoundError):
            reply_manager.get_reply(reply_id)

    def test_delete_missing_reply(self, reply_manager):
        with pytest.raises(NotFoundError) as exc_info:
            reply_manager.delete_reply(1)

        assert exc_info.value.error == "Reply not found"
