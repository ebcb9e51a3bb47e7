"""Tests for the outcome to HTTP status mapping."""

import pytest
from fastapi import status

from core.exceptions import (
    AuthError,
    ConflictError,
    InvalidIdentifierError,
    NotFoundError,
    ValidationError,
)
from core.outcomes import Empty, Items, to_listing
from core.status_mapper import deleted_body, error_body, resolve_listing, status_for


class TestStatusFor:
    """Test suite for status_for."""

    @pytest.mark.parametrize(
        "exc,expected",
        [
            (ValidationError("Missing required fields"), status.HTTP_400_BAD_REQUEST),
            (InvalidIdentifierError("reply_id"), status.HTTP_401_UNAUTHORIZED),
            (AuthError("Invalid credentials"), status.HTTP_401_UNAUTHORIZED),
            (NotFoundError("Thread not found"), status.HTTP_404_NOT_FOUND),
            (ConflictError("Email already exists"), status.HTTP_409_CONFLICT),
        ],
    )
    def test_maps_each_error_kind(self, exc, expected):
        assert status_for(exc) == expected


class TestEnvelopes:
    """Test suite for the JSON bodies."""

    def test_error_body_without_message(self):
        assert error_body("User not found") == {"error": "User not found"}

    def test_error_body_with_message(self):
        assert error_body("Invalid fields", "The following fields are not valid: a") == {
            "error": "Invalid fields",
            "message": "The following fields are not valid: a",
        }

    def test_deleted_body(self):
        assert deleted_body("Reply") == {"message": "Reply successfully deleted"}


class TestListings:
    """Test suite for Empty / Items handling."""

    def test_to_listing_wraps_rows(self):
        outcome = to_listing([1, 2], "nothing")

        assert isinstance(outcome, Items)
        assert outcome.items == [1, 2]

    def test_to_listing_marks_empty(self):
        outcome = to_listing([], "No threads available at the moment.")

        assert isinstance(outcome, Empty)
        assert outcome.message == "No threads available at the moment."

    def test_resolve_listing_returns_items(self):
        assert resolve_listing(Items(["a"])) == ["a"]

    def test_resolve_listing_raises_not_found_for_empty(self):
        with pytest.raises(NotFoundError) as exc_info:
            resolve_listing(Empty("No current users"))

        assert exc_info.value.error == "No current users"
