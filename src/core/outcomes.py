"""Tagged results of list operations.

Managers never raise for an empty collection. They return ``Empty`` with the
message a client should see, or ``Items`` wrapping the rows, and the status
mapper decides between 404 and 200.
"""

from typing import Any, List, Union


class Empty:
    """A listing that matched no rows."""

    def __init__(self, message: str):
        self.message = message

    def __repr__(self) -> str:
        return f"Empty({self.message!r})"


class Items:
    """A listing with at least one row."""

    def __init__(self, items: List[Any]):
        self.items = items

    def __repr__(self) -> str:
        return f"Items({len(self.items)} rows)"


Listing = Union[Empty, Items]


def to_listing(rows: List[Any], empty_message: str) -> Listing:
    """Wrap query results in the matching outcome."""
    if not rows:
        return Empty(empty_message)
    return Items(rows)
