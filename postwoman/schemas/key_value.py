"""
Ordered, toggleable key/value records used for headers, query parameters
and form fields.
"""

from typing import Iterable
from uuid import uuid4

from pydantic import BaseModel, Field


class KeyValuePair(BaseModel):
    """
    A key/value pair with an enable flag.

    ``id`` only identifies the row inside the editor; it takes no part in
    equality, so two pairs holding the same key, value and flag compare equal.
    """
    id: str = Field(default_factory=lambda: str(uuid4()))
    key: str = ""
    value: str = ""
    is_enabled: bool = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyValuePair):
            return NotImplemented
        return (
            self.key == other.key
            and self.value == other.value
            and self.is_enabled == other.is_enabled
        )


def enabled_pairs(pairs: Iterable[KeyValuePair]) -> list[KeyValuePair]:
    """Return the pairs that take effect: enabled and with a non-empty key, in order."""
    return [pair for pair in pairs if pair.is_enabled and pair.key]
