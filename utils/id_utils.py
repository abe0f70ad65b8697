"""
Identifier utilities for tree nodes.

Node ids default to MongoDB-style ObjectIds (24 hex characters). Any
zero-argument callable returning a fresh string can be used instead.
"""
import secrets
import uuid
from typing import Callable

IdGenerator = Callable[[], str]


def generate_object_id() -> str:
    """Generate a MongoDB-style ObjectId string from 12 random bytes."""
    return secrets.token_hex(12)


def generate_uuid() -> str:
    """Generate UUID string for primary keys."""
    return str(uuid.uuid4())


class SequentialIdGenerator:
    """
    Deterministic id generator producing ``<prefix><n>`` with n counting up.

    Useful wherever output must not depend on random ids (tests, diffs).
    """

    def __init__(self, prefix: str = "node-", start: int = 1, width: int = 4):
        self.prefix = prefix
        self.width = width
        self._next = start

    def __call__(self) -> str:
        node_id = f"{self.prefix}{str(self._next).zfill(self.width)}"
        self._next += 1
        return node_id
