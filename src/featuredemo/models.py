# src/featuredemo/models.py
"""
Value types used by the demos.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidUserError

logger = logging.getLogger(__name__)


@dataclass
class Area:
    """An area code paired with a place name."""
    code: int
    name: str

    def describe(self) -> str:
        return f"Area code is {self.code}, name is {self.name}."

    def __str__(self):
        return self.describe()

    def __format__(self, format_spec):
        # f"{area}" and str(area) must agree, so both go through describe()
        return format(self.describe(), format_spec)


class User:
    """A user whose id is never negative.

    ``User.create`` returns None for a negative id, while the constructor and
    the ``id`` setter raise :class:`InvalidUserError`.
    """

    def __init__(self, id: int):
        self.id = id

    def __repr__(self):
        return f"User(id={self._id})"

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    def id(self, value: int):
        if value < 0:
            raise InvalidUserError(value)
        self._id = value

    @classmethod
    def create(cls, id: int) -> Optional["User"]:
        """Build a user, or return None when ``id`` is negative."""
        if id < 0:
            return None
        return cls(id)

    def get_messages(self) -> str:
        # Subclasses may store _id without going through the setter
        if self._id < 0:
            raise InvalidUserError(self._id)
        return "No messages"


def try_messages(user: Optional[User]) -> Optional[str]:
    """Return the user's messages, or None.

    None covers both a missing user and a failed ``get_messages`` call; the
    two cases are deliberately indistinguishable.
    """
    if user is None:
        return None
    try:
        return user.get_messages()
    except InvalidUserError as exc:
        logger.info("Discarding message lookup failure: %s", exc)
        return None
