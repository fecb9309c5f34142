# src/featuredemo/exceptions.py
"""Exception hierarchy for featuredemo.

Every package specific exception inherits from :class:`FeatureDemoError` so
callers can catch one base class when the failure mode does not matter.
"""

from .enums import UserError


class FeatureDemoError(Exception):
    """Base exception for the package."""


class InvalidUserError(FeatureDemoError):
    """Raised when a User would hold a negative id."""

    code = UserError.INVALID_ID

    def __init__(self, user_id: int):
        super().__init__(f"invalid user id {user_id}")
        self.user_id = user_id


class LiteralSyntaxError(FeatureDemoError, ValueError):
    """Raised when a raw literal cannot be parsed or rendered.

    Covers mismatched ``#`` delimiters, unknown escape characters and
    interpolation of a name that was not supplied.
    """


class ResultError(FeatureDemoError):
    """Raised by ``Result.get()`` when the failure payload is not an exception."""

    def __init__(self, error):
        super().__init__(f"result holds failure {error!r}")
        self.error = error
