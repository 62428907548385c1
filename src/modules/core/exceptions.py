"""Condition taxonomy shared by every service.

Services raise these to signal that a request cannot be satisfied.
The API exception handler (``modules.core.exception_handler``) maps
each kind to a client-error response; anything that is not one of
these kinds is treated as an unexpected server error.
"""

from __future__ import annotations


class NotFound(Exception):
    """The requested entity does not exist."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgument(Exception):
    """A request parameter is malformed or out of range.

    ``field`` names the offending parameter so callers can point the
    user at it without parsing the message.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(message)
