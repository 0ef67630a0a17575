# rolodex/domain/errors.py
from __future__ import annotations


class RolodexError(Exception):
    """Base class for domain errors raised by the record stores."""


class NullRequestError(RolodexError, ValueError):
    """A required request/argument was None."""

    def __init__(self, argument: str):
        super().__init__(f"{argument} can't be None")
        self.argument = argument


class ValidationError(RolodexError, ValueError):
    """A field rule was violated; message is user-facing."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or [message]


class DuplicateError(RolodexError, ValueError):
    """Business rule: the value already exists."""


class NotFoundError(RolodexError, ValueError):
    """Business rule: no record with the given id."""
