"""Immutable scalar value types.

Every value validates at construction and never changes afterwards.
Text-backed values expose ``is_valid(text)`` so callers can check input
before constructing; parsed values (fee, dates, status) expose
``parse(text)`` which raises :class:`InvalidValueError` with the type's
``MESSAGE_CONSTRAINTS``.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Self

from artbuddy.domain.errors import InvalidValueError, PreconditionError, require

# ASCII letter/digit first, then ASCII letters, digits and spaces.
_ALNUM_WITH_SPACES = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE = re.compile(r"[0-9]{3,}")
_EMAIL_LOCAL = r"[A-Za-z0-9](?:[A-Za-z0-9+_.-]*[A-Za-z0-9])?"
_DOMAIN_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_DOMAIN_LAST = r"[A-Za-z0-9][A-Za-z0-9-]*[A-Za-z0-9]"
_EMAIL = re.compile(rf"{_EMAIL_LOCAL}@(?:{_DOMAIN_LABEL}\.)*{_DOMAIN_LAST}")


# ---------------------------------------------------------------------------
# Text-backed values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextValue:
    """Base for values wrapping a validated string."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Value should not be blank"

    def __post_init__(self) -> None:
        require(self.value, type(self).__name__)
        if not isinstance(self.value, str):
            msg = f"{type(self).__name__} expects str, got {type(self.value).__name__}"
            raise PreconditionError(msg)
        if not self.is_valid(self.value):
            raise InvalidValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        """Non-blank check; subclasses tighten it."""
        return bool(text.strip())

    def __str__(self) -> str:
        return self.value


class Name(TextValue):
    """Customer name. Identity key of a customer (case-sensitive)."""

    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return _ALNUM_WITH_SPACES.fullmatch(text) is not None


class Phone(TextValue):
    MESSAGE_CONSTRAINTS = "Phone numbers should only contain numbers, and be at least 3 digits long"

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return _PHONE.fullmatch(text) is not None


class Email(TextValue):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain. The local part holds "
        "alphanumerics and +_.- but must not start or end with a special character. "
        "The domain is made of labels separated by periods; labels start and end "
        "with alphanumerics and the last label is at least 2 characters long"
    )

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return _EMAIL.fullmatch(text) is not None


class Address(TextValue):
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"


class Tag(TextValue):
    """Free-form label attached to customers and commissions."""

    MESSAGE_CONSTRAINTS = "Tags should only contain alphanumeric characters and spaces"

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return _ALNUM_WITH_SPACES.fullmatch(text) is not None


class Title(TextValue):
    """Commission title. Identity key of a commission within one customer."""

    MESSAGE_CONSTRAINTS = "Titles can take any values, and it should not be blank"


class Description(TextValue):
    MESSAGE_CONSTRAINTS = "Descriptions can take any values, and it should not be blank"


class ImagePath(TextValue):
    MESSAGE_CONSTRAINTS = "Image paths should not be blank"


class Feedback(TextValue):
    MESSAGE_CONSTRAINTS = "Feedback can take any values, and it should not be blank"


# ---------------------------------------------------------------------------
# Parsed values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fee:
    """Non-negative commission fee."""

    value: float

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Fees should be non-negative numbers"

    def __post_init__(self) -> None:
        require(self.value, "Fee")
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            msg = f"Fee expects a number, got {type(self.value).__name__}"
            raise PreconditionError(msg)
        if not math.isfinite(self.value) or self.value < 0:
            raise InvalidValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        try:
            number = float(text)
        except ValueError:
            return False
        return math.isfinite(number) and number >= 0

    @classmethod
    def parse(cls, text: str) -> Self:
        if not cls.is_valid(text):
            raise InvalidValueError(cls.MESSAGE_CONSTRAINTS)
        return cls(float(text))

    def __str__(self) -> str:
        return f"{self.value:.2f}"


@dataclass(frozen=True)
class DateValue:
    """Base for values wrapping a calendar date written as ``YYYY-MM-DD``."""

    value: date

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Dates should be in the format YYYY-MM-DD"

    def __post_init__(self) -> None:
        require(self.value, type(self).__name__)
        if not isinstance(self.value, date):
            msg = f"{type(self).__name__} expects a date"
            raise PreconditionError(msg)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        try:
            date.fromisoformat(text)
        except ValueError:
            return False
        return True

    @classmethod
    def parse(cls, text: str) -> Self:
        if not cls.is_valid(text):
            raise InvalidValueError(cls.MESSAGE_CONSTRAINTS)
        return cls(date.fromisoformat(text))

    def __str__(self) -> str:
        return self.value.isoformat()


class Deadline(DateValue):
    MESSAGE_CONSTRAINTS = "Deadlines should be dates in the format YYYY-MM-DD"


class IterationDate(DateValue):
    MESSAGE_CONSTRAINTS = "Iteration dates should be in the format YYYY-MM-DD"


_TRUE_WORDS = frozenset({"true", "yes", "y", "done"})
_FALSE_WORDS = frozenset({"false", "no", "n", "todo"})


@dataclass(frozen=True)
class CompletionStatus:
    """Whether a commission is finished."""

    value: bool

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Completion status should be true or false"

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            msg = f"CompletionStatus expects bool, got {type(self.value).__name__}"
            raise PreconditionError(msg)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return text.strip().lower() in _TRUE_WORDS | _FALSE_WORDS

    @classmethod
    def parse(cls, text: str) -> Self:
        word = text.strip().lower()
        if word in _TRUE_WORDS:
            return cls(True)
        if word in _FALSE_WORDS:
            return cls(False)
        raise InvalidValueError(cls.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return "Completed" if self.value else "In progress"
