"""Model error taxonomy.

Two families with different handling rules:

- :class:`ModelError` subclasses are user-recoverable. The service layer
  turns them into a ``ServiceResult`` error carrying ``code``.
- :class:`PreconditionError` marks a caller bug (missing argument, wrong
  type, selecting a commission of another customer). It always propagates.

INVARIANT: every operation that raises leaves the model unchanged.
"""

from __future__ import annotations

from typing import Any, ClassVar


def describe_entity(entity: Any) -> tuple[str, str]:
    """Return ``(kind, identity label)`` for error messages."""
    kind = getattr(entity, "kind", type(entity).__name__.lower())
    label = getattr(entity, "identity_label", None)
    return kind, str(label if label is not None else entity)


class PreconditionError(ValueError):
    """A required argument is missing or violates the caller contract."""


class InvalidValueError(ValueError):
    """User input does not satisfy a value type's constraints."""


class ModelError(Exception):
    """Base class for user-recoverable model failures."""

    code: ClassVar[str] = "MODEL_ERROR"


class DuplicateEntityError(ModelError):
    """Adding or editing would put two is-same entities in one list."""

    code: ClassVar[str] = "DUPLICATE"

    def __init__(self, entity: Any) -> None:
        self.entity = entity
        kind, label = describe_entity(entity)
        super().__init__(f"This {kind} already exists: {label}")


class DuplicateEntitiesError(ModelError):
    """A bulk replacement contains is-same entities."""

    code: ClassVar[str] = "DUPLICATES"

    def __init__(self, kind: str, labels: list[str]) -> None:
        self.labels = labels
        super().__init__(f"Duplicate {kind} entries: {', '.join(labels)}")


class EntityNotFoundError(ModelError):
    """An edit or remove target has no is-same match.

    *kind* names the entity type when *entity* is only a lookup key.
    """

    code: ClassVar[str] = "NOT_FOUND"

    def __init__(self, entity: Any, kind: str | None = None) -> None:
        self.entity = entity
        kind, label = (kind, str(entity)) if kind else describe_entity(entity)
        super().__init__(f"No {kind} found: {label}")


class NoActiveCustomerError(ModelError):
    """The operation needs an active customer and none is selected."""

    code: ClassVar[str] = "NO_ACTIVE_CUSTOMER"

    def __init__(self) -> None:
        super().__init__("No customer selected. Select a customer first.")


class NoActiveCommissionError(ModelError):
    """The operation needs an active commission and none is selected."""

    code: ClassVar[str] = "NO_ACTIVE_COMMISSION"

    def __init__(self) -> None:
        super().__init__("No commission selected. Select a commission first.")


def require(value: Any, name: str) -> Any:
    """Return *value*, raising :class:`PreconditionError` if it is ``None``."""
    if value is None:
        msg = f"{name} must not be None"
        raise PreconditionError(msg)
    return value


def require_type(value: Any, expected: type, name: str) -> Any:
    """Return *value* if it is an instance of *expected*.

    ``None`` and wrong types both raise :class:`PreconditionError`.
    """
    require(value, name)
    if not isinstance(value, expected):
        msg = f"{name} must be {expected.__name__}, got {type(value).__name__}"
        raise PreconditionError(msg)
    return value
