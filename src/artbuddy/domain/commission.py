"""Commission — a piece of work ordered by a customer.

A commission is owned by exactly one customer's commission list. It keeps
the owner's :class:`Name` as a lookup key, never a reference to the
customer object, so editing a customer can never leave a commission
pointing at a stale instance. The key is written only by
:class:`~artbuddy.domain.customer.Customer` when the commission enters or
leaves its list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar

from artbuddy.domain.errors import PreconditionError, require, require_type
from artbuddy.domain.iteration import Iteration
from artbuddy.domain.unique_list import ReadOnlyListView, UniqueEntityList
from artbuddy.domain.values import CompletionStatus, Deadline, Description, Fee, Name, Tag, Title

if TYPE_CHECKING:
    from artbuddy.domain.customer import Customer

_EDITABLE_FIELDS = frozenset({"title", "fee", "deadline", "status", "description", "tags"})


class Commission:
    """A customer's commission with its iterations.

    Identity is the title. Uniqueness is enforced per customer by the
    customer's commission list, so two customers may each have a
    commission titled "Portrait".
    """

    kind: ClassVar[str] = "commission"

    def __init__(
        self,
        *,
        title: Title,
        fee: Fee,
        deadline: Deadline,
        status: CompletionStatus,
        description: Description | None = None,
        tags: Iterable[Tag] = (),
        iterations: Iterable[Iteration] = (),
    ) -> None:
        self._title = require_type(title, Title, "title")
        self._fee = require_type(fee, Fee, "fee")
        self._deadline = require_type(deadline, Deadline, "deadline")
        self._status = require_type(status, CompletionStatus, "status")
        if description is not None:
            require_type(description, Description, "description")
        self._description = description
        self._tags = frozenset(require_type(t, Tag, "tag") for t in require(tags, "tags"))
        self._iterations: UniqueEntityList[Iteration] = UniqueEntityList(
            Iteration.is_same, iterations
        )
        self._owner: Name | None = None

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def title(self) -> Title:
        return self._title

    @property
    def fee(self) -> Fee:
        return self._fee

    @property
    def deadline(self) -> Deadline:
        return self._deadline

    @property
    def status(self) -> CompletionStatus:
        return self._status

    @property
    def description(self) -> Description | None:
        return self._description

    @property
    def tags(self) -> frozenset[Tag]:
        return self._tags

    @property
    def owner(self) -> Name | None:
        """Name of the customer whose list holds this commission."""
        return self._owner

    @property
    def identity_label(self) -> str:
        return str(self._title)

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def belongs_to(self, customer: Customer | None) -> bool:
        """Return True if *customer* is this commission's owner."""
        return customer is not None and self._owner is not None and self._owner == customer.name

    def _set_owner(self, owner: Name | None) -> None:
        self._owner = owner

    # ------------------------------------------------------------------
    # Iterations
    # ------------------------------------------------------------------

    @property
    def iterations(self) -> ReadOnlyListView[Iteration]:
        return self._iterations.as_read_only()

    def has_iteration(self, iteration: Iteration) -> bool:
        return self._iterations.contains(iteration)

    def add_iteration(self, iteration: Iteration) -> None:
        self._iterations.add(require_type(iteration, Iteration, "iteration"))

    def set_iteration(self, target: Iteration, edited: Iteration) -> None:
        self._iterations.set_element(target, require_type(edited, Iteration, "edited"))

    def remove_iteration(self, target: Iteration) -> None:
        self._iterations.remove(target)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def _fields(self) -> dict[str, Any]:
        return {
            "title": self._title,
            "fee": self._fee,
            "deadline": self._deadline,
            "status": self._status,
            "description": self._description,
            "tags": self._tags,
        }

    def with_changes(self, **changes: Any) -> Commission:
        """Return an unowned copy with *changes* applied.

        Iterations carry over. The copy gets its owner when it replaces
        this commission in a customer's list.
        """
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            msg = f"Unknown commission fields: {', '.join(sorted(unknown))}"
            raise PreconditionError(msg)
        fields = self._fields()
        fields.update(changes)
        return Commission(**fields, iterations=self._iterations)

    def clone(self) -> Commission:
        """Structurally equal copy, including the owner key."""
        copy = Commission(**self._fields(), iterations=self._iterations)
        copy._set_owner(self._owner)
        return copy

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def is_same(self, other: Commission | None) -> bool:
        """Weaker equality used for duplicate detection: same title."""
        if other is self:
            return True
        return isinstance(other, Commission) and other.title == self.title

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Commission):
            return NotImplemented
        return (
            self._fields() == other._fields()
            and self._owner == other._owner
            and self._iterations == other._iterations
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Commission(title={self._title.value!r}, owner={self._owner!r})"

    def __str__(self) -> str:
        parts = [
            str(self._title),
            f"Fee: {self._fee}",
            f"Deadline: {self._deadline}",
            f"Status: {self._status}",
        ]
        if self._description is not None:
            parts.append(f"Description: {self._description}")
        if self._tags:
            parts.append("Tags: " + ", ".join(sorted(str(t) for t in self._tags)))
        return "; ".join(parts)
