"""Customer — top-level entity that owns its commissions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from artbuddy.domain.commission import Commission
from artbuddy.domain.errors import PreconditionError, require, require_type
from artbuddy.domain.unique_list import ReadOnlyListView, UniqueEntityList
from artbuddy.domain.values import Address, Email, Name, Phone, Tag, Title

_EDITABLE_FIELDS = frozenset({"name", "phone", "email", "address", "tags"})


class Customer:
    """A customer and the commissions they ordered.

    Identity is the name, compared case-sensitively. The customer
    exclusively owns its commission list: every commission in it carries
    this customer's name as its owner key, and losing a commission from the
    list clears that key. A commission held by another customer is refused.
    """

    kind: ClassVar[str] = "customer"

    def __init__(
        self,
        *,
        name: Name,
        phone: Phone,
        email: Email,
        address: Address | None = None,
        tags: Iterable[Tag] = (),
        commissions: Iterable[Commission] = (),
    ) -> None:
        self._name = require_type(name, Name, "name")
        self._phone = require_type(phone, Phone, "phone")
        self._email = require_type(email, Email, "email")
        if address is not None:
            require_type(address, Address, "address")
        self._address = address
        self._tags = frozenset(require_type(t, Tag, "tag") for t in require(tags, "tags"))
        self._commissions: UniqueEntityList[Commission] = UniqueEntityList(Commission.is_same)
        for commission in require(commissions, "commissions"):
            self.add_commission(commission)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def name(self) -> Name:
        return self._name

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def email(self) -> Email:
        return self._email

    @property
    def address(self) -> Address | None:
        return self._address

    @property
    def tags(self) -> frozenset[Tag]:
        return self._tags

    @property
    def identity_label(self) -> str:
        return str(self._name)

    # ------------------------------------------------------------------
    # Owned commissions
    # ------------------------------------------------------------------

    @property
    def commissions(self) -> ReadOnlyListView[Commission]:
        return self._commissions.as_read_only()

    def has_commission(self, commission: Commission) -> bool:
        return self._commissions.contains(commission)

    def find_commission(self, commission: Commission) -> Commission | None:
        return self._commissions.find(commission)

    def get_commission(self, title: Title) -> Commission | None:
        """Look up an owned commission by its identity key."""
        require_type(title, Title, "title")
        return next((c for c in self._commissions if c.title == title), None)

    def _check_unclaimed(self, commission: Commission) -> None:
        if commission.owner is not None and commission.owner != self._name:
            msg = f"Commission {commission.title} already belongs to {commission.owner}"
            raise PreconditionError(msg)

    def add_commission(self, commission: Commission) -> None:
        """Take ownership of *commission*.

        Raises:
            PreconditionError: *commission* is held by another customer.
            DuplicateEntityError: A commission with the same title is owned already.
        """
        self._check_unclaimed(require_type(commission, Commission, "commission"))
        self._commissions.add(commission)
        commission._set_owner(self._name)

    def set_commission(self, target: Commission, edited: Commission) -> None:
        self._check_unclaimed(require_type(edited, Commission, "edited"))
        previous = self._commissions.find(require(target, "target"))
        self._commissions.set_element(target, edited)
        if previous is not None and previous is not edited:
            previous._set_owner(None)
        edited._set_owner(self._name)

    def remove_commission(self, target: Commission) -> None:
        previous = self._commissions.find(require(target, "target"))
        self._commissions.remove(target)
        if previous is not None:
            previous._set_owner(None)

    def claim_commissions(self) -> None:
        """Re-stamp every owned commission with this customer's name."""
        for commission in self._commissions:
            commission._set_owner(self._name)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def _fields(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "phone": self._phone,
            "email": self._email,
            "address": self._address,
            "tags": self._tags,
        }

    def with_changes(self, **changes: Any) -> Customer:
        """Return an edited copy owning clones of this customer's commissions.

        The original and its commissions are left untouched, so a rejected
        edit changes nothing.
        """
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            msg = f"Unknown customer fields: {', '.join(sorted(unknown))}"
            raise PreconditionError(msg)
        fields = self._fields()
        fields.update(changes)
        return Customer(**fields, commissions=[c.with_changes() for c in self._commissions])

    def clone(self) -> Customer:
        """Deep, structurally equal copy of the customer and its commissions."""
        return self.with_changes()

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def is_same(self, other: Customer | None) -> bool:
        """Weaker equality used for duplicate detection: same name."""
        if other is self:
            return True
        return isinstance(other, Customer) and other.name == self.name

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Customer):
            return NotImplemented
        return self._fields() == other._fields() and self._commissions == other._commissions

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Customer(name={self._name.value!r}, commissions={len(self._commissions)})"

    def __str__(self) -> str:
        parts = [str(self._name), f"Phone: {self._phone}", f"Email: {self._email}"]
        if self._address is not None:
            parts.append(f"Address: {self._address}")
        if self._tags:
            parts.append("Tags: " + ", ".join(sorted(str(t) for t in self._tags)))
        return "; ".join(parts)
