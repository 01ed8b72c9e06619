"""AddressBook — the store owning every customer and, through them, every commission.

Customer operations delegate to a ``UniqueEntityList[Customer]``.
Commission operations are scoped to a caller-supplied customer: the store
resolves the stored customer with the same identity and works on that
customer's own commission list, so commission titles only need to be
unique per customer.

The store holds no selection state; the model manager supplies the
customer in scope.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from artbuddy.domain.commission import Commission
from artbuddy.domain.customer import Customer
from artbuddy.domain.errors import EntityNotFoundError, require, require_type
from artbuddy.domain.unique_list import ReadOnlyListView, UniqueEntityList
from artbuddy.domain.values import Name


class AddressBook:
    """Wraps all data at the address-book level.

    Duplicates are not allowed (by :meth:`Customer.is_same`).
    """

    def __init__(self, customers: AddressBook | Iterable[Customer] = ()) -> None:
        self._customers: UniqueEntityList[Customer] = UniqueEntityList(Customer.is_same)
        self.reset_data(customers)

    # ------------------------------------------------------------------
    # List overwrite
    # ------------------------------------------------------------------

    def reset_data(self, source: AddressBook | Iterable[Customer]) -> None:
        """Replace all customers with those of *source*.

        Raises:
            PreconditionError: *source* is None.
            DuplicateEntitiesError: *source* holds is-same customers.
        """
        require(source, "source")
        incoming = list(source.customers if isinstance(source, AddressBook) else source)
        for customer in incoming:
            require_type(customer, Customer, "customer")
        self._customers.set_all(incoming)
        for customer in incoming:
            customer.claim_commissions()

    def snapshot(self) -> list[Customer]:
        """Deep copies of every customer, detached from this store."""
        return [customer.clone() for customer in self._customers]

    # ------------------------------------------------------------------
    # Customer-level operations
    # ------------------------------------------------------------------

    @property
    def customers(self) -> ReadOnlyListView[Customer]:
        return self._customers.as_read_only()

    def has_customer(self, customer: Customer) -> bool:
        """Return True if a customer with the same identity is stored."""
        return self._customers.contains(require(customer, "customer"))

    def find_customer(self, customer: Customer) -> Customer | None:
        return self._customers.find(require(customer, "customer"))

    def get_customer(self, name: Name) -> Customer | None:
        """Look up a stored customer by its identity key."""
        require_type(name, Name, "name")
        return next((c for c in self._customers if c.name == name), None)

    def add_customer(self, customer: Customer) -> None:
        self._customers.add(require_type(customer, Customer, "customer"))
        customer.claim_commissions()

    def set_customer(self, target: Customer, edited: Customer) -> None:
        """Replace *target* with *edited*, re-keying the commissions *edited* owns."""
        require_type(edited, Customer, "edited")
        self._customers.set_element(target, edited)
        edited.claim_commissions()

    def remove_customer(self, key: Customer) -> None:
        self._customers.remove(key)

    # ------------------------------------------------------------------
    # Commission-level operations (scoped to one customer)
    # ------------------------------------------------------------------

    def _owner(self, customer: Customer) -> Customer:
        stored = self.find_customer(customer)
        if stored is None:
            raise EntityNotFoundError(customer)
        return stored

    def has_commission(self, customer: Customer, commission: Commission) -> bool:
        require(commission, "commission")
        return self._owner(customer).has_commission(commission)

    def add_commission(self, customer: Customer, commission: Commission) -> None:
        self._owner(customer).add_commission(commission)

    def set_commission(self, customer: Customer, target: Commission, edited: Commission) -> None:
        self._owner(customer).set_commission(target, edited)

    def remove_commission(self, customer: Customer, key: Commission) -> None:
        self._owner(customer).remove_commission(key)

    def iter_commissions(self) -> Iterator[Commission]:
        """Every commission of every customer, in customer order."""
        for customer in self._customers:
            yield from customer.commissions

    # ------------------------------------------------------------------
    # Util
    # ------------------------------------------------------------------

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Notify *listener* whenever the customer list changes."""
        return self._customers.subscribe(listener)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._customers == other._customers

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AddressBook({len(self._customers)} customers)"
