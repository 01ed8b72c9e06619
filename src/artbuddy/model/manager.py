"""ModelManager — store, filtered views, selection, and preferences in one place.

Selection state machine over two slots:

- ``select_customer``: sets the active customer and unsets the active
  commission, from any state.
- ``select_commission``: needs an active customer (``NoActiveCustomerError``)
  and a commission that customer owns.
- Deleting the active customer unsets both slots; deleting the active
  commission unsets only the commission slot (``NoActiveCommissionError``
  when there is none).

INVARIANT: an active commission always belongs to the active customer.
INVARIANT: the commission view defaults to the active customer's commissions.

Observers subscribe to :class:`ModelEvent` notifications, published
synchronously inside the mutating call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from artbuddy.domain.commission import Commission
from artbuddy.domain.customer import Customer
from artbuddy.domain.errors import (
    EntityNotFoundError,
    NoActiveCommissionError,
    NoActiveCustomerError,
    PreconditionError,
    require,
)
from artbuddy.domain.iteration import Iteration
from artbuddy.domain.predicates import CommissionBelongsTo, Predicate, show_all, show_none
from artbuddy.model.address_book import AddressBook
from artbuddy.model.filtered import FilteredList
from artbuddy.model.user_prefs import GuiSettings, UserPrefs

logger = logging.getLogger(__name__)


class ModelEventKind(StrEnum):
    """What changed in the model."""

    CUSTOMERS_CHANGED = "customers_changed"
    COMMISSIONS_CHANGED = "commissions_changed"
    ITERATIONS_CHANGED = "iterations_changed"
    SELECTION_CHANGED = "selection_changed"
    FILTER_CHANGED = "filter_changed"
    CUSTOMER_UPDATED = "customer_updated"


@dataclass(frozen=True)
class ModelEvent:
    kind: ModelEventKind
    subject: Any = None


ModelListener = Callable[[ModelEvent], None]


class ModelManager:
    """In-memory model of the address book data.

    Args:
        address_book: Initial data. Its customers are adopted, not copied.
        user_prefs: Initial preferences, copied.
    """

    def __init__(
        self,
        address_book: AddressBook | None = None,
        user_prefs: UserPrefs | None = None,
    ) -> None:
        source = address_book if address_book is not None else AddressBook()
        prefs = user_prefs if user_prefs is not None else UserPrefs()
        logger.debug("Initializing with address book: %r and user prefs %r", source, prefs)

        self._address_book = AddressBook(source)
        self._user_prefs = prefs.model_copy(deep=True)
        self._active_customer: Customer | None = None
        self._active_commission: Commission | None = None
        self._listeners: list[ModelListener] = []

        self._filtered_customers: FilteredList[Customer] = FilteredList(
            lambda: self._address_book.customers
        )
        self._filtered_commissions: FilteredList[Commission] = FilteredList(
            self._address_book.iter_commissions, show_none
        )
        self._address_book.subscribe(
            lambda: self._publish(ModelEventKind.CUSTOMERS_CHANGED)
        )

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: ModelListener) -> Callable[[], None]:
        """Register *listener* for model events. Returns an unsubscribe callable."""
        self._listeners.append(require(listener, "listener"))

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, kind: ModelEventKind, subject: Any = None) -> None:
        event = ModelEvent(kind, subject)
        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # User prefs
    # ------------------------------------------------------------------

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs.reset_data(user_prefs)

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs.gui_settings = require(gui_settings, "gui_settings")

    @property
    def address_book_file_path(self) -> Path:
        return self._user_prefs.address_book_file_path

    def set_address_book_file_path(self, path: Path) -> None:
        self._user_prefs.address_book_file_path = require(path, "path")

    # ------------------------------------------------------------------
    # Address book
    # ------------------------------------------------------------------

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    def set_address_book(self, source: AddressBook) -> None:
        """Replace all data with *source*. Selection must be re-established."""
        self._address_book.reset_data(source)
        self.clear_selection()

    def has_customer(self, customer: Customer) -> bool:
        return self._address_book.has_customer(require(customer, "customer"))

    def add_customer(self, customer: Customer) -> None:
        self._address_book.add_customer(customer)
        self.update_filtered_customer_list(show_all)

    def delete_customer(self, target: Customer) -> None:
        self._address_book.remove_customer(target)
        if self._active_customer is not None and self._active_customer.is_same(target):
            self.clear_selection()

    def set_customer(self, target: Customer, edited: Customer) -> None:
        """Replace *target* with *edited*; an active *target* stays active as *edited*."""
        require(target, "target")
        self._address_book.set_customer(target, edited)
        if self._active_customer is None or not self._active_customer.is_same(target):
            return
        self._active_customer = edited
        if self._active_commission is not None:
            self._active_commission = edited.find_commission(self._active_commission)
        self.update_filtered_commission_list_to_active_customer()
        self._publish(ModelEventKind.SELECTION_CHANGED, edited)

    # ------------------------------------------------------------------
    # Commissions of the active customer
    # ------------------------------------------------------------------

    def _require_active_customer(self) -> Customer:
        if self._active_customer is None:
            raise NoActiveCustomerError()
        return self._active_customer

    def has_commission(self, commission: Commission) -> bool:
        customer = self._require_active_customer()
        return self._address_book.has_commission(customer, require(commission, "commission"))

    def add_commission(self, commission: Commission) -> None:
        customer = self._require_active_customer()
        self._address_book.add_commission(customer, commission)
        self._publish(ModelEventKind.COMMISSIONS_CHANGED, customer)

    def delete_commission(self, target: Commission) -> None:
        customer = self._require_active_customer()
        self._address_book.remove_commission(customer, target)
        if self._active_commission is not None and self._active_commission.is_same(target):
            self._active_commission = None
            self._publish(ModelEventKind.SELECTION_CHANGED, customer)
        self._publish(ModelEventKind.COMMISSIONS_CHANGED, customer)

    def delete_active_commission(self) -> None:
        """Delete the active commission; the active customer stays selected."""
        self.delete_commission(self._require_active_commission())

    def set_commission(self, target: Commission, edited: Commission) -> None:
        customer = self._require_active_customer()
        require(target, "target")
        self._address_book.set_commission(customer, target, edited)
        if self._active_commission is not None and self._active_commission.is_same(target):
            self._active_commission = edited
        self._publish(ModelEventKind.COMMISSIONS_CHANGED, customer)

    # ------------------------------------------------------------------
    # Iterations of the active commission
    # ------------------------------------------------------------------

    def _require_active_commission(self) -> Commission:
        if self._active_commission is None:
            raise NoActiveCommissionError()
        return self._active_commission

    def has_iteration(self, iteration: Iteration) -> bool:
        return self._require_active_commission().has_iteration(require(iteration, "iteration"))

    def add_iteration(self, iteration: Iteration) -> None:
        commission = self._require_active_commission()
        commission.add_iteration(iteration)
        self._publish(ModelEventKind.ITERATIONS_CHANGED, commission)

    def set_iteration(self, target: Iteration, edited: Iteration) -> None:
        commission = self._require_active_commission()
        commission.set_iteration(target, edited)
        self._publish(ModelEventKind.ITERATIONS_CHANGED, commission)

    def delete_iteration(self, target: Iteration) -> None:
        commission = self._require_active_commission()
        commission.remove_iteration(target)
        self._publish(ModelEventKind.ITERATIONS_CHANGED, commission)

    # ------------------------------------------------------------------
    # Filtered customer view
    # ------------------------------------------------------------------

    @property
    def filtered_customers(self) -> FilteredList[Customer]:
        """Live view of the customers matching the installed predicate."""
        return self._filtered_customers

    def update_filtered_customer_list(self, predicate: Predicate) -> None:
        self._filtered_customers.set_predicate(predicate)
        self._publish(ModelEventKind.FILTER_CHANGED, self._filtered_customers)

    # ------------------------------------------------------------------
    # Filtered commission view
    # ------------------------------------------------------------------

    @property
    def filtered_commissions(self) -> FilteredList[Commission]:
        """Live view over every stored commission matching the installed predicate."""
        return self._filtered_commissions

    def update_filtered_commission_list(self, predicate: Predicate) -> None:
        self._filtered_commissions.set_predicate(predicate)
        self._publish(ModelEventKind.FILTER_CHANGED, self._filtered_commissions)

    def update_filtered_commission_list_to_active_customer(self) -> None:
        if self._active_customer is None:
            self.update_filtered_commission_list(show_none)
        else:
            self.update_filtered_commission_list(CommissionBelongsTo.customer(self._active_customer))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @property
    def active_customer(self) -> Customer | None:
        return self._active_customer

    @property
    def active_commission(self) -> Commission | None:
        return self._active_commission

    def has_active_customer(self) -> bool:
        return self._active_customer is not None

    def has_active_commission(self) -> bool:
        return self._active_commission is not None

    def select_customer(self, customer: Customer) -> None:
        """Make *customer* active, clearing the active commission.

        Raises:
            PreconditionError: *customer* is None.
            EntityNotFoundError: *customer* is not stored.
        """
        stored = self._address_book.find_customer(require(customer, "customer"))
        if stored is None:
            raise EntityNotFoundError(customer)
        self._active_customer = stored
        self._active_commission = None
        logger.debug("Selected customer %s", stored.name)
        self.update_filtered_commission_list_to_active_customer()
        self._publish(ModelEventKind.SELECTION_CHANGED, stored)

    def select_commission(self, commission: Commission) -> None:
        """Make *commission*, owned by the active customer, active.

        Raises:
            NoActiveCustomerError: No customer is selected.
            PreconditionError: *commission* is None or not owned by the
                active customer.
        """
        customer = self._require_active_customer()
        require(commission, "commission")
        stored = customer.find_commission(commission)
        if stored is None or not commission.belongs_to(customer):
            msg = f"Commission {commission.title} does not belong to {customer.name}"
            raise PreconditionError(msg)
        self._active_commission = stored
        logger.debug("Selected commission %s of %s", stored.title, customer.name)
        self._publish(ModelEventKind.SELECTION_CHANGED, stored)

    def clear_selection(self) -> None:
        """Unset both selection slots."""
        self._active_customer = None
        self._active_commission = None
        self.update_filtered_commission_list_to_active_customer()
        self._publish(ModelEventKind.SELECTION_CHANGED)

    def refresh_active_customer(self) -> None:
        """Tell observers the active customer's fields or children changed in place."""
        customer = self._require_active_customer()
        self._publish(ModelEventKind.CUSTOMER_UPDATED, customer)

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._user_prefs == other._user_prefs
            and list(self._filtered_customers) == list(other._filtered_customers)
            and list(self._filtered_commissions) == list(other._filtered_commissions)
        )

    __hash__ = None  # type: ignore[assignment]
