"""BaseService — shared foundation for artbuddy services.

Every service wraps one :class:`ModelManager`. Public methods take raw
user input, build value objects, call the model, and return a
:class:`ServiceResult`. User-recoverable failures (``ModelError``,
``InvalidValueError``) become ``ok=False`` results; ``PreconditionError``
is a caller bug and propagates.

INVARIANT: only ``open_*`` operations change the active selection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from artbuddy.domain.commission import Commission
from artbuddy.domain.customer import Customer
from artbuddy.domain.errors import EntityNotFoundError, InvalidValueError, ModelError
from artbuddy.domain.values import Name, Title
from artbuddy.model.manager import ModelManager
from artbuddy.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

USER_ERRORS = (ModelError, InvalidValueError)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CustomerService(BaseService):
            def delete_customer(self, name: str) -> ServiceResult:
                op = "delete_customer"
                try:
                    ...
                except USER_ERRORS as exc:
                    return self._failure(op, exc)
    """

    def __init__(self, model: ModelManager) -> None:
        self._model = model

    @property
    def model(self) -> ModelManager:
        return self._model

    def _failure(self, op: str, exc: Exception, **detail: Any) -> ServiceResult:
        code = exc.code if isinstance(exc, ModelError) else "VALIDATION_FAILED"
        logger.debug("%s failed with %s: %s", op, code, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=str(exc), detail=detail),
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _find_customer(self, name: str) -> Customer:
        """Return the stored customer called *name* without selecting it."""
        customer = self._model.address_book.get_customer(Name(name.strip()))
        if customer is None:
            raise EntityNotFoundError(name.strip(), kind="customer")
        return customer

    def _find_commission(self, customer_name: str, title: str) -> tuple[Customer, Commission]:
        """Return a customer and their commission *title* without selecting either."""
        customer = self._find_customer(customer_name)
        commission = customer.get_commission(Title(title.strip()))
        if commission is None:
            raise EntityNotFoundError(title.strip(), kind="commission")
        return customer, commission

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def _open_customer(self, name: str) -> Customer:
        """Select the customer called *name* and return it."""
        customer = self._find_customer(name)
        self._model.select_customer(customer)
        return customer

    def _open_commission(self, customer_name: str, title: str) -> Commission:
        """Select *customer_name* and their commission *title*; return the commission."""
        customer, commission = self._find_commission(customer_name, title)
        self._model.select_customer(customer)
        self._model.select_commission(commission)
        return commission

    @contextmanager
    def _selected(self, customer: Customer, commission: Commission | None = None) -> Iterator[None]:
        """Select *customer* (and *commission*) for the body, then put the old selection back.

        The previous selection and commission filter are restored whether the
        body succeeds or raises. When the previously active commission is the
        one the body edited or deleted, the restore follows the model to its
        replacement, or leaves the commission slot unset.
        """
        model = self._model
        prev_customer = model.active_customer
        prev_commission = model.active_commission
        prev_predicate = model.filtered_commissions.predicate
        model.select_customer(customer)
        if commission is not None:
            model.select_commission(commission)
        try:
            yield
        finally:
            if prev_commission is not None and prev_commission is commission:
                prev_commission = model.active_commission
            self._restore_selection(prev_customer, prev_commission)
            model.update_filtered_commission_list(prev_predicate)

    def _restore_selection(self, customer: Customer | None, commission: Commission | None) -> None:
        model = self._model
        if customer is None or not model.has_customer(customer):
            model.clear_selection()
            return
        model.select_customer(customer)
        if commission is None:
            return
        stored = customer.find_commission(commission)
        if stored is not None:
            model.select_commission(stored)
