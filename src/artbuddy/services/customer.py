"""CustomerService — add, edit, delete, open, and list customers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from artbuddy.domain.customer import Customer
from artbuddy.domain.predicates import (
    ContainsAllTags,
    ContainsAnyTag,
    NameContainsKeywords,
    Predicate,
    all_of,
    show_all,
)
from artbuddy.domain.values import Address, Email, Name, Phone
from artbuddy.services._helpers import clean, customer_data, parse_tags
from artbuddy.services.base import USER_ERRORS, BaseService
from artbuddy.services.result import ServiceResult


class CustomerService(BaseService):
    """Customer-level operations over the model."""

    def add_customer(
        self,
        name: str,
        phone: str,
        email: str,
        *,
        address: str | None = None,
        tags: Iterable[str] = (),
    ) -> ServiceResult:
        op = "add_customer"
        try:
            customer = Customer(
                name=Name(name.strip()),
                phone=Phone(phone.strip()),
                email=Email(email.strip()),
                address=Address(address.strip()) if address is not None else None,
                tags=parse_tags(tags),
            )
            self._model.add_customer(customer)
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=customer_data(customer))

    def edit_customer(
        self,
        name: str,
        *,
        new_name: str | None = None,
        phone: str | None = None,
        email: str | None = None,
        address: str | None = None,
        tags: Iterable[str] | None = None,
    ) -> ServiceResult:
        """Edit the customer called *name*; ``None`` arguments keep the current value."""
        op = "edit_customer"
        changes: dict[str, Any] = {}
        try:
            target = self._find_customer(name)
            if new_name is not None:
                changes["name"] = Name(clean(new_name))
            if phone is not None:
                changes["phone"] = Phone(clean(phone))
            if email is not None:
                changes["email"] = Email(clean(email))
            if address is not None:
                changes["address"] = Address(clean(address))
            if tags is not None:
                changes["tags"] = parse_tags(tags)
            if not changes:
                return ServiceResult(
                    ok=True,
                    op=op,
                    data=customer_data(target),
                    warnings=["No fields to edit"],
                )
            edited = target.with_changes(**changes)
            self._model.set_customer(target, edited)
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=customer_data(edited))

    def delete_customer(self, name: str) -> ServiceResult:
        op = "delete_customer"
        try:
            target = self._find_customer(name)
            self._model.delete_customer(target)
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=customer_data(target))

    def open_customer(self, name: str) -> ServiceResult:
        """Select a customer, making their commissions the commission view."""
        op = "open_customer"
        try:
            customer = self._open_customer(name)
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=customer_data(customer, commissions=True))

    def list_customers(
        self,
        *,
        keywords: Iterable[str] = (),
        any_tags: Iterable[str] = (),
        all_tags: Iterable[str] = (),
    ) -> ServiceResult:
        """List customers matching every given filter; no filters lists all."""
        op = "list_customers"
        try:
            predicates: list[Predicate] = []
            keywords = [k for k in keywords if k.strip()]
            if keywords:
                predicates.append(NameContainsKeywords(keywords))
            wanted_any = parse_tags(any_tags)
            if wanted_any:
                predicates.append(ContainsAnyTag(wanted_any))
            wanted_all = parse_tags(all_tags)
            if wanted_all:
                predicates.append(ContainsAllTags(wanted_all))
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        self._model.update_filtered_customer_list(all_of(*predicates) if predicates else show_all)
        items = [customer_data(c) for c in self._model.filtered_customers]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
