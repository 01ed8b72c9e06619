"""CommissionService — commission operations scoped to one customer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from artbuddy.domain.commission import Commission
from artbuddy.domain.predicates import (
    CommissionBelongsTo,
    ContainsAnyTag,
    HasCompletionStatus,
    Predicate,
    TitleContainsKeywords,
    all_of,
    show_all,
)
from artbuddy.domain.values import CompletionStatus, Deadline, Description, Fee, Title
from artbuddy.services._helpers import clean, commission_data, parse_tags
from artbuddy.services.base import USER_ERRORS, BaseService
from artbuddy.services.result import ServiceResult


class CommissionService(BaseService):
    """Commission operations, each scoped to the owning customer."""

    def add_commission(
        self,
        customer: str,
        title: str,
        fee: str,
        deadline: str,
        *,
        completed: bool = False,
        description: str | None = None,
        tags: Iterable[str] = (),
    ) -> ServiceResult:
        op = "add_commission"
        try:
            owner = self._find_customer(customer)
            commission = Commission(
                title=Title(title.strip()),
                fee=Fee.parse(fee),
                deadline=Deadline.parse(deadline.strip()),
                status=CompletionStatus(completed),
                description=Description(description.strip()) if description is not None else None,
                tags=parse_tags(tags),
            )
            with self._selected(owner):
                self._model.add_commission(commission)
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=commission_data(commission))

    def edit_commission(
        self,
        customer: str,
        title: str,
        *,
        new_title: str | None = None,
        fee: str | None = None,
        deadline: str | None = None,
        completed: bool | None = None,
        description: str | None = None,
        tags: Iterable[str] | None = None,
    ) -> ServiceResult:
        """Edit commission *title* of *customer*; ``None`` arguments keep the current value."""
        op = "edit_commission"
        changes: dict[str, Any] = {}
        try:
            owner, target = self._find_commission(customer, title)
            if new_title is not None:
                changes["title"] = Title(clean(new_title))
            if fee is not None:
                changes["fee"] = Fee.parse(fee)
            if deadline is not None:
                changes["deadline"] = Deadline.parse(deadline.strip())
            if completed is not None:
                changes["status"] = CompletionStatus(completed)
            if description is not None:
                changes["description"] = Description(clean(description))
            if tags is not None:
                changes["tags"] = parse_tags(tags)
            if not changes:
                return ServiceResult(
                    ok=True,
                    op=op,
                    data=commission_data(target),
                    warnings=["No fields to edit"],
                )
            edited = target.with_changes(**changes)
            with self._selected(owner, target):
                self._model.set_commission(target, edited)
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=commission_data(edited))

    def delete_commission(self, customer: str, title: str) -> ServiceResult:
        op = "delete_commission"
        try:
            owner, target = self._find_commission(customer, title)
            with self._selected(owner, target):
                self._model.delete_active_commission()
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        data = commission_data(target)
        data["customer"] = str(owner.name)
        return ServiceResult(ok=True, op=op, data=data)

    def open_commission(self, customer: str, title: str) -> ServiceResult:
        op = "open_commission"
        try:
            commission = self._open_commission(customer, title)
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=commission_data(commission, iterations=True))

    def list_commissions(
        self,
        *,
        customer: str | None = None,
        keywords: Iterable[str] = (),
        completed: bool | None = None,
        any_tags: Iterable[str] = (),
    ) -> ServiceResult:
        """List commissions of *customer*, or of every customer when omitted."""
        op = "list_commissions"
        predicates: list[Predicate] = []
        try:
            if customer is not None:
                owner = self._find_customer(customer)
                predicates.append(CommissionBelongsTo.customer(owner))
            keywords = [k for k in keywords if k.strip()]
            if keywords:
                predicates.append(TitleContainsKeywords(keywords))
            if completed is not None:
                predicates.append(HasCompletionStatus(completed))
            wanted = parse_tags(any_tags)
            if wanted:
                predicates.append(ContainsAnyTag(wanted))
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        self._model.update_filtered_commission_list(all_of(*predicates) if predicates else show_all)
        items = [commission_data(c) for c in self._model.filtered_commissions]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
