"""Shared service-layer helpers: input parsing and result payloads."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from artbuddy.domain.commission import Commission
from artbuddy.domain.customer import Customer
from artbuddy.domain.iteration import Iteration
from artbuddy.domain.values import Tag


def clean(text: str | None) -> str | None:
    """Strip *text*; ``None`` stays ``None``."""
    return text.strip() if text is not None else None


def parse_tags(raw: Iterable[str]) -> list[Tag]:
    """Build tags from raw strings, skipping blanks."""
    return [Tag(t.strip()) for t in raw if t and t.strip()]


def iteration_data(iteration: Iteration) -> dict[str, Any]:
    return {
        "date": str(iteration.date),
        "description": str(iteration.description),
        "image_path": str(iteration.image_path),
        "feedback": str(iteration.feedback),
    }


def commission_data(commission: Commission, *, iterations: bool = False) -> dict[str, Any]:
    data: dict[str, Any] = {
        "title": str(commission.title),
        "customer": str(commission.owner) if commission.owner else None,
        "fee": commission.fee.value,
        "deadline": str(commission.deadline),
        "completed": commission.status.value,
        "description": str(commission.description) if commission.description else None,
        "tags": sorted(str(t) for t in commission.tags),
        "iteration_count": len(commission.iterations),
    }
    if iterations:
        data["iterations"] = [iteration_data(i) for i in commission.iterations]
    return data


def customer_data(customer: Customer, *, commissions: bool = False) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": str(customer.name),
        "phone": str(customer.phone),
        "email": str(customer.email),
        "address": str(customer.address) if customer.address else None,
        "tags": sorted(str(t) for t in customer.tags),
        "commission_count": len(customer.commissions),
    }
    if commissions:
        data["commissions"] = [commission_data(c) for c in customer.commissions]
    return data
