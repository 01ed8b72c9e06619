"""Pydantic shapes of the JSON data file and their conversion to the model.

Field names are the on-disk keys. ``to_model_type()`` re-validates every
value through the domain value types, so a hand-edited file with a bad
email or two customers of the same name is rejected as a whole.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field

from artbuddy.domain.commission import Commission
from artbuddy.domain.customer import Customer
from artbuddy.domain.errors import DuplicateEntitiesError, DuplicateEntityError, InvalidValueError
from artbuddy.domain.iteration import Iteration
from artbuddy.domain.values import (
    Address,
    CompletionStatus,
    Deadline,
    Description,
    Email,
    Fee,
    Feedback,
    ImagePath,
    IterationDate,
    Name,
    Phone,
    Tag,
    Title,
)
from artbuddy.model.address_book import AddressBook


class DataConversionError(Exception):
    """Stored data cannot be turned into model objects."""


def _value(factory: Any, raw: Any, field_name: str) -> Any:
    if raw is None:
        msg = f"Missing {field_name} field"
        raise DataConversionError(msg)
    try:
        return factory(raw)
    except InvalidValueError as exc:
        msg = f"Invalid {field_name}: {exc}"
        raise DataConversionError(msg) from exc


def _tags(raw: list[str]) -> list[Tag]:
    return [_value(Tag, t, "tag") for t in raw]


class JsonAdaptedIteration(BaseModel):
    date: dt.date | None = None
    description: str | None = None
    image_path: str | None = None
    feedback: str | None = None

    @classmethod
    def from_model(cls, iteration: Iteration) -> JsonAdaptedIteration:
        return cls(
            date=iteration.date.value,
            description=iteration.description.value,
            image_path=iteration.image_path.value,
            feedback=iteration.feedback.value,
        )

    def to_model_type(self) -> Iteration:
        return Iteration(
            date=_value(IterationDate, self.date, "iteration date"),
            description=_value(Description, self.description, "iteration description"),
            image_path=_value(ImagePath, self.image_path, "image path"),
            feedback=_value(Feedback, self.feedback, "feedback"),
        )


class JsonAdaptedCommission(BaseModel):
    title: str | None = None
    fee: float | None = None
    deadline: dt.date | None = None
    completed: bool = False
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    iterations: list[JsonAdaptedIteration] = Field(default_factory=list)

    @classmethod
    def from_model(cls, commission: Commission) -> JsonAdaptedCommission:
        return cls(
            title=commission.title.value,
            fee=commission.fee.value,
            deadline=commission.deadline.value,
            completed=commission.status.value,
            description=commission.description.value if commission.description else None,
            tags=sorted(t.value for t in commission.tags),
            iterations=[JsonAdaptedIteration.from_model(i) for i in commission.iterations],
        )

    def to_model_type(self) -> Commission:
        description = None
        if self.description is not None:
            description = _value(Description, self.description, "description")
        iterations = [i.to_model_type() for i in self.iterations]
        try:
            return Commission(
                title=_value(Title, self.title, "title"),
                fee=_value(Fee, self.fee, "fee"),
                deadline=_value(Deadline, self.deadline, "deadline"),
                status=CompletionStatus(self.completed),
                description=description,
                tags=_tags(self.tags),
                iterations=iterations,
            )
        except DuplicateEntitiesError as exc:
            msg = f"Commission {self.title} contains duplicate iterations"
            raise DataConversionError(msg) from exc


class JsonAdaptedCustomer(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    tags: list[str] = Field(default_factory=list)
    commissions: list[JsonAdaptedCommission] = Field(default_factory=list)

    @classmethod
    def from_model(cls, customer: Customer) -> JsonAdaptedCustomer:
        return cls(
            name=customer.name.value,
            phone=customer.phone.value,
            email=customer.email.value,
            address=customer.address.value if customer.address else None,
            tags=sorted(t.value for t in customer.tags),
            commissions=[JsonAdaptedCommission.from_model(c) for c in customer.commissions],
        )

    def to_model_type(self) -> Customer:
        address = None
        if self.address is not None:
            address = _value(Address, self.address, "address")
        commissions = [c.to_model_type() for c in self.commissions]
        try:
            return Customer(
                name=_value(Name, self.name, "name"),
                phone=_value(Phone, self.phone, "phone"),
                email=_value(Email, self.email, "email"),
                address=address,
                tags=_tags(self.tags),
                commissions=commissions,
            )
        except DuplicateEntityError as exc:
            msg = f"Customer {self.name} contains duplicate commissions"
            raise DataConversionError(msg) from exc


class JsonSerializableAddressBook(BaseModel):
    customers: list[JsonAdaptedCustomer] = Field(default_factory=list)

    @classmethod
    def from_model(cls, address_book: AddressBook) -> JsonSerializableAddressBook:
        return cls(customers=[JsonAdaptedCustomer.from_model(c) for c in address_book.customers])

    def to_model_type(self) -> AddressBook:
        customers = [c.to_model_type() for c in self.customers]
        try:
            return AddressBook(customers)
        except DuplicateEntitiesError as exc:
            msg = "Customers list contains duplicate customer(s)"
            raise DataConversionError(msg) from exc
