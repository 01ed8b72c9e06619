"""Shared pytest fixtures and test helpers for artbuddy tests."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest
from click.testing import CliRunner

from artbuddy.domain.commission import Commission
from artbuddy.domain.customer import Customer
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
from artbuddy.model.manager import ModelManager


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def model() -> ModelManager:
    """Empty model with default preferences."""
    return ModelManager()


@pytest.fixture
def populated_model() -> ModelManager:
    """Model holding Alice (Portrait, Sketch) and Bob (Portrait, Mural).

    Both customers own a commission titled "Portrait".
    """
    return ModelManager(typical_address_book())


@pytest.fixture
def _isolated_data(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI reads and writes an isolated data file.

    Use via ``@pytest.mark.usefixtures("_isolated_data")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly.
    """
    monkeypatch.delenv("ARTBUDDY_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers (entity builders with sensible defaults)
# ---------------------------------------------------------------------------


def make_iteration(
    day: str = "2026-10-01",
    description: str = "Line art",
    *,
    image_path: str = "images/lineart.png",
    feedback: str = "Looks great",
) -> Iteration:
    return Iteration(
        date=IterationDate(dt.date.fromisoformat(day)),
        description=Description(description),
        image_path=ImagePath(image_path),
        feedback=Feedback(feedback),
    )


def make_commission(
    title: str = "Portrait",
    *,
    fee: float = 50.0,
    deadline: str = "2026-12-01",
    completed: bool = False,
    description: str | None = None,
    tags: tuple[str, ...] = (),
    iterations: tuple[Iteration, ...] = (),
) -> Commission:
    return Commission(
        title=Title(title),
        fee=Fee(fee),
        deadline=Deadline(dt.date.fromisoformat(deadline)),
        status=CompletionStatus(completed),
        description=Description(description) if description is not None else None,
        tags=[Tag(t) for t in tags],
        iterations=iterations,
    )


def make_customer(
    name: str = "Alice Tan",
    *,
    phone: str = "98765432",
    email: str = "alice@example.com",
    address: str | None = None,
    tags: tuple[str, ...] = (),
    commissions: tuple[Commission, ...] = (),
) -> Customer:
    return Customer(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address) if address is not None else None,
        tags=[Tag(t) for t in tags],
        commissions=commissions,
    )


def typical_customers() -> list[Customer]:
    """Fresh instances of the two customers used across model and service tests."""
    alice = make_customer(
        "Alice Tan",
        tags=("regular",),
        commissions=(
            make_commission("Portrait", tags=("oil",), iterations=(make_iteration(),)),
            make_commission("Sketch", fee=15.0, completed=True),
        ),
    )
    bob = make_customer(
        "Bob Lee",
        phone="91234567",
        email="bob@example.com",
        address="12 Kent Ridge Road",
        tags=("regular", "vip"),
        commissions=(
            make_commission("Portrait", fee=80.0, deadline="2027-01-15"),
            make_commission("Mural", fee=300.0, description="Bedroom wall"),
        ),
    )
    return [alice, bob]


def typical_address_book() -> AddressBook:
    return AddressBook(typical_customers())
