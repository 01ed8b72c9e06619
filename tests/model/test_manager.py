"""Tests for ModelManager — selection, scoped commissions, and filtered views."""

from __future__ import annotations

from pathlib import Path

import pytest

from artbuddy.domain.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    NoActiveCommissionError,
    NoActiveCustomerError,
    PreconditionError,
)
from artbuddy.domain.predicates import (
    CommissionBelongsTo,
    HasCompletionStatus,
    NameContainsKeywords,
    show_all,
    show_none,
)
from artbuddy.domain.values import Email, Fee, Name, Title
from artbuddy.model.address_book import AddressBook
from artbuddy.model.manager import ModelEvent, ModelEventKind, ModelManager
from artbuddy.model.user_prefs import GuiSettings, UserPrefs
from tests.conftest import (
    make_commission,
    make_customer,
    make_iteration,
    typical_address_book,
)


def _alice(model: ModelManager):
    return model.address_book.get_customer(Name("Alice Tan"))


def _bob(model: ModelManager):
    return model.address_book.get_customer(Name("Bob Lee"))


class TestConstruction:
    def test_defaults(self, model: ModelManager) -> None:
        assert model.address_book == AddressBook()
        assert model.user_prefs == UserPrefs()
        assert model.active_customer is None
        assert model.active_commission is None
        assert list(model.filtered_commissions) == []

    def test_no_selection_at_startup(self, populated_model: ModelManager) -> None:
        assert not populated_model.has_active_customer()
        assert not populated_model.has_active_commission()

    def test_user_prefs_copied(self) -> None:
        prefs = UserPrefs(gui_settings=GuiSettings(window_x=1, window_y=2))
        model = ModelManager(user_prefs=prefs)
        prefs.address_book_file_path = Path("changed.json")
        assert model.address_book_file_path == Path("data") / "artbuddy.json"
        assert model.gui_settings == GuiSettings(window_x=1, window_y=2)


class TestUserPrefs:
    def test_set_user_prefs(self, model: ModelManager) -> None:
        other = UserPrefs(address_book_file_path=Path("x.json"))
        model.set_user_prefs(other)
        assert model.user_prefs == other

    def test_set_gui_settings(self, model: ModelManager) -> None:
        model.set_gui_settings(GuiSettings(window_width=1024.0))
        assert model.gui_settings.window_width == 1024.0

    def test_set_address_book_file_path(self, model: ModelManager) -> None:
        model.set_address_book_file_path(Path("books/ab.json"))
        assert model.address_book_file_path == Path("books/ab.json")

    def test_none_rejected(self, model: ModelManager) -> None:
        with pytest.raises(PreconditionError):
            model.set_gui_settings(None)  # type: ignore[arg-type]
        with pytest.raises(PreconditionError):
            model.set_address_book_file_path(None)  # type: ignore[arg-type]


class TestCustomers:
    def test_add_and_has(self, model: ModelManager) -> None:
        model.add_customer(make_customer("Alice"))
        assert model.has_customer(make_customer("Alice", phone="111"))
        assert not model.has_customer(make_customer("Bob"))

    def test_has_customer_none(self, model: ModelManager) -> None:
        with pytest.raises(PreconditionError):
            model.has_customer(None)  # type: ignore[arg-type]

    def test_add_resets_customer_filter(self, populated_model: ModelManager) -> None:
        populated_model.update_filtered_customer_list(NameContainsKeywords(["bob"]))
        assert len(populated_model.filtered_customers) == 1
        populated_model.add_customer(make_customer("Carol"))
        assert populated_model.filtered_customers.predicate is show_all
        assert len(populated_model.filtered_customers) == 3

    def test_delete_inactive_keeps_selection(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(_alice(populated_model))
        populated_model.delete_customer(make_customer("Bob Lee"))
        assert populated_model.active_customer is _alice(populated_model)

    def test_delete_missing(self, populated_model: ModelManager) -> None:
        with pytest.raises(EntityNotFoundError):
            populated_model.delete_customer(make_customer("Nobody"))

    def test_set_active_customer_moves_selection(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.get_commission(Title("Portrait")))
        edited = alice.with_changes(email=Email("alice@new.example.com"))
        populated_model.set_customer(alice, edited)
        assert populated_model.active_customer is edited
        assert populated_model.active_commission is edited.get_commission(Title("Portrait"))
        assert populated_model.active_commission.belongs_to(edited)
        assert [str(c.title) for c in populated_model.filtered_commissions] == [
            "Portrait",
            "Sketch",
        ]

    def test_rename_active_customer_keeps_commission_view(
        self, populated_model: ModelManager
    ) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        edited = alice.with_changes(name=Name("Alicia"))
        populated_model.set_customer(alice, edited)
        assert populated_model.filtered_commissions.predicate == CommissionBelongsTo(
            Name("Alicia")
        )
        assert len(populated_model.filtered_commissions) == 2

    def test_set_inactive_customer(self, populated_model: ModelManager) -> None:
        alice, bob = _alice(populated_model), _bob(populated_model)
        populated_model.select_customer(alice)
        populated_model.set_customer(bob, bob.with_changes(email=Email("b@example.com")))
        assert populated_model.active_customer is alice


class TestSelectionTransitions:
    def test_select_customer_from_unset(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        assert populated_model.active_customer is alice
        assert populated_model.active_commission is None

    def test_select_customer_resets_commission(self, populated_model: ModelManager) -> None:
        alice, bob = _alice(populated_model), _bob(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.commissions[0])
        populated_model.select_customer(bob)
        assert populated_model.active_customer is bob
        assert populated_model.active_commission is None

    def test_reselect_same_customer_resets_commission(
        self, populated_model: ModelManager
    ) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.commissions[0])
        populated_model.select_customer(alice)
        assert populated_model.active_commission is None

    def test_select_customer_by_equivalent_instance(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(make_customer("Alice Tan"))
        assert populated_model.active_customer is _alice(populated_model)

    def test_select_unknown_customer(self, populated_model: ModelManager) -> None:
        with pytest.raises(EntityNotFoundError):
            populated_model.select_customer(make_customer("Nobody"))
        assert populated_model.active_customer is None

    def test_select_customer_none(self, populated_model: ModelManager) -> None:
        with pytest.raises(PreconditionError):
            populated_model.select_customer(None)  # type: ignore[arg-type]

    def test_select_commission_without_customer(self, populated_model: ModelManager) -> None:
        with pytest.raises(NoActiveCustomerError):
            populated_model.select_commission(_alice(populated_model).commissions[0])

    def test_select_commission_of_other_customer(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(_alice(populated_model))
        with pytest.raises(PreconditionError):
            populated_model.select_commission(_bob(populated_model).get_commission(Title("Mural")))
        assert populated_model.active_commission is None

    def test_same_title_of_other_customer_rejected(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(_alice(populated_model))
        bobs_portrait = _bob(populated_model).get_commission(Title("Portrait"))
        with pytest.raises(PreconditionError):
            populated_model.select_commission(bobs_portrait)

    def test_select_commission_none(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(_alice(populated_model))
        with pytest.raises(PreconditionError):
            populated_model.select_commission(None)  # type: ignore[arg-type]

    def test_switch_commission(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.commissions[0])
        populated_model.select_commission(alice.commissions[1])
        assert populated_model.active_commission is alice.commissions[1]

    def test_delete_active_customer_clears_both(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.commissions[0])
        populated_model.delete_customer(alice)
        assert populated_model.active_customer is None
        assert populated_model.active_commission is None
        assert list(populated_model.filtered_commissions) == []

    def test_delete_active_commission_keeps_customer(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.commissions[0])
        populated_model.delete_active_commission()
        assert populated_model.active_customer is alice
        assert populated_model.active_commission is None
        assert [str(c.title) for c in alice.commissions] == ["Sketch"]

    def test_delete_active_commission_without_one(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(_alice(populated_model))
        with pytest.raises(NoActiveCommissionError):
            populated_model.delete_active_commission()

    def test_delete_other_commission_keeps_active(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.commissions[0])
        populated_model.delete_commission(alice.commissions[1])
        assert populated_model.active_commission is alice.commissions[0]

    def test_clear_selection(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.commissions[0])
        populated_model.clear_selection()
        assert not populated_model.has_active_customer()
        assert not populated_model.has_active_commission()


class TestScopedCommissions:
    def test_requires_active_customer(self, populated_model: ModelManager) -> None:
        with pytest.raises(NoActiveCustomerError):
            populated_model.add_commission(make_commission("New"))
        with pytest.raises(NoActiveCustomerError):
            populated_model.has_commission(make_commission("Portrait"))
        with pytest.raises(NoActiveCustomerError):
            populated_model.delete_commission(make_commission("Portrait"))
        with pytest.raises(NoActiveCustomerError):
            populated_model.set_commission(make_commission("Portrait"), make_commission("X"))

    def test_has_commission_scoped(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(_alice(populated_model))
        assert populated_model.has_commission(make_commission("Sketch"))
        assert not populated_model.has_commission(make_commission("Mural"))

    def test_scoping_law(self, model: ModelManager) -> None:
        model.add_customer(make_customer("Alice"))
        model.add_customer(make_customer("Bob"))
        model.select_customer(make_customer("Alice"))
        model.add_commission(make_commission("Portrait"))
        model.select_customer(make_customer("Bob"))
        model.add_commission(make_commission("Portrait"))
        with pytest.raises(DuplicateEntityError):
            model.add_commission(make_commission("Portrait"))
        assert len(list(model.address_book.iter_commissions())) == 2

    def test_commission_of_other_customer_refused(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        sketch = alice.get_commission(Title("Sketch"))
        populated_model.select_customer(_bob(populated_model))
        with pytest.raises(PreconditionError):
            populated_model.add_commission(sketch)
        assert sketch.owner == alice.name
        assert [str(c.title) for c in _bob(populated_model).commissions] == ["Portrait", "Mural"]
        populated_model.select_customer(alice)
        assert [str(c.title) for c in populated_model.filtered_commissions] == [
            "Portrait",
            "Sketch",
        ]

    def test_set_active_commission_moves_selection(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        target = alice.get_commission(Title("Portrait"))
        populated_model.select_commission(target)
        edited = target.with_changes(fee=Fee(99.0))
        populated_model.set_commission(target, edited)
        assert populated_model.active_commission is edited
        assert edited.belongs_to(alice)
        assert target.owner is None

    def test_failed_edit_changes_nothing(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        target = alice.get_commission(Title("Portrait"))
        with pytest.raises(DuplicateEntityError):
            populated_model.set_commission(target, target.with_changes(title=Title("Sketch")))
        assert alice.get_commission(Title("Portrait")) is target
        assert target.belongs_to(alice)


class TestIterations:
    def test_require_active_commission(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(_alice(populated_model))
        with pytest.raises(NoActiveCommissionError):
            populated_model.add_iteration(make_iteration())
        with pytest.raises(NoActiveCommissionError):
            populated_model.has_iteration(make_iteration())

    def test_add_set_delete(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        commission = alice.get_commission(Title("Sketch"))
        populated_model.select_commission(commission)
        first = make_iteration("2026-10-05", "Thumbnails")
        populated_model.add_iteration(first)
        assert populated_model.has_iteration(first)
        edited = make_iteration("2026-10-05", "Thumbnails", feedback="Try option B")
        populated_model.set_iteration(first, edited)
        assert list(commission.iterations) == [edited]
        populated_model.delete_iteration(edited)
        assert not populated_model.has_iteration(edited)

    def test_duplicate_iteration(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.select_commission(alice.get_commission(Title("Portrait")))
        with pytest.raises(DuplicateEntityError):
            populated_model.add_iteration(make_iteration(feedback="again"))


class TestFilteredViews:
    def test_customer_view_defaults_to_all(self, populated_model: ModelManager) -> None:
        assert len(populated_model.filtered_customers) == 2

    def test_customer_filter_replaces(self, populated_model: ModelManager) -> None:
        populated_model.update_filtered_customer_list(NameContainsKeywords(["alice"]))
        populated_model.update_filtered_customer_list(NameContainsKeywords(["bob"]))
        assert [str(c.name) for c in populated_model.filtered_customers] == ["Bob Lee"]

    def test_customer_view_is_live(self, populated_model: ModelManager) -> None:
        view = populated_model.filtered_customers
        populated_model.delete_customer(make_customer("Bob Lee"))
        assert [str(c.name) for c in view] == ["Alice Tan"]

    def test_selecting_customer_scopes_commission_view(
        self, populated_model: ModelManager
    ) -> None:
        for customer in list(populated_model.address_book):
            populated_model.select_customer(customer)
            expected = [
                m for m in populated_model.address_book.iter_commissions() if m.belongs_to(customer)
            ]
            assert list(populated_model.filtered_commissions) == expected

    def test_commission_view_follows_mutations(self, populated_model: ModelManager) -> None:
        populated_model.select_customer(_alice(populated_model))
        populated_model.add_commission(make_commission("Banner"))
        assert [str(c.title) for c in populated_model.filtered_commissions] == [
            "Portrait",
            "Sketch",
            "Banner",
        ]

    def test_commission_view_spans_store(self, populated_model: ModelManager) -> None:
        populated_model.update_filtered_commission_list(HasCompletionStatus(False))
        assert [(str(c.owner), str(c.title)) for c in populated_model.filtered_commissions] == [
            ("Alice Tan", "Portrait"),
            ("Bob Lee", "Portrait"),
            ("Bob Lee", "Mural"),
        ]

    def test_reset_to_active_customer(self, populated_model: ModelManager) -> None:
        populated_model.update_filtered_commission_list(show_all)
        populated_model.update_filtered_commission_list_to_active_customer()
        assert populated_model.filtered_commissions.predicate is show_none
        populated_model.select_customer(_bob(populated_model))
        populated_model.update_filtered_commission_list(show_all)
        populated_model.update_filtered_commission_list_to_active_customer()
        assert len(populated_model.filtered_commissions) == 2


class TestAddressBookReset:
    def test_round_trip_snapshot(self, populated_model: ModelManager) -> None:
        snapshot = populated_model.address_book.snapshot()
        populated_model.select_customer(_alice(populated_model))
        populated_model.set_address_book(AddressBook(snapshot))
        assert populated_model.address_book == typical_address_book()
        assert populated_model.active_customer is None

    def test_set_address_book_replaces_data(self, populated_model: ModelManager) -> None:
        populated_model.set_address_book(AddressBook([make_customer("Carol")]))
        assert [str(c.name) for c in populated_model.address_book] == ["Carol"]


class TestRefreshActiveCustomer:
    def test_requires_active_customer(self, populated_model: ModelManager) -> None:
        with pytest.raises(NoActiveCustomerError):
            populated_model.refresh_active_customer()

    def test_publishes_without_replacing(self, populated_model: ModelManager) -> None:
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        events: list[ModelEvent] = []
        populated_model.subscribe(events.append)
        populated_model.refresh_active_customer()
        assert events == [ModelEvent(ModelEventKind.CUSTOMER_UPDATED, alice)]
        assert populated_model.active_customer is alice


class TestObservers:
    def test_events_published(self, model: ModelManager) -> None:
        events: list[ModelEvent] = []
        model.subscribe(events.append)
        model.add_customer(make_customer("Alice"))
        kinds = [e.kind for e in events]
        assert ModelEventKind.CUSTOMERS_CHANGED in kinds
        assert ModelEventKind.FILTER_CHANGED in kinds

    def test_selection_and_commission_events(self, populated_model: ModelManager) -> None:
        events: list[ModelEvent] = []
        populated_model.subscribe(events.append)
        alice = _alice(populated_model)
        populated_model.select_customer(alice)
        populated_model.add_commission(make_commission("Banner"))
        kinds = [e.kind for e in events]
        assert kinds[-1] == ModelEventKind.COMMISSIONS_CHANGED
        assert ModelEvent(ModelEventKind.SELECTION_CHANGED, alice) in events

    def test_unsubscribe(self, model: ModelManager) -> None:
        events: list[ModelEvent] = []
        unsubscribe = model.subscribe(events.append)
        unsubscribe()
        model.add_customer(make_customer("Alice"))
        assert events == []

    def test_failed_mutation_publishes_nothing(self, populated_model: ModelManager) -> None:
        events: list[ModelEvent] = []
        populated_model.subscribe(events.append)
        with pytest.raises(DuplicateEntityError):
            populated_model.add_customer(make_customer("Alice Tan"))
        assert events == []


class TestEquality:
    def test_equal_models(self) -> None:
        assert ModelManager(typical_address_book()) == ModelManager(typical_address_book())

    def test_different_data(self) -> None:
        assert ModelManager(typical_address_book()) != ModelManager()

    def test_different_filter(self) -> None:
        other = ModelManager(typical_address_book())
        other.update_filtered_customer_list(NameContainsKeywords(["bob"]))
        assert ModelManager(typical_address_book()) != other

    def test_different_prefs(self) -> None:
        other = ModelManager(user_prefs=UserPrefs(address_book_file_path=Path("x.json")))
        assert ModelManager() != other


class TestScenario:
    def test_alice_portrait(self, model: ModelManager) -> None:
        with pytest.raises(NoActiveCustomerError):
            model.select_commission(make_commission("Anything"))
        alice = make_customer("Alice")
        model.add_customer(alice)
        model.select_customer(alice)
        model.add_commission(make_commission("Portrait"))
        with pytest.raises(DuplicateEntityError) as excinfo:
            model.add_commission(make_commission("Portrait"))
        assert "Portrait" in str(excinfo.value)
        assert len(alice.commissions) == 1
