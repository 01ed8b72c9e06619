"""Tests for customer and commission filter predicates."""

from __future__ import annotations

from artbuddy.domain.predicates import (
    AllOf,
    CommissionBelongsTo,
    ContainsAllTags,
    ContainsAnyTag,
    HasCompletionStatus,
    NameContainsKeywords,
    TitleContainsKeywords,
    all_of,
    show_all,
    show_none,
)
from artbuddy.domain.values import Name, Tag
from tests.conftest import make_commission, make_customer


class TestConstants:
    def test_show_all_and_none(self) -> None:
        assert show_all(make_customer()) is True
        assert show_none(make_customer()) is False


class TestNameContainsKeywords:
    def test_whole_word_case_insensitive(self) -> None:
        predicate = NameContainsKeywords(["alice"])
        assert predicate(make_customer("Alice Tan"))
        assert not predicate(make_customer("Alicea Tan"))

    def test_any_keyword(self) -> None:
        predicate = NameContainsKeywords(["carol", "TAN"])
        assert predicate(make_customer("Alice Tan"))

    def test_blank_keywords_ignored(self) -> None:
        predicate = NameContainsKeywords(["", "  "])
        assert predicate.keywords == ()
        assert not predicate(make_customer("Alice Tan"))

    def test_equality(self) -> None:
        assert NameContainsKeywords(["a", "b"]) == NameContainsKeywords(("a", "b"))
        assert NameContainsKeywords(["a"]) != NameContainsKeywords(["b"])


class TestTitleContainsKeywords:
    def test_match(self) -> None:
        predicate = TitleContainsKeywords(["portrait"])
        assert predicate(make_commission("Family Portrait"))
        assert not predicate(make_commission("Portraits"))


class TestTags:
    def test_any_tag(self) -> None:
        predicate = ContainsAnyTag([Tag("vip"), Tag("new")])
        assert predicate(make_customer(tags=("vip",)))
        assert predicate(make_commission(tags=("new",)))
        assert not predicate(make_customer(tags=("regular",)))

    def test_all_tags(self) -> None:
        predicate = ContainsAllTags([Tag("vip"), Tag("regular")])
        assert predicate(make_customer(tags=("vip", "regular", "extra")))
        assert not predicate(make_customer(tags=("vip",)))

    def test_empty_all_tags_matches_everything(self) -> None:
        assert ContainsAllTags([])(make_customer())


class TestCommissionPredicates:
    def test_belongs_to(self) -> None:
        alice = make_customer("Alice", commissions=(make_commission(),))
        bob = make_customer("Bob", commissions=(make_commission(),))
        predicate = CommissionBelongsTo.customer(alice)
        assert predicate == CommissionBelongsTo(Name("Alice"))
        assert predicate(alice.commissions[0])
        assert not predicate(bob.commissions[0])
        assert not predicate(make_commission())

    def test_completion_status(self) -> None:
        assert HasCompletionStatus(True)(make_commission(completed=True))
        assert not HasCompletionStatus(True)(make_commission(completed=False))
        assert HasCompletionStatus(False)(make_commission(completed=False))


class TestAllOf:
    def test_single_predicate_unwrapped(self) -> None:
        predicate = HasCompletionStatus(True)
        assert all_of(predicate) is predicate

    def test_conjunction(self) -> None:
        predicate = all_of(TitleContainsKeywords(["portrait"]), HasCompletionStatus(True))
        assert isinstance(predicate, AllOf)
        assert predicate(make_commission("Portrait", completed=True))
        assert not predicate(make_commission("Portrait", completed=False))
        assert not predicate(make_commission("Mural", completed=True))
