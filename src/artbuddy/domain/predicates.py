"""Filter predicates for customer and commission views.

Predicates are frozen dataclasses so two predicates built from the same
arguments compare equal, which keeps filter state easy to assert on.
Keyword matching is whole-word and case-insensitive.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from artbuddy.domain.commission import Commission
from artbuddy.domain.customer import Customer
from artbuddy.domain.values import Name, Tag

Predicate = Callable[[Any], bool]


class _Tagged(Protocol):
    @property
    def tags(self) -> frozenset[Tag]: ...


def show_all(_item: object) -> bool:
    """Accept every element."""
    return True


def show_none(_item: object) -> bool:
    """Reject every element."""
    return False


def _contains_word(sentence: str, word: str) -> bool:
    target = word.strip().lower()
    return bool(target) and target in sentence.lower().split()


def _normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    return tuple(k.strip() for k in keywords if k and k.strip())


@dataclass(frozen=True)
class NameContainsKeywords:
    """Customer name contains any of the keywords as a whole word."""

    keywords: tuple[str, ...]

    def __init__(self, keywords: Iterable[str]) -> None:
        object.__setattr__(self, "keywords", _normalize_keywords(keywords))

    def __call__(self, customer: Customer) -> bool:
        return any(_contains_word(customer.name.value, k) for k in self.keywords)


@dataclass(frozen=True)
class TitleContainsKeywords:
    """Commission title contains any of the keywords as a whole word."""

    keywords: tuple[str, ...]

    def __init__(self, keywords: Iterable[str]) -> None:
        object.__setattr__(self, "keywords", _normalize_keywords(keywords))

    def __call__(self, commission: Commission) -> bool:
        return any(_contains_word(commission.title.value, k) for k in self.keywords)


@dataclass(frozen=True)
class ContainsAnyTag:
    """Element carries at least one of the tags. Works for customers and commissions."""

    tags: frozenset[Tag]

    def __init__(self, tags: Iterable[Tag]) -> None:
        object.__setattr__(self, "tags", frozenset(tags))

    def __call__(self, item: _Tagged) -> bool:
        return bool(self.tags & item.tags)


@dataclass(frozen=True)
class ContainsAllTags:
    """Element carries every one of the tags."""

    tags: frozenset[Tag]

    def __init__(self, tags: Iterable[Tag]) -> None:
        object.__setattr__(self, "tags", frozenset(tags))

    def __call__(self, item: _Tagged) -> bool:
        return self.tags <= item.tags


@dataclass(frozen=True)
class CommissionBelongsTo:
    """Commission's owner key matches *owner*."""

    owner: Name

    @classmethod
    def customer(cls, customer: Customer) -> CommissionBelongsTo:
        return cls(customer.name)

    def __call__(self, commission: Commission) -> bool:
        return commission.owner is not None and commission.owner == self.owner


@dataclass(frozen=True)
class HasCompletionStatus:
    completed: bool

    def __call__(self, commission: Commission) -> bool:
        return commission.status.value == self.completed


@dataclass(frozen=True)
class AllOf:
    """Conjunction of predicates."""

    predicates: tuple[Predicate, ...]

    def __call__(self, item: object) -> bool:
        return all(p(item) for p in self.predicates)


def all_of(*predicates: Predicate) -> Predicate:
    """Combine *predicates*; a single predicate is returned unchanged."""
    if len(predicates) == 1:
        return predicates[0]
    return AllOf(tuple(predicates))
