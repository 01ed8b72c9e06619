"""FilteredList — live, read-only projection of a collection through a predicate.

The projection is recomputed on every read, so it can never lag behind a
mutation of its source or a predicate change.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TypeVar, overload

from artbuddy.domain.errors import require
from artbuddy.domain.predicates import Predicate, show_all

T = TypeVar("T")


class FilteredList(Sequence[T]):
    """Sequence view of ``source()`` restricted to elements matching ``predicate``.

    Args:
        source: Zero-argument callable returning the current elements.
        predicate: Initial predicate; defaults to accepting everything.
    """

    def __init__(
        self,
        source: Callable[[], Iterable[T]],
        predicate: Predicate = show_all,
    ) -> None:
        self._source = require(source, "source")
        self._predicate = require(predicate, "predicate")

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    def set_predicate(self, predicate: Predicate) -> None:
        """Install *predicate*, replacing (not combining with) the current one."""
        self._predicate = require(predicate, "predicate")

    def _current(self) -> list[T]:
        return [item for item in self._source() if self._predicate(item)]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._current()[index]

    def __len__(self) -> int:
        return len(self._current())

    def __iter__(self) -> Iterator[T]:
        return iter(self._current())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str):
            return self._current() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._current()!r})"
