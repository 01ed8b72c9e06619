"""UniqueEntityList — ordered collection with identity-based de-duplication.

Two notions of equality are in play:

- **is-same** (identity): supplied as the ``is_same`` comparator, used for
  every uniqueness check, lookup, replace and remove.
- **full equality** (``==``): used only when comparing whole lists.

INVARIANT: no two stored elements are is-same.
INVARIANT: a failed mutation leaves the list untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

from artbuddy.domain.errors import (
    DuplicateEntitiesError,
    DuplicateEntityError,
    EntityNotFoundError,
    describe_entity,
    require,
)

T = TypeVar("T")

IsSame = Callable[[T, T], bool]
ChangeListener = Callable[[], None]


class ReadOnlyListView(Sequence[T]):
    """Live, non-mutable view over a backing list.

    Reads always go to the backing list, so mutations made through the
    owning collection show up immediately.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[T]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class UniqueEntityList(Generic[T]):
    """Ordered list enforcing that no two elements are is-same.

    Args:
        is_same: Identity comparator ``(a, b) -> bool``.
        items: Optional initial contents, checked like :meth:`set_all`.
    """

    def __init__(self, is_same: IsSame[T], items: Iterable[T] = ()) -> None:
        self._is_same = require(is_same, "is_same")
        self._items: list[T] = []
        self._view: ReadOnlyListView[T] = ReadOnlyListView(self._items)
        self._listeners: list[ChangeListener] = []
        self.set_all(items)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _index_of(self, entity: T) -> int | None:
        for i, item in enumerate(self._items):
            if self._is_same(item, entity):
                return i
        return None

    def contains(self, entity: T) -> bool:
        """Return True if some stored element is-same as *entity*."""
        require(entity, "entity")
        return self._index_of(entity) is not None

    def __contains__(self, entity: object) -> bool:
        return self.contains(entity)  # type: ignore[arg-type]

    def find(self, entity: T) -> T | None:
        """Return the stored element that is-same as *entity*, if any."""
        require(entity, "entity")
        index = self._index_of(entity)
        return None if index is None else self._items[index]

    def as_read_only(self) -> ReadOnlyListView[T]:
        """Live, unmodifiable view of the contents."""
        return self._view

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, entity: T) -> None:
        """Append *entity*.

        Raises:
            DuplicateEntityError: An is-same element is already stored.
        """
        if self.contains(entity):
            raise DuplicateEntityError(entity)
        self._items.append(entity)
        self._notify()

    def set_element(self, target: T, replacement: T) -> None:
        """Replace *target* with *replacement*, keeping its position.

        Raises:
            EntityNotFoundError: No stored element is-same as *target*.
            DuplicateEntityError: *replacement* is-same as another element.
        """
        require(replacement, "replacement")
        index = self._index_of(require(target, "target"))
        if index is None:
            raise EntityNotFoundError(target)
        other = self._index_of(replacement)
        if other is not None and other != index:
            raise DuplicateEntityError(replacement)
        self._items[index] = replacement
        self._notify()

    def remove(self, target: T) -> None:
        """Remove the element that is-same as *target*.

        Raises:
            EntityNotFoundError: No stored element is-same as *target*.
        """
        index = self._index_of(require(target, "target"))
        if index is None:
            raise EntityNotFoundError(target)
        del self._items[index]
        self._notify()

    def set_all(self, items: Iterable[T]) -> None:
        """Replace the whole contents with *items*.

        Raises:
            DuplicateEntitiesError: *items* contains is-same elements.
                Nothing is replaced in that case.
        """
        incoming = list(require(items, "items"))
        clashes: list[str] = []
        for i, first in enumerate(incoming):
            for second in incoming[i + 1 :]:
                if self._is_same(first, second):
                    clashes.append(describe_entity(second)[1])
        if clashes:
            raise DuplicateEntitiesError(describe_entity(incoming[0])[0], clashes)
        # Slice assignment keeps the list object the view is bound to.
        self._items[:] = incoming
        self._notify()

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Call *listener* after every mutation. Returns an unsubscribe callable."""
        self._listeners.append(require(listener, "listener"))

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueEntityList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
