"""
Observable collections.

An `ObservableList` behaves like a plain list, but calls a registered callback
after every completed mutation. List views use it to keep their native store
in step with the rows held in Python.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import Any, SupportsIndex, TypeVar, overload

T = TypeVar("T")


class ObservableList(MutableSequence[T]):
    """
    Mutable ordered sequence that notifies a callback on every mutation.

    Parameters
    ----------
    items:
        Initial contents. Seeding the list does not notify.
    on_change:
        Zero-argument callable invoked after each mutation completes.
    validate:
        Optional callable run on every incoming item before the mutation is
        applied. It signals a rejected item by raising.

    Notes
    -----
    Bulk operations (extend, clear, replace, sort, reverse) notify exactly once.
    A mutation that raises (an out of range index, a rejected item) leaves the
    contents untouched and does not notify.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        on_change: Callable[[], None] | None = None,
        validate: Callable[[T], None] | None = None,
    ) -> None:
        self._validate = validate
        self._items: list[T] = self._checked(items)
        self._on_change = on_change

    def _checked(self, values: Iterable[T]) -> list[T]:
        values = list(values)
        if self._validate is not None:
            for value in values:
                self._validate(value)
        return values

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, slice):
            value = self._checked(value)
        else:
            self._checked([value])
        self._items[index] = value
        self._notify()

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]
        self._notify()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObservableList):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def insert(self, index: int, value: T) -> None:
        self._checked([value])
        self._items.insert(index, value)
        self._notify()

    def append(self, value: T) -> None:
        self._checked([value])
        self._items.append(value)
        self._notify()

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(self._checked(values))
        self._notify()

    def __iadd__(self, values: Iterable[T]) -> ObservableList[T]:  # type: ignore[override]
        self.extend(values)
        return self

    def pop(self, index: SupportsIndex = -1) -> T:
        value = self._items.pop(index)
        self._notify()
        return value

    def remove(self, value: T) -> None:
        self._items.remove(value)
        self._notify()

    def clear(self) -> None:
        self._items.clear()
        self._notify()

    def reverse(self) -> None:
        self._items.reverse()
        self._notify()

    def sort(self, *, key: Callable[[T], Any] | None = None, reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)  # type: ignore[arg-type]
        self._notify()

    def replace(self, values: Iterable[T]) -> None:
        """Replace the whole contents with `values`, notifying once."""
        self._items = self._checked(values)
        self._notify()
