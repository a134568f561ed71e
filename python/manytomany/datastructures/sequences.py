###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Module containing sequence data structures."""

import collections.abc
from typing import Generic, Iterable, Iterator, TypeVar, overload

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "SmallList",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


LT = TypeVar("LT")


class SmallList(collections.abc.MutableSequence, Generic[LT]):
    """
    A list structure with a fixed and pre-allocated inline buffer, that spills
    to a growable heap list when the buffer is full.

    While the number of items is at most the inline capacity, items are
    assigned into pre-allocated slots and no resizing happens. When an insert
    would exceed the capacity, all items are moved to a standard list which
    then grows on demand. The list never moves back to the inline buffer,
    even if it is cleared.

    Example Usage
    -------------
    ```
    >>> small = SmallList([1, 2], capacity=3)
    >>> small.append(3)
    >>> small.spilled
    False
    >>> small.append(4)
    >>> small.spilled
    True
    >>> small
    SmallList([1, 2, 3, 4], capacity=3)
    ```
    """

    __slots__ = {
        "__inline": "The pre-allocated inline buffer, None once spilled.",
        "__heap": "The heap list, None until spilled.",
        "__length": "The number of items in the inline buffer.",
        "__capacity": "The capacity of the inline buffer."
    }

    def __init__(
        self,
        init: Iterable[LT] = (),
        capacity: int = 8
    ) -> None:
        """Create a new small list."""
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError("capacity must be an integer")
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self.__capacity: int = capacity
        self.__inline: list[LT | None] | None = [None] * capacity
        self.__heap: list[LT] | None = None
        self.__length: int = 0
        self.extend(init)

    def __repr__(self) -> str:
        return f"SmallList({list(self)!r}, capacity={self.__capacity})"

    @property
    def capacity(self) -> int:
        """Get the capacity of the inline buffer."""
        return self.__capacity

    @property
    def spilled(self) -> bool:
        """Whether the items have been moved from the inline buffer to the
        heap."""
        return self.__heap is not None

    def __len__(self) -> int:
        """Get the length of the list."""
        if self.__heap is not None:
            return len(self.__heap)
        return self.__length

    def __check_index(self, index: int, allow_end: bool = False) -> int:
        """Normalise a possibly negative index, checking it is in range."""
        length = self.__length
        if index < 0:
            index += length
        if index < 0 or index > length or (index == length and not allow_end):
            raise IndexError("Index out of range")
        return index

    @overload
    def __getitem__(self, index: int) -> LT:
        ...

    @overload
    def __getitem__(self, index: slice) -> list[LT]:
        ...

    def __getitem__(self, index: int | slice) -> LT | list[LT]:
        """Get the item or slice at the given index."""
        if self.__heap is not None:
            return self.__heap[index]
        if isinstance(index, slice):
            return self.__inline[:self.__length][index]  # type: ignore
        return self.__inline[self.__check_index(index)]  # type: ignore

    def __setitem__(self, index: int | slice, value: LT | Iterable[LT]) -> None:
        """Set the item at the given index."""
        if self.__heap is not None:
            self.__heap[index] = value  # type: ignore
            return
        if isinstance(index, slice):
            items = self.__inline[:self.__length]  # type: ignore
            items[index] = value  # type: ignore
            self.__reload(items)
            return
        self.__inline[self.__check_index(index)] = value  # type: ignore

    def __delitem__(self, index: int | slice) -> None:
        """Delete the item or slice at the given index."""
        if self.__heap is not None:
            del self.__heap[index]
            return
        if isinstance(index, slice):
            items = self.__inline[:self.__length]  # type: ignore
            del items[index]
            self.__reload(items)
            return
        index = self.__check_index(index)
        inline = self.__inline
        # Shift-down the rest of the buffer and clear the vacated slot.
        inline[index:self.__length - 1] = \
            inline[index + 1:self.__length]  # type: ignore
        self.__length -= 1
        inline[self.__length] = None  # type: ignore

    def __iter__(self) -> Iterator[LT]:
        """Iterate over the list."""
        if self.__heap is not None:
            yield from self.__heap
        else:
            yield from self.__inline[:self.__length]  # type: ignore

    def __reload(self, items: list[LT]) -> None:
        """Replace the contents of the inline buffer with the given items."""
        if len(items) > self.__capacity:
            self.__spill(items)
            return
        self.__inline[:len(items)] = items  # type: ignore
        for index in range(len(items), self.__length):
            self.__inline[index] = None  # type: ignore
        self.__length = len(items)

    def __spill(self, items: list[LT]) -> None:
        """Move to the heap, holding the given items."""
        self.__heap = items
        self.__inline = None
        self.__length = 0

    def insert(self, index: int, value: LT) -> None:
        """Insert the given value before the given index."""
        if self.__heap is not None:
            self.__heap.insert(index, value)
            return
        # Clamp the index in the same way as the built-in list.
        length = self.__length
        if index < 0:
            index = max(0, index + length)
        index = min(index, length)
        if length == self.__capacity:
            items = self.__inline[:length]  # type: ignore
            items.insert(index, value)
            self.__spill(items)
            return
        inline = self.__inline
        inline[index + 1:length + 1] = inline[index:length]  # type: ignore
        inline[index] = value  # type: ignore
        self.__length += 1

    def append(self, value: LT) -> None:
        """Append the given value to the list."""
        self.insert(len(self), value)

    def clear(self) -> None:
        """Clear the list, keeping its storage."""
        if self.__heap is not None:
            self.__heap.clear()
            return
        for index in range(self.__length):
            self.__inline[index] = None  # type: ignore
        self.__length = 0

    def sort(self, *, key=None, reverse: bool = False) -> None:
        """Sort the list in place."""
        if self.__heap is not None:
            self.__heap.sort(key=key, reverse=reverse)
            return
        self.__inline[:self.__length] = sorted(  # type: ignore
            self.__inline[:self.__length],  # type: ignore
            key=key,
            reverse=reverse
        )


def __main() -> None:
    """Execute the main routine."""
    small = SmallList[int](capacity=3)
    for i in range(5):
        small.append(i)
        print(small, small.spilled)
    del small[0]
    print(small)
    small.clear()
    print(small, small.spilled)


if __name__ == "__main__":
    __main()
