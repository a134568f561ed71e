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

"""
Module containing data structure view and reference types.

Views are live; they reflect changes made to the viewed sequence by its owner.
Mutable views and references write straight into the viewed sequence, and
perform no checks on what is written.
"""

import collections.abc
from typing import (Any, Callable, Generic, Iterator, Literal,
                    MutableSequence, Sequence, TypeVar, final, overload)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.1.0"

__all__ = (
    "ListView",
    "MutableListView",
    "PairRef",
    "ComponentRef"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


LT = TypeVar("LT")


@final
class ListView(collections.abc.Sequence, Generic[LT]):
    """
    Class defining a view of a list.

    The list cannot be modified through the view, but the view will reflect
    changes made to the list by its owner.
    """

    __slots__ = {
        "__list": "The list being viewed."
    }

    def __init__(self, list_: Sequence[LT], /) -> None:
        """Create a new list view."""
        self.__list: Sequence[LT] = list_

    def __repr__(self) -> str:
        """Get an instantiable string representation of the list view."""
        return f"ListView({list(self.__list)!r})"

    def __eq__(self, other: object) -> bool:
        """Compare the viewed items with another sequence."""
        if not isinstance(other, collections.abc.Sequence):
            return NotImplemented
        return list(self.__list) == list(other)

    @overload
    def __getitem__(self, index: int, /) -> LT:
        """Get the item at the given index."""
        ...

    @overload
    def __getitem__(self, index: slice, /) -> list[LT]:
        """Get the slice at the given index."""
        ...

    def __getitem__(self, index: int | slice, /) -> LT | list[LT]:
        """Get the item or slice at the given index."""
        if isinstance(index, slice):
            return list(self.__list[index])
        return self.__list[index]

    def __iter__(self) -> Iterator[LT]:
        """Iterate over the items in the list."""
        return iter(self.__list)

    def __len__(self) -> int:
        """Get the number of items in the list."""
        return len(self.__list)


@final
class MutableListView(collections.abc.Sequence, Generic[LT]):
    """
    Class defining a mutable view of a list.

    Items of the list can be replaced through the view, but items cannot be
    inserted or deleted, so the length of the list is fixed by the view.
    The view will reflect changes made to the list by its owner.

    If a `convert` function is given, every item assigned through the view is
    passed through it before it is written to the list.
    """

    __slots__ = {
        "__list": "The list being viewed.",
        "__convert": "Function applied to items assigned through the view."
    }

    def __init__(
        self,
        list_: MutableSequence[LT], /,
        convert: Callable[[Any], LT] | None = None
    ) -> None:
        """Create a new mutable list view."""
        self.__list: MutableSequence[LT] = list_
        self.__convert: Callable[[Any], LT] | None = convert

    def __repr__(self) -> str:
        """Get an instantiable string representation of the list view."""
        return f"MutableListView({list(self.__list)!r})"

    def __eq__(self, other: object) -> bool:
        """Compare the viewed items with another sequence."""
        if not isinstance(other, collections.abc.Sequence):
            return NotImplemented
        return list(self.__list) == list(other)

    @overload
    def __getitem__(self, index: int, /) -> LT:
        ...

    @overload
    def __getitem__(self, index: slice, /) -> list[LT]:
        ...

    def __getitem__(self, index: int | slice, /) -> LT | list[LT]:
        """Get the item or slice at the given index."""
        if isinstance(index, slice):
            return list(self.__list[index])
        return self.__list[index]

    def __setitem__(self, index: int, value: Any, /) -> None:
        """Replace the item at the given index."""
        if isinstance(index, slice):
            raise TypeError("Mutable list views do not support slice "
                            "assignment, as it could change the length "
                            "of the viewed list.")
        if self.__convert is not None:
            value = self.__convert(value)
        self.__list[index] = value

    def __delitem__(self, index: int | slice, /) -> None:
        raise TypeError("Items cannot be deleted through a mutable list "
                        "view.")

    def __iter__(self) -> Iterator[LT]:
        """Iterate over the items in the list."""
        return iter(self.__list)

    def __len__(self) -> int:
        """Get the number of items in the list."""
        return len(self.__list)


PT = TypeVar("PT")
QT = TypeVar("QT")


@final
class PairRef(Generic[PT, QT]):
    """
    Class defining a writable reference to a pair held in a sequence of
    two-item named tuples.

    Assigning to `left` or `right` replaces the pair in the sequence with a
    copy that has the given component changed.
    """

    __slots__ = {
        "__sequence": "The sequence holding the pair.",
        "__index": "The index of the pair in the sequence."
    }

    def __init__(self, sequence: MutableSequence[Any], index: int, /) -> None:
        """Create a new reference to the pair at the given index."""
        self.__sequence: MutableSequence[Any] = sequence
        self.__index: int = index

    def __repr__(self) -> str:
        return f"PairRef({self.__sequence[self.__index]!r})"

    def __iter__(self) -> Iterator[PT | QT]:
        """Iterate over the components of the referenced pair."""
        return iter(self.__sequence[self.__index])

    @property
    def index(self) -> int:
        """Get the index of the referenced pair."""
        return self.__index

    @property
    def pair(self) -> tuple[PT, QT]:
        """Get the referenced pair."""
        return self.__sequence[self.__index]

    @property
    def left(self) -> PT:
        """Get or set the left component of the pair."""
        return self.__sequence[self.__index][0]

    @left.setter
    def left(self, value: PT) -> None:
        self.__sequence[self.__index] = \
            self.__sequence[self.__index]._replace(left=value)

    @property
    def right(self) -> QT:
        """Get or set the right component of the pair."""
        return self.__sequence[self.__index][1]

    @right.setter
    def right(self, value: QT) -> None:
        self.__sequence[self.__index] = \
            self.__sequence[self.__index]._replace(right=value)


@final
class ComponentRef(Generic[PT]):
    """
    Class defining a writable reference to one component of a pair held in a
    sequence of two-item named tuples.
    """

    __slots__ = {
        "__pair_ref": "Reference to the pair holding the component.",
        "__side": "Which component of the pair is referenced."
    }

    def __init__(
        self,
        sequence: MutableSequence[Any],
        index: int,
        side: Literal["left", "right"], /
    ) -> None:
        """Create a new reference to a component of the pair at an index."""
        if side not in ("left", "right"):
            raise ValueError(f"Side must be 'left' or 'right'. Got; {side!r}.")
        self.__pair_ref: PairRef[Any, Any] = PairRef(sequence, index)
        self.__side: Literal["left", "right"] = side

    def __repr__(self) -> str:
        return f"ComponentRef({self.value!r})"

    @property
    def side(self) -> Literal["left", "right"]:
        """Get which component of the pair is referenced."""
        return self.__side

    @property
    def value(self) -> PT:
        """Get or set the value of the referenced component."""
        return getattr(self.__pair_ref, self.__side)

    @value.setter
    def value(self, value: PT) -> None:
        setattr(self.__pair_ref, self.__side, value)
