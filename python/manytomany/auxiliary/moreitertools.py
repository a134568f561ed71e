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

"""Module defining additional functions for operating on iterables."""

__all__ = (
    "dedup_adjacent",
    "sorted_distinct",
    "unique_everseen",
    "find_all"
)

import itertools
from typing import Callable, Iterable, Iterator, Optional, TypeVar

from manytomany.auxiliary.typingutils import SupportsRichComparison


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


_VT = TypeVar("_VT")
_VTC = TypeVar("_VTC", bound=SupportsRichComparison)


def dedup_adjacent(iterable: Iterable[_VT]) -> Iterator[_VT]:
    """
    Yield the items of the iterable, dropping any item that is equal to the
    item immediately before it.

    The first item of each run of equal items is kept.
    """
    for _, group in itertools.groupby(iterable):
        yield next(group)


def sorted_distinct(iterable: Iterable[_VTC]) -> list[_VTC]:
    """Return the distinct items of the iterable in ascending order."""
    return list(dedup_adjacent(sorted(iterable)))


def unique_everseen(iterable: Iterable[_VT]) -> Iterator[_VT]:
    """
    Yield the unique items of the iterable, in the order they are first seen.

    Hashable items are tracked in a set, unhashable items fall back to a
    linear scan of those seen before, so items need only support equality.
    """
    seen_hashable: set[_VT] = set()
    seen_unhashable: list[_VT] = []
    for item in iterable:
        try:
            if item in seen_hashable:
                continue
            seen_hashable.add(item)
        except TypeError:
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        yield item


def find_all(iterable: Iterable[_VT],
             condition: Callable[[int, _VT], bool],
             limit: Optional[int] = None
             ) -> Iterator[tuple[int, _VT]]:
    """
    Return an iterator over all the elements of the iterable where the
    condition holds true, along with their indices.
    """
    for index, element in enumerate(iterable):
        if index == limit:
            break
        if condition(index, element):
            yield (index, element)
