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

"""Module containing many-to-many association containers."""

from abc import abstractmethod
import bisect
import collections.abc
import enum
import logging
from typing import (Any, Callable, Generic, Iterable, Iterator, Literal,
                    Mapping, MutableSequence, NamedTuple, TypeAlias, TypeVar,
                    final, overload)

from typing_extensions import override

from manytomany.auxiliary.moreitertools import (dedup_adjacent, find_all,
                                                sorted_distinct,
                                                unique_everseen)
from manytomany.datastructures.sequences import SmallList
from manytomany.datastructures.views import (ComponentRef, ListView,
                                             MutableListView, PairRef)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "Pair",
    "OrderPolicy",
    "BaseM2M",
    "M2M",
    "SmallM2M"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class Pair(NamedTuple):
    """
    A left-right pair held in a many-to-many container.

    Pairs compare equal to other pairs and plain two-tuples with equal
    components, and are ordered lexicographically by (left, right).
    """

    left: Any
    right: Any


def _as_pair(item: Any) -> Pair:
    """Convert a two-item iterable to a pair."""
    if isinstance(item, Pair):
        return item
    try:
        left, right = item
    except (TypeError, ValueError) as error:
        raise ValueError("Expected a (left, right) pair. "
                         f"Got; {item!r} of {type(item)}.") from error
    return Pair(left, right)


OrderPolicyNames: TypeAlias = Literal["sorted", "insertion"]


class OrderPolicy(enum.Enum):
    """
    The ordering policies of a many-to-many container.

    Both policies give the same results for every query, they differ only in
    the order of iteration, and in the requirements they place on elements.

    Items
    -----
    `SORTED` - Pairs are kept in ascending lexicographic (left, right) order.
    Requires that pairs are totally ordered.

    `INSERTION` - Pairs are kept in the order they were inserted. Requires
    only that elements support equality.
    """

    SORTED = "sorted"
    INSERTION = "insertion"


LT = TypeVar("LT")
RT = TypeVar("RT")
M2MInit: TypeAlias = Mapping[LT, Iterable[RT]] | Iterable[tuple[LT, RT]]


class BaseM2M(collections.abc.Collection, Generic[LT, RT]):
    """
    Base class for many-to-many association containers.

    A many-to-many container holds a sequence of unique (left, right) pairs.
    Lefts and rights may each appear in many pairs, but any given pair appears
    at most once. Lookups work in both directions, from a left to all the
    rights it is paired with, and from a right to all of its lefts.

    No secondary index is kept, every operation is a linear scan over the
    pairs. This suits small to medium populations, where the scan of a
    contiguous sequence beats the overhead of keeping hash tables in sync.

    Queries that would otherwise return an empty list return None instead,
    such that a result is always either None or a non-empty list.

    Sub-classes decide how the pairs are stored, by implementing
    `_make_store()`.
    """

    __M2M_LOGGER = logging.getLogger("M2M")

    __slots__ = {
        "__pairs": "The store of pairs.",
        "__order_policy": "The ordering policy of the pairs.",
        "__name": "The name of the container.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(
        self,
        init: M2MInit[LT, RT] | None = None, /,
        order_policy: OrderPolicy | OrderPolicyNames = "sorted",
        name: str | None = None,
        debug: bool = False
    ) -> None:
        """Create a new many-to-many container."""
        try:
            self.__order_policy = OrderPolicy(order_policy)
        except ValueError as error:
            raise ValueError(
                "Order policy must be an OrderPolicy or one of "
                f"{[policy.value for policy in OrderPolicy]}. "
                f"Got; {order_policy!r}."
            ) from error
        self.__name: str
        if name is None:
            self.__name = f"{type(self).__name__}@{id(self):#x}"
        else:
            self.__name = name
        self.__debug: bool = debug
        self.__pairs: MutableSequence[Pair] = self._make_store(
            self.__collect(init)
        )
        if self.__debug:
            self.__M2M_LOGGER.debug(
                "%s: Created with %s pairs, order_policy=%s",
                self.__name, len(self.__pairs), self.__order_policy.value
            )

    def __collect(self, init: M2MInit[LT, RT] | None) -> list[Pair]:
        """
        Collect the initial pairs, ordering them and removing duplicates
        according to the ordering policy.
        """
        if init is None:
            return []
        items: Iterable[Any]
        if isinstance(init, Mapping):
            items = ((left, right)
                     for left, rights in init.items()
                     for right in rights)
        else:
            items = init
        pairs = [_as_pair(item) for item in items]
        if self.__order_policy is OrderPolicy.SORTED:
            pairs.sort()
            return list(dedup_adjacent(pairs))
        return list(unique_everseen(pairs))

    @abstractmethod
    def _make_store(self, pairs: list[Pair], /) -> MutableSequence[Pair]:
        """
        Make the store of pairs, initialised with the given pairs.

        The given list is unique to the new container and may be used as the
        store itself.
        """
        ...

    def _options(self) -> dict[str, Any]:
        """Get the keyword arguments needed to create a container like this
        one."""
        return {"order_policy": self.__order_policy, "debug": self.__debug}

    def __repr__(self) -> str:
        """Get an instantiable string representation of the container."""
        pairs = [tuple(pair) for pair in self.__pairs]
        if self.__order_policy is OrderPolicy.SORTED:
            return f"{type(self).__name__}({pairs!r})"
        return (f"{type(self).__name__}({pairs!r}, "
                f"order_policy={self.__order_policy.value!r})")

    def __eq__(self, other: object) -> bool:
        """
        Check if the container holds the same sequence of pairs as another
        many-to-many container.
        """
        if not isinstance(other, BaseM2M):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore

    def __copy__(self) -> "BaseM2M[LT, RT]":
        """Get a shallow copy of the container."""
        return type(self)(self.__pairs, **self._options())

    @property
    def name(self) -> str:
        """Get the name of the container."""
        return self.__name

    @property
    def order_policy(self) -> OrderPolicy:
        """Get the ordering policy of the container."""
        return self.__order_policy

    @property
    def debug(self) -> bool:
        """Whether debug messages are logged."""
        return self.__debug

    def __len__(self) -> int:
        """Get the number of pairs in the container."""
        return len(self.__pairs)

    @property
    def is_empty(self) -> bool:
        """Whether the container holds no pairs."""
        return len(self.__pairs) == 0

    def __iter__(self) -> Iterator[Pair]:
        """Iterate over the pairs in container order."""
        return iter(self.__pairs)

    def iter(self) -> Iterator[Pair]:
        """Iterate over the pairs in container order."""
        return iter(self.__pairs)

    def __contains__(self, item: object, /) -> bool:
        """Check if the given (left, right) tuple is a pair of the container."""
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return item in self.__pairs

    def contains(self, left: LT, right: RT, /) -> bool:
        """
        Check if the container holds the given left-right pair.

        For example:
        ```
        >>> m2m = M2M([(1, "a")])
        >>> m2m.contains(1, "a")
        True
        >>> m2m.contains(1, "b")
        False
        ```
        """
        return Pair(left, right) in self.__pairs

    def contains_left(self, left: LT, /) -> bool:
        """Check if any pair of the container has the given left."""
        return any(pair[0] == left for pair in self.__pairs)

    def contains_right(self, right: RT, /) -> bool:
        """Check if any pair of the container has the given right."""
        return any(pair[1] == right for pair in self.__pairs)

    def insert(self, left: LT, right: RT, /) -> bool:
        """
        Insert a left-right pair into the container.

        Return True if the pair was not already in the container, otherwise
        return False and leave the container unchanged.

        For example:
        ```
        >>> m2m = M2M()
        >>> m2m.insert(2, "a")
        True
        >>> m2m.insert(1, "b")
        True
        >>> m2m.insert(2, "a")
        False
        >>> m2m
        M2M([(1, 'b'), (2, 'a')])
        ```
        """
        pair = Pair(left, right)
        if pair in self.__pairs:
            return False
        if self.__order_policy is OrderPolicy.SORTED:
            # The store must be untouched if comparing the pair fails.
            index = bisect.bisect_right(self.__pairs, pair)
            self.__pairs.insert(index, pair)
        else:
            self.__pairs.append(pair)
        if self.__debug:
            self.__M2M_LOGGER.debug(
                "%s: Inserted pair %s", self.__name, pair
            )
        return True

    def extend(self, pairs: Iterable[tuple[LT, RT]], /) -> int:
        """
        Insert each of the given left-right pairs into the container.

        Return the number of pairs that were newly inserted.
        """
        return sum(self.insert(*_as_pair(item)) for item in pairs)

    def __keep(self, predicate: Callable[[Pair], bool]) -> int:
        """
        Keep only the pairs for which the predicate holds true, in their
        current order. Return the number of pairs removed.
        """
        kept = [pair for pair in self.__pairs if predicate(pair)]
        removed = len(self.__pairs) - len(kept)
        if removed:
            self.__pairs[:] = kept
        return removed

    def remove(self, left: LT, /) -> list[RT] | None:
        """
        Remove all the pairs with the given left.

        Return the rights of the removed pairs in their container order, or
        None if no pair had the given left.

        For example:
        ```
        >>> m2m = M2M([(1, "a"), (1, "b"), (2, "c")])
        >>> m2m.remove(1)
        ['a', 'b']
        >>> m2m.remove(1) is None
        True
        >>> m2m
        M2M([(2, 'c')])
        ```
        """
        rights = [pair[1] for pair in self.__pairs if pair[0] == left]
        if not rights:
            return None
        self.__keep(lambda pair: not pair[0] == left)
        if self.__debug:
            self.__M2M_LOGGER.debug(
                "%s: Removed left %s with rights %s",
                self.__name, left, rights
            )
        return rights

    def remove_right(self, right: RT, /) -> list[LT] | None:
        """
        Remove all the pairs with the given right.

        Return the lefts of the removed pairs in their container order, or
        None if no pair had the given right.
        """
        lefts = [pair[0] for pair in self.__pairs if pair[1] == right]
        if not lefts:
            return None
        self.__keep(lambda pair: not pair[1] == right)
        if self.__debug:
            self.__M2M_LOGGER.debug(
                "%s: Removed right %s with lefts %s",
                self.__name, right, lefts
            )
        return lefts

    def discard(self, left: LT, right: RT, /) -> bool:
        """
        Remove the given left-right pair from the container.

        Return True if the pair was in the container, otherwise False.
        """
        pair = Pair(left, right)
        for index, _ in find_all(self.__pairs,
                                 lambda _, other: other == pair):
            del self.__pairs[index]
            if self.__debug:
                self.__M2M_LOGGER.debug(
                    "%s: Discarded pair %s", self.__name, pair
                )
            return True
        return False

    def clear(self) -> None:
        """Remove all the pairs from the container."""
        if self.__debug:
            self.__M2M_LOGGER.debug(
                "%s: Clearing %s pairs", self.__name, len(self.__pairs)
            )
        self.__pairs.clear()

    def retain(self, predicate: Callable[[Pair], bool], /) -> None:
        """
        Keep only the pairs for which the predicate holds true.

        The predicate is called with each pair, the order of the kept pairs
        is preserved.

        For example:
        ```
        >>> m2m = M2M([(1, "a"), (1, "b"), (2, "a"), (2, "b")])
        >>> m2m.retain(lambda pair: pair.left % 2 == 0)
        >>> m2m
        M2M([(2, 'a'), (2, 'b')])
        ```
        """
        removed = self.__keep(lambda pair: bool(predicate(pair)))
        if self.__debug:
            self.__M2M_LOGGER.debug(
                "%s: Retain removed %s pairs", self.__name, removed
            )

    def reject(self, predicate: Callable[[Pair], bool], /) -> None:
        """
        Remove the pairs for which the predicate holds true.

        The opposite of `retain()`, the order of the kept pairs is preserved.
        """
        removed = self.__keep(lambda pair: not predicate(pair))
        if self.__debug:
            self.__M2M_LOGGER.debug(
                "%s: Reject removed %s pairs", self.__name, removed
            )

    def get_rights(self, left: LT, /) -> list[RT] | None:
        """
        Get the rights paired with the given left, in container order.

        Return None if no pair has the given left.

        For example:
        ```
        >>> m2m = M2M([(1, "a"), (1, "b"), (2, "c"), (2, "d")])
        >>> m2m.get_rights(1)
        ['a', 'b']
        ```
        """
        rights = [pair[1] for pair in self.__pairs if pair[0] == left]
        return rights or None

    def get_lefts(self, right: RT, /) -> list[LT] | None:
        """
        Get the lefts paired with the given right, in container order.

        Return None if no pair has the given right.
        """
        lefts = [pair[0] for pair in self.__pairs if pair[1] == right]
        return lefts or None

    def get_rights_mut(self, left: LT, /) -> list[ComponentRef[RT]] | None:
        """
        Get writable references to the rights paired with the given left, in
        container order.

        Return None if no pair has the given left.

        Assigning to a reference's value writes into the container without
        checking its invariants, see `normalize()`.

        For example:
        ```
        >>> m2m = M2M([(1, 11), (1, 111), (2, 22)])
        >>> for ref in m2m.get_rights_mut(1):
        ...     ref.value *= 3
        >>> m2m.rights()
        [22, 33, 333]
        ```
        """
        refs = [
            ComponentRef[RT](self.__pairs, index, "right")
            for index, _ in find_all(self.__pairs,
                                     lambda _, pair: pair[0] == left)
        ]
        return refs or None

    def get_lefts_mut(self, right: RT, /) -> list[ComponentRef[LT]] | None:
        """
        Get writable references to the lefts paired with the given right, in
        container order.

        Return None if no pair has the given right.

        Assigning to a reference's value writes into the container without
        checking its invariants, see `normalize()`.
        """
        refs = [
            ComponentRef[LT](self.__pairs, index, "left")
            for index, _ in find_all(self.__pairs,
                                     lambda _, pair: pair[1] == right)
        ]
        return refs or None

    def lefts(self) -> list[LT] | None:
        """
        Get the distinct lefts of the container in ascending order.

        Return None if the container is empty.
        """
        if not self.__pairs:
            return None
        return sorted_distinct(pair[0] for pair in self.__pairs)

    def rights(self) -> list[RT] | None:
        """
        Get the distinct rights of the container in ascending order.

        Return None if the container is empty.
        """
        if not self.__pairs:
            return None
        return sorted_distinct(pair[1] for pair in self.__pairs)

    def into_lefts(self) -> list[LT] | None:
        """
        Take the distinct lefts of the container in ascending order, leaving
        the container empty.

        Return None if the container was empty.
        """
        lefts = self.lefts()
        self.__pairs.clear()
        return lefts

    def into_rights(self) -> list[RT] | None:
        """
        Take the distinct rights of the container in ascending order, leaving
        the container empty.

        Return None if the container was empty.
        """
        rights = self.rights()
        self.__pairs.clear()
        return rights

    def into_iter(self) -> Iterator[Pair]:
        """
        Take the pairs of the container, leaving the container empty.

        Return an iterator over the taken pairs in container order.
        """
        pairs = list(self.__pairs)
        self.__pairs.clear()
        return iter(pairs)

    def as_slice(self) -> ListView[Pair]:
        """Get a read-only view of the pairs in container order."""
        return ListView(self.__pairs)

    def as_mut_slice(self) -> MutableListView[Pair]:
        """
        Get a view of the pairs in container order, through which pairs can
        be replaced (but not inserted or deleted).

        Replacing pairs writes into the container without checking its
        invariants, see `normalize()`.

        For example:
        ```
        >>> m2m = M2M([(1, "a"), (1, "b")])
        >>> view = m2m.as_mut_slice()
        >>> view[1] = (3, "b")
        >>> m2m
        M2M([(1, 'a'), (3, 'b')])
        ```
        """
        return MutableListView(self.__pairs, _as_pair)

    def iter_mut(self) -> Iterator[PairRef[LT, RT]]:
        """
        Iterate over writable references to the pairs in container order.

        Assigning to a reference's left or right writes into the container
        without checking its invariants, see `normalize()`.

        For example:
        ```
        >>> m2m = M2M([(1, "a"), (1, "b"), (2, "a")])
        >>> for ref in m2m.iter_mut():
        ...     ref.left += 2
        >>> m2m
        M2M([(3, 'a'), (3, 'b'), (4, 'a')])
        ```
        """
        for index in range(len(self.__pairs)):
            yield PairRef(self.__pairs, index)

    def normalize(self) -> int:
        """
        Restore the uniqueness and ordering of the pairs, after they have been
        changed through a mutable view or reference.

        Return the number of duplicate pairs that were removed.
        """
        pairs = self.__collect(self.__pairs)
        removed = len(self.__pairs) - len(pairs)
        self.__pairs[:] = pairs
        if self.__debug:
            self.__M2M_LOGGER.debug(
                "%s: Normalized, removed %s duplicate pairs",
                self.__name, removed
            )
        return removed

    def flip(self) -> "BaseM2M[RT, LT]":
        """
        Create a new container of the same type and options, holding the
        pairs of this container with their left and right swapped.

        For example:
        ```
        >>> m2m = M2M([(1, "a"), (1, "b"), (2, "a")])
        >>> m2m.flip()
        M2M([('a', 1), ('a', 2), ('b', 1)])
        >>> m2m.flip().get_rights("a")
        [1, 2]
        ```
        """
        return type(self)(
            [(right, left) for left, right in self.__pairs],
            **self._options()
        )


@final
class M2M(BaseM2M[LT, RT]):
    """
    Class defining a many-to-many container backed by a standard list.

    Example Usage
    -------------
    ```
    >>> from manytomany.datastructures.manytomany import M2M
    >>> m2m = M2M([(1, "a"), (1, "b"), (2, "a"), (2, "b")])
    >>> m2m
    M2M([(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')])

    # Get the rights of a left, and the lefts of a right.
    >>> m2m.get_rights(1)
    ['a', 'b']
    >>> m2m.get_lefts("a")
    [1, 2]

    # Get all the distinct lefts and rights.
    >>> m2m.lefts()
    [1, 2]
    >>> m2m.rights()
    ['a', 'b']

    # Lookups with no matches give None.
    >>> m2m.get_rights(3) is None
    True
    ```
    """

    __slots__ = ()

    @overload
    def __init__(
        self, *,
        order_policy: OrderPolicy | OrderPolicyNames = "sorted",
        name: str | None = None,
        debug: bool = False
    ) -> None:
        """
        Create a new empty many-to-many container.

        For example:
        ```
        >>> m2m = M2M()
        >>> m2m
        M2M([])
        ```
        """
        ...

    @overload
    def __init__(
        self,
        mapping: Mapping[LT, Iterable[RT]], /,
        order_policy: OrderPolicy | OrderPolicyNames = "sorted",
        name: str | None = None,
        debug: bool = False
    ) -> None:
        """
        Create a new many-to-many container from a mapping of lefts to
        iterables of rights.

        For example:
        ```
        >>> m2m = M2M({"parent_1": ["child_1", "child_2"],
                       "parent_2": ["child_1"]})
        >>> m2m
        M2M([('parent_1', 'child_1'), ('parent_1', 'child_2'),
             ('parent_2', 'child_1')])
        ```
        """
        ...

    @overload
    def __init__(
        self,
        iterable: Iterable[tuple[LT, RT]], /,
        order_policy: OrderPolicy | OrderPolicyNames = "sorted",
        name: str | None = None,
        debug: bool = False
    ) -> None:
        """
        Create a new many-to-many container from an iterable of left-right
        pairs. Duplicate pairs are dropped.

        For example:
        ```
        >>> m2m = M2M([(2, "b"), (1, "a"), (1, "a")])
        >>> m2m
        M2M([(1, 'a'), (2, 'b')])
        ```
        """
        ...

    def __init__(  # type: ignore
        self,
        init: M2MInit[LT, RT] | None = None, /,
        order_policy: OrderPolicy | OrderPolicyNames = "sorted",
        name: str | None = None,
        debug: bool = False
    ) -> None:
        """Create a new many-to-many container."""
        super().__init__(
            init,
            order_policy=order_policy,
            name=name,
            debug=debug
        )

    @override
    def _make_store(self, pairs: list[Pair], /) -> list[Pair]:
        return pairs


@final
class SmallM2M(BaseM2M[LT, RT]):
    """
    Class defining a many-to-many container backed by a small list.

    The pairs are held in a pre-allocated inline buffer of a fixed capacity,
    avoiding any resizing of the store while the container is small. If the
    number of pairs exceeds the capacity, the pairs are moved to a growable
    list, and stay there even if the container shrinks again.

    Suited to many small and short-lived containers. The behaviour of all
    operations is identical to `M2M`.

    Example Usage
    -------------
    ```
    >>> from manytomany.datastructures.manytomany import SmallM2M
    >>> m2m = SmallM2M([(1, "a"), (2, "b")], inline_capacity=2)
    >>> m2m.spilled
    False
    >>> m2m.insert(3, "c")
    True
    >>> m2m.spilled
    True
    ```
    """

    __SMALL_M2M_LOGGER = logging.getLogger("SmallM2M")

    __slots__ = {
        "__inline_capacity": "The capacity of the inline buffer.",
        "__store": "The small list holding the pairs."
    }

    def __init__(
        self,
        init: M2MInit[LT, RT] | None = None, /,
        order_policy: OrderPolicy | OrderPolicyNames = "sorted",
        inline_capacity: int = 8,
        name: str | None = None,
        debug: bool = False
    ) -> None:
        """
        Create a new small many-to-many container.

        Parameters
        ----------
        `init: Mapping[LT, Iterable[RT]] | Iterable[tuple[LT, RT]] | None =
        None` - The initial pairs, either as a mapping of lefts to iterables
        of rights, or an iterable of left-right pairs. Duplicate pairs are
        dropped.

        `order_policy: OrderPolicy | "sorted" | "insertion" = "sorted"` - The
        ordering policy of the pairs.

        `inline_capacity: int = 8` - The number of pairs that can be held
        before the pairs are moved from the inline buffer to the heap.

        `name: str | None = None` - The name of the container, used in log
        messages. If None, the class name and id of the object are used.

        `debug: bool = False` - Whether to log debug messages.

        Raises
        ------
        `TypeError` - If `inline_capacity` is not an integer.

        `ValueError` - If `inline_capacity` is not positive, if
        `order_policy` is not a valid policy, or if an initial item is not a
        left-right pair.
        """
        self.__inline_capacity: int = inline_capacity
        self.__store: SmallList[Pair]
        super().__init__(
            init,
            order_policy=order_policy,
            name=name,
            debug=debug
        )

    @override
    def _make_store(self, pairs: list[Pair], /) -> SmallList[Pair]:
        self.__store = SmallList(pairs, capacity=self.__inline_capacity)
        if self.debug and self.__store.spilled:
            self.__SMALL_M2M_LOGGER.debug(
                "%s: Created with %s pairs, exceeding inline capacity %s",
                self.name, len(self.__store), self.__inline_capacity
            )
        return self.__store

    @override
    def _options(self) -> dict[str, Any]:
        return {**super()._options(),
                "inline_capacity": self.__inline_capacity}

    @property
    def inline_capacity(self) -> int:
        """Get the capacity of the inline buffer."""
        return self.__inline_capacity

    @property
    def spilled(self) -> bool:
        """Whether the pairs have been moved from the inline buffer to the
        heap."""
        return self.__store.spilled

    @override
    def insert(self, left: LT, right: RT, /) -> bool:
        spilled = self.__store.spilled
        inserted = super().insert(left, right)
        if self.debug and not spilled and self.__store.spilled:
            self.__SMALL_M2M_LOGGER.debug(
                "%s: Spilled to the heap, exceeding inline capacity %s",
                self.name, self.__inline_capacity
            )
        return inserted
    insert.__doc__ = BaseM2M.insert.__doc__


def __main() -> None:
    """Execute the main routine."""
    logging.basicConfig(level=logging.DEBUG)
    m2m = M2M({"parent_1": ["child_1", "child_2"],
               "parent_2": ["child_1"],
               "parent_3": ["child_2"]}, debug=True)
    print(m2m)
    print(m2m.get_rights("parent_1"))
    print(m2m.get_lefts("child_1"))
    print(m2m.contains("parent_3", "child_1"))
    m2m.insert("parent_4", "child_1")
    print(m2m.lefts(), m2m.rights())
    print(m2m.remove("parent_4"))
    print(m2m.flip())
    small = SmallM2M(m2m, inline_capacity=4, debug=True)
    small.insert("parent_5", "child_3")
    small.insert("parent_6", "child_3")
    print(small, small.spilled)


if __name__ == "__main__":
    __main()
