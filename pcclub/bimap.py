"""An ordered one-to-one mapping with lookup from either side."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar

from sortedcontainers import SortedDict

L = TypeVar("L")
R = TypeVar("R")

KeyFunc = Callable[[Any], Any]


class BiMap(Generic[L, R]):
    """A set of (left, right) pairs in which each side is unique.

    Both sides are kept sorted.  Two values on one side count as the same
    when their key functions give equal results; without a key function
    the values themselves are compared.
    """

    def __init__(
        self,
        left_key: Optional[KeyFunc] = None,
        right_key: Optional[KeyFunc] = None,
    ) -> None:
        self._left_key: Optional[KeyFunc] = left_key
        self._right_key: Optional[KeyFunc] = right_key
        self._by_left: SortedDict = SortedDict()
        self._by_right: SortedDict = SortedDict()

    def _lkey(self, value: Any) -> Any:
        return value if self._left_key is None else self._left_key(value)

    def _rkey(self, value: Any) -> Any:
        return value if self._right_key is None else self._right_key(value)

    def insert(self, left: L, right: R) -> bool:
        """Add the pair unless either side is already present.

        Returns True when the pair was added.
        """
        lk = self._lkey(left)
        rk = self._rkey(right)
        if lk in self._by_left or rk in self._by_right:
            return False
        self._by_left[lk] = (left, right)
        self._by_right[rk] = (right, left)
        return True

    def erase_left(self, left: L) -> bool:
        """Remove the pair with this left value; True if one was removed."""
        pair = self._by_left.pop(self._lkey(left), None)
        if pair is None:
            return False
        del self._by_right[self._rkey(pair[1])]
        return True

    def erase_right(self, right: R) -> bool:
        """Remove the pair with this right value; True if one was removed."""
        pair = self._by_right.pop(self._rkey(right), None)
        if pair is None:
            return False
        del self._by_left[self._lkey(pair[1])]
        return True

    def at_left(self, key: L) -> R:
        """Return the right value paired with a left value."""
        try:
            return self._by_left[self._lkey(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def at_right(self, key: R) -> L:
        """Return the left value paired with a right value."""
        try:
            return self._by_right[self._rkey(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def at_left_or_default(self, key: L, default: R) -> R:
        """Return the right value for ``key``, pairing it with ``default`` if absent.

        If ``default`` is already paired with another left value, that pair
        is dropped first.
        """
        pair = self._by_left.get(self._lkey(key))
        if pair is not None:
            return pair[1]
        self.erase_right(default)
        self.insert(key, default)
        return self.at_left(key)

    def at_right_or_default(self, key: R, default: L) -> L:
        """Return the left value for ``key``, pairing it with ``default`` if absent.

        If ``default`` is already paired with another right value, that pair
        is dropped first.
        """
        pair = self._by_right.get(self._rkey(key))
        if pair is not None:
            return pair[1]
        self.erase_left(default)
        self.insert(default, key)
        return self.at_right(key)

    def contains_left(self, key: L) -> bool:
        return self._lkey(key) in self._by_left

    def contains_right(self, key: R) -> bool:
        return self._rkey(key) in self._by_right

    @staticmethod
    def _pair_at(side: SortedDict, index: int) -> Optional[tuple]:
        if index >= len(side):
            return None
        return side.peekitem(index)[1]

    def lower_bound_left(self, key: L) -> Optional[Tuple[L, R]]:
        """First (left, right) pair whose left is not less than ``key``."""
        side = self._by_left
        return self._pair_at(side, side.bisect_left(self._lkey(key)))

    def upper_bound_left(self, key: L) -> Optional[Tuple[L, R]]:
        """First (left, right) pair whose left is greater than ``key``."""
        side = self._by_left
        return self._pair_at(side, side.bisect_right(self._lkey(key)))

    def lower_bound_right(self, key: R) -> Optional[Tuple[R, L]]:
        """First (right, left) pair whose right is not less than ``key``."""
        side = self._by_right
        return self._pair_at(side, side.bisect_left(self._rkey(key)))

    def upper_bound_right(self, key: R) -> Optional[Tuple[R, L]]:
        """First (right, left) pair whose right is greater than ``key``."""
        side = self._by_right
        return self._pair_at(side, side.bisect_right(self._rkey(key)))

    def left_items(self) -> Iterator[Tuple[L, R]]:
        """Yield (left, right) pairs ordered by left."""
        yield from list(self._by_left.values())

    def right_items(self) -> Iterator[Tuple[R, L]]:
        """Yield (right, left) pairs ordered by right."""
        yield from list(self._by_right.values())

    def copy(self) -> "BiMap[L, R]":
        clone: BiMap[L, R] = BiMap(self._left_key, self._right_key)
        clone._by_left = self._by_left.copy()
        clone._by_right = self._by_right.copy()
        return clone

    def __len__(self) -> int:
        return len(self._by_left)

    def __bool__(self) -> bool:
        return bool(self._by_left)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BiMap):
            return NotImplemented
        if self is other:
            return True
        if len(self) != len(other):
            return False
        for (l1, r1), (l2, r2) in zip(self.left_items(), other.left_items()):
            if self._lkey(l1) != self._lkey(l2):
                return False
            if self._rkey(r1) != self._rkey(r2):
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        pairs = ", ".join(f"{l!r}: {r!r}" for l, r in self.left_items())
        return f"BiMap({{{pairs}}})"