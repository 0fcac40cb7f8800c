# ==============================================
# OrderedMap
# ==============================================
#
# PURPOSE:
#   The key -> value container behind every ordered store.
#   Iteration order is well defined in one of two modes:
#
#     1. Insertion mode (no ordering function):
#          keys iterate in the order they were first added.
#          Re-setting an existing key keeps its position.
#          Removing a key and adding it again moves it to the end.
#
#     2. Ordering mode (ordering function given):
#          keys iterate as sorted(keys, key=ordering), computed
#          at iteration time. Keys that tie under the ordering
#          stay distinct and keep their relative insertion order.
#
# CLASS: OrderedMap
# -----------------
#   MutableMapping[str, Optional[str]]. A value of None is a
#   legitimate stored value: the key stays present.
#
#   Constructor:
#   ------------
#   - __init__(ordering: Callable[[str], Any] | None = None)
#
#   Properties:
#   -----------
#   - ordering -> Callable | None
#       The ordering function fixed at construction.
#
#   Methods:
#   --------
#   - __getitem__ / __setitem__ / __delitem__ / __iter__ / __len__
#       Standard mapping protocol; get/pop/items/keys/values come
#       from MutableMapping and follow the same order.
#
#   - put(key, value) -> Optional[str]
#       Store value, return the previous value (None if absent).
#
# ==============================================

from collections.abc import MutableMapping
from typing import Any, Callable, Dict, Iterator, List, Optional


class OrderedMap(MutableMapping):
    """
    Associative container with insertion order or a key-function order.
    """

    def __init__(self, ordering: Optional[Callable[[str], Any]] = None):
        """
        Create an empty map.

        Args:
            ordering: Key function defining the iteration order, as used by
                sorted(). None keeps insertion order.
        """
        self._ordering = ordering
        self._data: Dict[str, Optional[str]] = {}
        # Sorted key list, only used in ordering mode. Reset on add/remove.
        self._sorted_keys: Optional[List[str]] = None

    @property
    def ordering(self) -> Optional[Callable[[str], Any]]:
        return self._ordering

    def __getitem__(self, key: str) -> Optional[str]:
        return self._data[key]

    def __setitem__(self, key: str, value: Optional[str]) -> None:
        if key not in self._data:
            self._sorted_keys = None
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._sorted_keys = None

    def __iter__(self) -> Iterator[str]:
        if self._ordering is None:
            return iter(self._data)
        if self._sorted_keys is None:
            self._sorted_keys = sorted(self._data, key=self._ordering)
        return iter(list(self._sorted_keys))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def put(self, key: str, value: Optional[str]) -> Optional[str]:
        """
        Store a value and return what was there before.

        Args:
            key: Property key
            value: New value (None allowed)

        Returns:
            Previous value, or None if the key was absent
        """
        previous = self._data.get(key)
        self[key] = value
        return previous

    def __repr__(self) -> str:
        mode = "insertion" if self._ordering is None else "ordering"
        return f"OrderedMap({dict(self.items())!r}, mode={mode})"
