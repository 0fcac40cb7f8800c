"""
StoreBuilder: configures and creates OrderedStore instances.

    store = (
        StoreBuilder()
        .with_ordering(str.lower)
        .with_suppress_date_in_comment(True)
        .build()
    )

A comparator-style function (a, b) -> int can be used through
functools.cmp_to_key.
"""

from typing import Any, Callable, Optional

from ordered_properties.ordered_store import OrderedStore


class StoreBuilder:
    """Builder for OrderedStore instances."""

    def __init__(self) -> None:
        self._ordering: Optional[Callable[[str], Any]] = None
        self._suppress_date = False

    def with_ordering(self, ordering: Optional[Callable[[str], Any]]) -> "StoreBuilder":
        """
        Use a custom ordering of the keys.

        Args:
            ordering: Key function as used by sorted(); None restores
                insertion order
        """
        self._ordering = ordering
        return self

    def with_suppress_date_in_comment(self, suppress_date: bool = True) -> "StoreBuilder":
        """Leave out the timestamp comment when storing in the text format."""
        self._suppress_date = suppress_date
        return self

    def build(self) -> OrderedStore:
        """Build a new, empty store. Each call returns an independent store."""
        return OrderedStore(ordering=self._ordering, suppress_date=self._suppress_date)
