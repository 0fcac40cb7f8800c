# ==============================================
# OrderedStore — Public Container
# ==============================================
#
# PURPOSE:
#   A drop-in alternative to a conventional .properties map
#   that keeps its entries in a well-defined order: insertion
#   order by default, or the order of an ordering function.
#   Users interact with this class (and StoreBuilder) only.
#
# HOW THE PIECES CONNECT:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                      OrderedStore                        │
#   │                                                          │
#   │   get/set/remove/contains/entries ──► OrderedMap         │
#   │                                          ▲               │
#   │                                          │ bound, no copy│
#   │   load / load_from_xml ──► EngineAdapter ┤               │
#   │   store / store_to_xml ──► EngineAdapter ┘               │
#   │                              │                           │
#   │                              ▼ (suppress_date only)      │
#   │                      CommentFilteringWriter              │
#   │                                                          │
#   │   pickle / to_snapshot ──► StoreSnapshot                 │
#   └──────────────────────────────────────────────────────────┘
#
# CLASS: OrderedStore
# -------------------
#
#   Constructor:
#   ------------
#   - __init__(ordering=None, suppress_date=False)
#       OrderedStore() keeps insertion order and writes the date
#       comment. Use StoreBuilder for the other configurations.
#
#   Public Methods:
#   ---------------
#   - get_property(key, default=None) / set_property(key, value)
#   - remove_property(key) / contains_property(key)
#   - size() / is_empty() / property_names() / entries()
#   - load(source) / load_from_xml(source)
#   - store(sink, comment=None) / store_to_xml(sink, comment=None, encoding=None)
#   - list_properties(out)
#   - to_dict() / copy() / copy_of(source)
#   - to_snapshot() / from_snapshot(data, ordering=None)
#
# THREAD SAFETY:
# --------------
#   Not synchronized. If several threads use one store and at
#   least one of them mutates it (set/remove/load), guard every
#   access with a single lock owned by the caller. Separate
#   stores share nothing and need no coordination.
#
# FAILED LOADS:
# -------------
#   The engine writes entries into the store as it parses.
#   When a load fails part way, the entries read before the
#   failure remain in the store. There is no rollback.
#
# ==============================================

import logging
from typing import Any, BinaryIO, Callable, Dict, Iterator, List, Optional, TextIO, Tuple, Union

from ordered_properties.persistence.snapshot import StoreSnapshot
from ordered_properties.serialization.engine_adapter import EngineAdapter
from ordered_properties.storage.ordered_map import OrderedMap

logger = logging.getLogger(__name__)

Stream = Union[BinaryIO, TextIO]


class OrderedStore:
    """
    Ordered key -> value property store with text and XML serialization.

    Keys and values are strings. A value of None may be set: the key then
    stays present (contains_property() is True) while reads return the
    default. Such a store cannot be written until the value is replaced.

    Default-property chains are not supported.
    """

    def __init__(
        self,
        ordering: Optional[Callable[[str], Any]] = None,
        suppress_date: bool = False
    ):
        """
        Create an empty store.

        Args:
            ordering: Key function defining the iteration order (as used by
                sorted()). None keeps insertion order.
            suppress_date: Leave out the timestamp comment when storing in
                the text format.
        """
        self._properties = OrderedMap(ordering)
        self._suppress_date = suppress_date

    @property
    def ordering(self) -> Optional[Callable[[str], Any]]:
        return self._properties.ordering

    @property
    def suppress_date(self) -> bool:
        return self._suppress_date

    # ------------------------------------------------------------------
    # Entry access
    # ------------------------------------------------------------------

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Look up the value for key.

        Args:
            key: Property key
            default: Returned when the key is absent or its value is None

        Returns:
            The stored value, or default
        """
        value = self._properties.get(key)
        return default if value is None else value

    def set_property(self, key: str, value: Optional[str]) -> Optional[str]:
        """
        Set the value for key, keeping the key's position if it exists.

        Returns:
            The previous value, or None if there was none
        """
        return self._properties.put(key, value)

    def remove_property(self, key: str) -> Optional[str]:
        """
        Remove key if present.

        Returns:
            The removed value, or None if the key was absent
        """
        return self._properties.pop(key, None)

    def contains_property(self, key: str) -> bool:
        return key in self._properties

    def size(self) -> int:
        return len(self._properties)

    def is_empty(self) -> bool:
        return len(self._properties) == 0

    def property_names(self) -> List[str]:
        """Snapshot of the keys, in store order."""
        return list(self._properties)

    def string_property_names(self) -> List[str]:
        """Same as property_names()."""
        return self.property_names()

    def entries(self) -> List[Tuple[str, Optional[str]]]:
        """Snapshot of the (key, value) pairs, in store order."""
        return list(self._properties.items())

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[str]:
        return iter(self.property_names())

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def load(self, source: Stream) -> None:
        """
        Read properties in the text format and add them in file order.

        Args:
            source: Binary stream (decoded as Latin-1) or text stream

        Raises:
            FormatError: On a malformed \\uXXXX escape sequence
        """
        EngineAdapter(self._properties).load(source)

    def load_from_xml(self, source: BinaryIO) -> None:
        """
        Read properties in the XML properties format and add them in
        document order.

        Raises:
            FormatError: On malformed XML or a document that is not a
                properties document
        """
        EngineAdapter(self._properties).load_xml(source)

    def store(self, sink: Stream, comment: Optional[str] = None) -> None:
        """
        Write all properties in the text format, in store order.

        Args:
            sink: Binary stream (Latin-1 encoded) or text stream
            comment: Optional comment; every line is written with a
                leading '#'. Kept even when the date comment is suppressed.
        """
        EngineAdapter(self._properties).store(sink, comment, self._suppress_date)

    def store_to_xml(
        self,
        sink: BinaryIO,
        comment: Optional[str] = None,
        encoding: Optional[str] = None
    ) -> None:
        """
        Write all properties in the XML properties format, in store order.

        Args:
            sink: Binary stream
            comment: Optional text of the <comment> element
            encoding: Output encoding, UTF-8 unless configured otherwise
        """
        EngineAdapter(self._properties).store_xml(sink, comment, encoding)

    def list_properties(self, out: Stream) -> None:
        """Print the properties to out, for debugging."""
        EngineAdapter(self._properties).list(out)

    # ------------------------------------------------------------------
    # Conversion and copying
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Optional[str]]:
        """
        Export the properties as a plain dict.

        Callers must not rely on the order of the returned dict.
        """
        return dict(self._properties.items())

    def copy(self) -> "OrderedStore":
        return OrderedStore.copy_of(self)

    @classmethod
    def copy_of(cls, source: "OrderedStore") -> "OrderedStore":
        """
        Create a store with the same entries and the same behavior as source.

        The copy shares source's ordering function object.
        """
        result = cls(ordering=source.ordering, suppress_date=source.suppress_date)
        for key, value in source.entries():
            result.set_property(key, value)
        return result

    def to_snapshot(self) -> Dict[str, Any]:
        """Export entries and flags as JSON-compatible data."""
        return self._snapshot().to_dict()

    @classmethod
    def from_snapshot(
        cls,
        data: Dict[str, Any],
        ordering: Optional[Callable[[str], Any]] = None
    ) -> "OrderedStore":
        """
        Rebuild a store from to_snapshot() data.

        Raises:
            InvalidStateError: If data is incomplete or malformed
        """
        store = cls.__new__(cls)
        store._restore(StoreSnapshot.from_dict(data, ordering=ordering))
        return store

    def _snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            entries=self.entries(),
            suppress_date=self._suppress_date,
            ordering=self.ordering,
        )

    def _restore(self, snapshot: StoreSnapshot) -> None:
        self._properties = OrderedMap(snapshot.ordering)
        self._suppress_date = snapshot.suppress_date
        for key, value in snapshot.entries:
            self._properties[key] = value
        logger.debug("Restored store with %d properties", len(self._properties))

    def __getstate__(self) -> Dict[str, Any]:
        state = self._snapshot().to_dict()
        state["ordering"] = self.ordering
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        ordering = state.get("ordering") if isinstance(state, dict) else None
        self._restore(StoreSnapshot.from_dict(state, ordering=ordering))

    # ------------------------------------------------------------------
    # Equality and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, OrderedStore):
            return NotImplemented
        return self.entries() == other.entries()

    def __hash__(self) -> int:
        return hash(tuple(self.entries()))

    def __str__(self) -> str:
        # None values render empty, as in list_properties()
        body = ", ".join(
            f"{key}={'' if value is None else value}" for key, value in self._properties.items()
        )
        return "{" + body + "}"

    def __repr__(self) -> str:
        return f"OrderedStore({self})"
