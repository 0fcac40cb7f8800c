# ==============================================
# StoreSnapshot
# ==============================================
#
# PURPOSE:
#   The persisted representation of an ordered store. Used by
#   pickle (__getstate__ / __setstate__) and by the explicit
#   to_snapshot() / from_snapshot() API.
#
# WHY THIS CLASS EXISTS:
#   A restored store must be complete or not exist at all.
#   Restoring from state that lacks the entries or the
#   suppress-date flag fails fast with InvalidStateError
#   instead of producing a half-initialized store.
#
# WHAT IS PERSISTED:
#   1. entries        → ordered list of [key, value] pairs
#   2. suppress_date  → bool
#   3. version        → format version, currently "1.0"
#
#   The ordering function is not part of the dict form (a
#   function is not JSON data). Pickle carries it alongside,
#   so it must be picklable (module-level functions, str.lower,
#   ...) when a custom-ordered store is pickled.
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ordered_properties.exceptions import InvalidStateError

SNAPSHOT_VERSION = "1.0"


@dataclass
class StoreSnapshot:
    """
    Everything needed to rebuild an ordered store.
    """

    entries: List[Tuple[str, Optional[str]]] = field(default_factory=list)
    suppress_date: bool = False
    ordering: Optional[Callable[[str], Any]] = None
    version: str = SNAPSHOT_VERSION

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the snapshot to a JSON-compatible dictionary.

        Returns:
            Dictionary with version, entries and suppress_date
        """
        return {
            "version": self.version,
            "entries": [[key, value] for key, value in self.entries],
            "suppress_date": self.suppress_date,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        ordering: Optional[Callable[[str], Any]] = None
    ) -> "StoreSnapshot":
        """
        Rebuild a snapshot from persisted data.

        Args:
            data: Dictionary produced by to_dict() (or pickle state)
            ordering: Ordering function for the rebuilt store, None for
                insertion order

        Returns:
            A validated StoreSnapshot

        Raises:
            InvalidStateError: If required fields are missing or malformed
        """
        if not isinstance(data, dict):
            raise InvalidStateError([f"state must be a dict, got {type(data).__name__}"])

        problems = []
        for required in ("entries", "suppress_date"):
            if required not in data:
                problems.append(f"missing '{required}'")
        if problems:
            raise InvalidStateError(problems)

        version = data.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            problems.append(f"unsupported version {version!r}")
        if not isinstance(data["suppress_date"], bool):
            problems.append("'suppress_date' must be a bool")

        entries = []
        raw_entries = data["entries"]
        if not isinstance(raw_entries, (list, tuple)):
            problems.append("'entries' must be a list")
            raw_entries = []
        for index, entry in enumerate(raw_entries):
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                problems.append(f"entry {index} is not a [key, value] pair")
                continue
            key, value = entry
            if not isinstance(key, str) or not (value is None or isinstance(value, str)):
                problems.append(f"entry {index} must map a string to a string or None")
                continue
            entries.append((key, value))

        if problems:
            raise InvalidStateError(problems)

        return cls(
            entries=entries,
            suppress_date=data["suppress_date"],
            ordering=ordering,
            version=version,
        )
