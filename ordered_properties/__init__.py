# ==============================================
# Ordered Properties
# ==============================================
#
# Package Structure:
#
# ordered_properties/
# ├── storage/          # OrderedMap: insertion or key-function order
# ├── serialization/    # Engine binding + date comment filter
# ├── persistence/      # Snapshot used by pickle and to_snapshot()
# ├── ordered_store.py  # OrderedStore, the public container
# ├── builder.py        # StoreBuilder
# ├── config.py         # Configuration management
# └── exceptions.py     # Error taxonomy
#
# ==============================================

__version__ = "0.1.0"

from ordered_properties.builder import StoreBuilder
from ordered_properties.exceptions import FormatError, InvalidStateError, OrderedPropertiesError
from ordered_properties.ordered_store import OrderedStore

__all__ = [
    "OrderedStore",
    "StoreBuilder",
    "FormatError",
    "InvalidStateError",
    "OrderedPropertiesError",
    "__version__",
]
