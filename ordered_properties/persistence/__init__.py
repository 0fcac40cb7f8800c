# ==============================================
# PERSISTENCE (store state across pickling / restarts)
# ==============================================
#
# This package defines how an ordered store is turned into
# plain data and validated when it is rebuilt.
#
# Modules:
# --------
# - snapshot.py  → StoreSnapshot with to_dict / from_dict
#
# ==============================================

from .snapshot import StoreSnapshot, SNAPSHOT_VERSION

__all__ = ["StoreSnapshot", "SNAPSHOT_VERSION"]
