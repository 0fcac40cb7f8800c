# ==============================================
# STORAGE (ordered key -> value container)
# ==============================================
#
# This package holds the in-memory container that every
# ordered store keeps its properties in.
#
# Modules:
# --------
# - ordered_map.py  → Insertion-ordered or key-function-ordered map
#
# ==============================================

from .ordered_map import OrderedMap

__all__ = ["OrderedMap"]
