# ==============================================
# SERIALIZATION (text + XML via the properties engine)
# ==============================================
#
# This package connects ordered stores to the `javaproperties`
# engine without copying entries in or out.
#
# Modules:
# --------
# - engine_adapter.py  → Binds the engine to an OrderedMap per call
# - comment_filter.py  → Drops the engine's timestamp comment line
#
# ==============================================

from .comment_filter import CommentFilteringWriter, FilterState
from .engine_adapter import EngineAdapter

__all__ = ["CommentFilteringWriter", "FilterState", "EngineAdapter"]
