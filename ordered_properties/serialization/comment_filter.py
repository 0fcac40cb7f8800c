# ==============================================
# CommentFilteringWriter
# ==============================================
#
# PURPOSE:
#   Wrap a text sink and drop the timestamp comment line that
#   the properties engine writes right before the data lines.
#
# WHY THIS CLASS EXISTS:
#   When writing the text format the engine always emits
#
#       #<caller comment line 1>      (optional, any number)
#       #<caller comment line N>
#       #<current date>               (always, last comment line)
#       key=value
#       ...
#
#   The date line cannot be switched off from the outside
#   without re-implementing the writer, so instead every
#   comment line is held back until another comment line
#   follows it. The last one (the date) is never released.
#
# STATE MACHINE:
# --------------
#   PASSTHROUGH (initial)
#     chunk starts with "#"  → BUFFERING, start accumulating
#     any other chunk        → write it, discard withheld line
#
#   BUFFERING
#     accumulate chunks until the buffer ends with the line
#     separator, then:
#       - write the previously withheld line (if any)
#       - withhold the completed line
#       - → PASSTHROUGH
#
#   Of N leading comment lines, N-1 are written and the last
#   one is dropped. With a single comment line nothing is
#   written for the comment block at all.
#
# ==============================================

from enum import Enum
from typing import List, Optional, TextIO


class FilterState(Enum):
    """States of the comment filter."""
    PASSTHROUGH = "passthrough"
    BUFFERING = "buffering"


class CommentFilteringWriter:
    """
    Text writer decorator that withholds the last leading comment line.
    """

    COMMENT_MARKER = "#"

    def __init__(self, out: TextIO, line_separator: str = "\n"):
        """
        Args:
            out: Text sink the filtered output goes to
            line_separator: Separator that terminates a line
        """
        self._out = out
        self._line_separator = line_separator
        self._state = FilterState.PASSTHROUGH
        self._current: List[str] = []
        self._withheld: Optional[str] = None

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def withheld(self) -> Optional[str]:
        """The complete comment line currently held back, if any."""
        return self._withheld

    def write(self, chunk: str) -> int:
        if self._state is FilterState.BUFFERING:
            self._current.append(chunk)
            self._complete_line_if_terminated()
        elif chunk.startswith(self.COMMENT_MARKER):
            self._state = FilterState.BUFFERING
            self._current = [chunk]
            self._complete_line_if_terminated()
        else:
            # Data has started: whatever comment is withheld is the date line
            self._withheld = None
            self._out.write(chunk)
        return len(chunk)

    def flush(self) -> None:
        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()

    def _complete_line_if_terminated(self) -> None:
        line = "".join(self._current)
        if not line.endswith(self._line_separator):
            return
        if self._withheld is not None:
            self._out.write(self._withheld)
        self._withheld = line
        self._current = []
        self._state = FilterState.PASSTHROUGH
