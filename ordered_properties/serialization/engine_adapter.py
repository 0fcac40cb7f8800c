# ==============================================
# EngineAdapter
# ==============================================
#
# PURPOSE:
#   Run the properties engine (the `javaproperties` package)
#   directly against an OrderedMap, in both directions.
#
# WHY THIS CLASS EXISTS:
#   The engine knows the .properties line grammar, escaping
#   rules and the XML properties schema, but on its own it
#   parses into a plain dict and writes whatever mapping it is
#   handed. The adapter binds the engine to the store's own
#   OrderedMap:
#
#     READ:   the engine's object_pairs_hook is _put_all(), which
#             writes each pair into the bound map the moment the
#             engine yields it. No intermediate dict, so the map
#             sees entries in the order they appear on the wire.
#
#     WRITE:  the engine is handed a lazy generator over the bound
#             map's live items, so it emits entries in the map's
#             current order without a copy.
#
#   Default-property chains are not supported: only the bound
#   map is ever consulted.
#
# CLASS: EngineAdapter
# --------------------
#   Cheap and single-use. The store builds a new adapter for
#   every load/store call, so calls on different stores never
#   share anything.
#
#   Constructor:
#   ------------
#   - __init__(target: OrderedMap, config: StoreConfig | None = None)
#
#   Methods:
#   --------
#   - load(fp) -> None             text format, binary or text fp
#   - load_xml(fp) -> None         XML format, binary fp
#   - store(fp, comment, suppress_date) -> None
#   - store_xml(fp, comment, encoding) -> None
#   - list(out) -> None            human-readable listing
#
# ERRORS:
# -------
#   - javaproperties.InvalidUEscapeError       → FormatError
#   - ElementTree.ParseError / ValueError (XML) → FormatError
#   - OSError from the caller's stream         → unchanged
#   - None value on write                      → TypeError
#
# ==============================================

import codecs
import io
import logging
import xml.etree.ElementTree as ET
from typing import BinaryIO, Iterable, Iterator, Optional, TextIO, Tuple, Union

import javaproperties

from ordered_properties.config import StoreConfig, get_config
from ordered_properties.exceptions import FormatError
from ordered_properties.serialization.comment_filter import CommentFilteringWriter
from ordered_properties.storage.ordered_map import OrderedMap

logger = logging.getLogger(__name__)

LISTING_HEADER = "-- listing properties --"


def is_binary_stream(stream) -> bool:
    """
    Return True for byte streams: io binary classes, or any object whose
    mode says "b" (SpooledTemporaryFile, custom wrappers).
    """
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(stream, io.TextIOBase):
        return False
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


def is_text_stream(stream) -> bool:
    """Everything that is not a byte stream is written with str chunks."""
    return not is_binary_stream(stream)


def _flush(sink) -> None:
    # Sinks that only implement write() have nothing to flush
    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()


class EngineAdapter:
    """
    Binds the properties engine to one OrderedMap for one operation.
    """

    def __init__(self, target: OrderedMap, config: Optional[StoreConfig] = None):
        """
        Args:
            target: Map that the engine reads from and writes into
            config: Library configuration. If None, loads from environment.
        """
        self._target = target
        self._config = config or get_config()

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def load(self, fp: Union[BinaryIO, TextIO]) -> None:
        """
        Parse the text format from fp into the bound map.

        Binary streams are decoded as Latin-1 by the engine.

        Raises:
            FormatError: If the input contains a malformed \\uXXXX escape
        """
        before = len(self._target)
        try:
            javaproperties.load(fp, object_pairs_hook=self._put_all)
        except javaproperties.InvalidUEscapeError as e:
            raise FormatError("text", str(e)) from e
        logger.debug("Loaded text properties (%d -> %d entries)", before, len(self._target))

    def load_xml(self, fp: BinaryIO) -> None:
        """
        Parse the XML properties format from fp into the bound map.

        Raises:
            FormatError: If the XML is malformed or does not follow the
                properties schema
        """
        before = len(self._target)
        try:
            javaproperties.load_xml(fp, object_pairs_hook=self._put_all_xml)
        except (ET.ParseError, ValueError) as e:
            raise FormatError("XML", str(e)) from e
        logger.debug("Loaded XML properties (%d -> %d entries)", before, len(self._target))

    def _put_all(self, pairs: Iterable[Tuple[str, str]]) -> OrderedMap:
        for key, value in pairs:
            self._target[key] = value
        return self._target

    def _put_all_xml(self, pairs: Iterable[Tuple[str, Optional[str]]]) -> OrderedMap:
        # An empty <entry key="k"/> element carries no text node
        return self._put_all((key, value or "") for key, value in pairs)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def store(
        self,
        fp: Union[BinaryIO, TextIO],
        comment: Optional[str] = None,
        suppress_date: bool = False
    ) -> None:
        """
        Write the bound map in the text format.

        Args:
            fp: Binary or text sink. Binary sinks are encoded with the
                configured stream encoding (Latin-1 by default) and characters
                outside ASCII are written as \\uXXXX escapes. Text sinks get
                the characters as they are.
            comment: Optional comment, written as one #-line per line
            suppress_date: Drop the timestamp comment line
        """
        binary = is_binary_stream(fp)
        out = self._text_sink(fp)
        if suppress_date:
            out = CommentFilteringWriter(out)
        javaproperties.dump(
            self._writable_items(),
            out,
            comments=comment,
            timestamp=True,
            ensure_ascii=binary,
            ensure_ascii_comments=None if binary else False
        )
        _flush(out)
        logger.debug(
            "Stored %d properties as text (suppress_date=%s)", len(self._target), suppress_date
        )

    def store_xml(
        self,
        fp: BinaryIO,
        comment: Optional[str] = None,
        encoding: Optional[str] = None
    ) -> None:
        """
        Write the bound map in the XML properties format.

        Args:
            fp: Binary sink
            comment: Optional text for the <comment> element
            encoding: Output encoding, declared in the XML header. If None,
                the configured default (UTF-8) is used.
        """
        if is_text_stream(fp):
            raise TypeError("XML properties must be written to a binary stream")
        encoding = encoding or self._config.xml_encoding
        javaproperties.dump_xml(self._writable_items(), fp, comment=comment, encoding=encoding)
        logger.debug("Stored %d properties as XML (encoding=%s)", len(self._target), encoding)

    def list(self, out: Union[BinaryIO, TextIO]) -> None:
        """
        Print a human-readable listing of the bound map.

        Values longer than the configured width are cut and end in "...".
        Keys without a value are listed with an empty value. On a binary
        sink, characters the stream encoding cannot represent are written
        as backslash escapes.
        """
        width = self._config.list_value_width
        sink = self._text_sink(out, errors="backslashreplace")
        print(LISTING_HEADER, file=sink)
        for key, value in self._target.items():
            value = "" if value is None else value
            if len(value) > width:
                value = value[:width - 3] + "..."
            print(f"{key}={value}", file=sink)
        _flush(sink)

    def _writable_items(self) -> Iterator[Tuple[str, str]]:
        for key, value in self._target.items():
            if value is None:
                raise TypeError(f"Property {key!r} has no value and cannot be written")
            yield key, value

    def _text_sink(self, fp: Union[BinaryIO, TextIO], errors: str = "strict") -> TextIO:
        if is_text_stream(fp):
            return fp
        # Wraps without taking ownership: the caller's stream stays open
        return codecs.getwriter(self._config.stream_encoding)(fp, errors=errors)
