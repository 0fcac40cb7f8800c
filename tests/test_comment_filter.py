# ==============================================
# Tests for CommentFilteringWriter
# ==============================================
#
# The filter is driven by hand here, chunk by chunk, the way
# the engine writes: line content and line separator arrive
# as separate writes.
# ==============================================

import io

import pytest

from ordered_properties.serialization import CommentFilteringWriter, FilterState


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def writer(sink):
    return CommentFilteringWriter(sink)


def write_lines(writer, *lines):
    for line in lines:
        writer.write(line)
        writer.write("\n")


class TestStateMachine:
    """State transitions between PASSTHROUGH and BUFFERING."""

    def test_starts_in_passthrough(self, writer):
        assert writer.state is FilterState.PASSTHROUGH
        assert writer.withheld is None

    def test_comment_chunk_starts_buffering(self, writer, sink):
        writer.write("#partial")
        assert writer.state is FilterState.BUFFERING
        assert sink.getvalue() == ""

    def test_line_separator_completes_line(self, writer, sink):
        writer.write("#first")
        writer.write("\n")
        assert writer.state is FilterState.PASSTHROUGH
        assert writer.withheld == "#first\n"
        assert sink.getvalue() == ""

    def test_chunks_accumulate_until_separator(self, writer):
        writer.write("#one")
        writer.write(" two")
        writer.write(" three")
        assert writer.state is FilterState.BUFFERING
        writer.write("\n")
        assert writer.withheld == "#one two three\n"

    def test_terminated_comment_chunk_completes_at_once(self, writer, sink):
        writer.write("#whole line\n")
        assert writer.state is FilterState.PASSTHROUGH
        assert writer.withheld == "#whole line\n"
        assert sink.getvalue() == ""

    def test_second_comment_releases_first(self, writer, sink):
        write_lines(writer, "#first", "#second")
        assert sink.getvalue() == "#first\n"
        assert writer.withheld == "#second\n"

    def test_data_discards_withheld_line(self, writer, sink):
        write_lines(writer, "#date", "k=v")
        assert writer.withheld is None
        assert sink.getvalue() == "k=v\n"

    def test_write_returns_length(self, writer):
        assert writer.write("#abc") == 4
        assert writer.write("k=v") == 3


class TestFilteredOutput:
    """Only the last leading comment line is dropped."""

    def test_no_comment_lines(self, writer, sink):
        write_lines(writer, "b=222", "c=333")
        assert sink.getvalue() == "b=222\nc=333\n"

    def test_single_comment_line_dropped(self, writer, sink):
        write_lines(writer, "#Sat Oct 18 11:48:00 UTC 2026", "b=222")
        assert sink.getvalue() == "b=222\n"

    def test_caller_comment_kept_date_dropped(self, writer, sink):
        write_lines(writer, "#some comment", "#Sat Oct 18 11:48:00 UTC 2026", "b=222")
        assert sink.getvalue() == "#some comment\nb=222\n"

    def test_many_comment_lines(self, writer, sink):
        write_lines(writer, "#line1", "#line2", "#line3", "#date", "a=1", "b=2")
        assert sink.getvalue() == "#line1\n#line2\n#line3\na=1\nb=2\n"

    def test_multi_line_comment_as_one_chunk(self, writer, sink):
        write_lines(writer, "#line1\n#line2", "#date", "a=1")
        assert sink.getvalue() == "#line1\n#line2\na=1\n"

    def test_comment_only_output(self, writer, sink):
        write_lines(writer, "#some comment", "#date")
        assert sink.getvalue() == "#some comment\n"

    def test_custom_line_separator(self, sink):
        writer = CommentFilteringWriter(sink, line_separator="\r\n")
        for chunk in ("#keep", "\r\n", "#date", "\r\n", "a=1", "\r\n"):
            writer.write(chunk)
        assert sink.getvalue() == "#keep\r\na=1\r\n"

    def test_flush_reaches_sink(self):
        class RecordingSink(io.StringIO):
            flushed = False

            def flush(self):
                self.flushed = True
                super().flush()

        sink = RecordingSink()
        CommentFilteringWriter(sink).flush()
        assert sink.flushed
