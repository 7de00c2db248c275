# tests/test_core/test_text_accessor.py
"""Text Accessor Tests
========================

Unit tests for buffer reads and writes through the clipboard.

The editor fixture drives the simulated workbench from `stubs`, whose editor
shares the patched clipboard with the page objects.
"""

import logging

import pytest

from edriver.utils.errors import LineOutOfRangeError


@pytest.mark.parametrize(
    "text",
    ["", "single line", "ab\ncde\n", "a\n\n\nb", "héllo ✓\n\ttabbed  "],
)
def test_set_then_get_round_trip(editor, text):
    """Test: `set_text` followed by `get_text` returns the same string."""
    editor.set_text(text)
    assert editor.get_text() == text


def test_get_text_reads_the_buffer(editor, workbench):
    workbench.monaco.load("first\nsecond")
    assert editor.get_text() == "first\nsecond"


def test_get_text_normalises_crlf(editor, workbench, clipboard):
    """Test: Windows line separators come back as plain newlines."""
    workbench.monaco.load("a\r\nb")
    assert editor.get_text() == "a\nb"


def test_get_text_collapses_selection(editor, workbench):
    """Test: The select-all used for reading does not stay selected.

    The cursor ends one line above the end of the buffer; this is the
    documented approximation, not a restoration of the previous position.
    """
    workbench.monaco.load("one\ntwo\nthree")
    editor.get_text()

    assert workbench.monaco.all_selected is False
    assert editor.get_coordinates() == (2, 4)


def test_set_text_replaces_everything(editor, workbench):
    workbench.monaco.load("old contents\nline 2")
    editor.set_text("new")

    assert workbench.monaco.buffer == "new"
    assert workbench.monaco.dirty is True


def test_clear_text(editor, workbench, clipboard):
    """Test: Clearing empties the buffer; the clipboard holds the old text."""
    workbench.monaco.load("abc\ndef")
    editor.clear_text()

    assert editor.get_text() == ""
    assert editor.get_number_of_lines() == 1


def test_clear_text_primes_clipboard(editor, workbench, clipboard):
    workbench.monaco.load("abc\ndef")
    editor.clear_text()
    assert clipboard.payload == "abc\ndef"


@pytest.mark.parametrize(
    "text, count",
    [("", 1), ("x", 1), ("x\n", 2), ("ab\ncde\n", 3), ("\n\n", 3)],
)
def test_line_count(editor, workbench, text, count):
    """Test: An empty buffer is one empty line; a trailing newline adds a line."""
    workbench.monaco.load(text)
    assert editor.get_number_of_lines() == count


def test_get_text_at_line(editor, workbench):
    workbench.monaco.load("one\ntwo\nthree")
    assert [editor.get_text_at_line(n) for n in (1, 2, 3)] == ["one", "two", "three"]


@pytest.mark.parametrize("line", [0, 4, -1])
def test_get_text_at_line_out_of_range(editor, workbench, line):
    """Test: Lines outside ``[1, line_count]`` fail on a 3-line buffer."""
    workbench.monaco.load("one\ntwo\nthree")
    with pytest.raises(LineOutOfRangeError) as excinfo:
        editor.get_text_at_line(line)

    assert excinfo.value.line == line
    assert excinfo.value.line_count == 3


def test_set_text_at_line(editor, workbench):
    """Test: Only the requested line changes."""
    workbench.monaco.load("one\ntwo\nthree")
    editor.set_text_at_line(2, "xyz")

    assert editor.get_text() == "one\nxyz\nthree"


@pytest.mark.parametrize("line", [0, 4])
def test_set_text_at_line_out_of_range(editor, workbench, line):
    workbench.monaco.load("one\ntwo\nthree")
    with pytest.raises(LineOutOfRangeError):
        editor.set_text_at_line(line, "xyz")

    assert workbench.monaco.buffer == "one\ntwo\nthree"


def test_transfers_are_logged_on_the_package_logger(editor, workbench, caplog):
    """Test: Buffer writes and cursor reads log through the ``edriver`` logger."""
    with caplog.at_level(logging.DEBUG, logger="edriver"):
        editor.set_text("abc")
        editor.get_coordinates()

    messages = {(r.name, r.getMessage()) for r in caplog.records}
    assert ("edriver", "Buffer replaced with 3 characters") in messages
    assert ("edriver", "Cursor at Ln 1, Col 4") in messages
