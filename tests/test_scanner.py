"""Tests for the line cursor and field splitter."""

import pytest

from dvw_reader.exceptions import (
    ConversionError,
    FieldMissingError,
    SectionHeaderError,
    TruncationError,
)
from dvw_reader.scanner import LineCursor, is_section_header, split_fields


class TestLineCursor:
    """Tests for LineCursor."""

    def test_reads_lines_in_order(self, cursor_for):
        cursor = cursor_for("[3MATCH]", "a;b", "c;d")
        assert cursor.next_line() == "[3MATCH]"
        assert cursor.next_line() == "a;b"
        assert cursor.next_line() == "c;d"
        assert cursor.at_end

    def test_strips_crlf_line_endings(self):
        cursor = LineCursor("[3SET]\r\nTrue;;;;;25:10;\r\n")
        assert cursor.next_line() == "[3SET]"
        assert cursor.next_line() == "True;;;;;25:10;"
        assert cursor.at_end

    @pytest.mark.parametrize(
        "control", ["\x0b", "\x0c", "\x1c", "\x1e", "\x85", "\u2028", "\u2029"]
    )
    def test_control_characters_stay_inside_line(self, control):
        cursor = LineCursor(f"[3PLAYERS-H]\n0;1;1;*;*;*;*;*;VRO01;Spi{control}rito;Luca\n")
        assert cursor.next_line() == "[3PLAYERS-H]"
        fields = split_fields(cursor.next_line())
        assert fields.get(9, "last_name") == f"Spi{control}rito"
        assert fields.get(10, "name") == "Luca"
        assert cursor.at_end

    def test_blank_last_line_is_kept(self):
        cursor = LineCursor("a\n\n")
        assert cursor.next_line() == "a"
        assert cursor.next_line() == ""
        assert cursor.at_end

    def test_empty_text_has_no_lines(self):
        assert LineCursor("").at_end

    def test_end_of_input_raises_truncation(self, cursor_for):
        cursor = cursor_for("only")
        cursor.next_line()
        with pytest.raises(TruncationError) as exc_info:
            cursor.next_line(section="[3SET]")
        assert exc_info.value.section == "[3SET]"

    def test_push_back_returns_line_again(self, cursor_for):
        cursor = cursor_for("x", "[3PLAYERS-V]", "y")
        cursor.next_line()
        header = cursor.next_line()
        assert cursor.line_number == 2

        cursor.push_back(header)
        assert cursor.line_number == 1
        assert not cursor.at_end
        assert cursor.next_line() == "[3PLAYERS-V]"
        assert cursor.next_line() == "y"

    def test_push_back_holds_one_line(self, cursor_for):
        cursor = cursor_for("a", "b")
        cursor.push_back(cursor.next_line())
        with pytest.raises(RuntimeError):
            cursor.push_back("b")

    def test_peek_does_not_consume(self, cursor_for):
        cursor = cursor_for("a", "b")
        assert cursor.peek() == "a"
        assert cursor.next_line() == "a"
        assert cursor.peek() == "b"
        cursor.next_line()
        assert cursor.peek() is None

    def test_skip_until_leaves_marker_line(self, cursor_for):
        cursor = cursor_for("[3MORE]", "x;y", "[3COMMENTS]", ";;", "[3SET]", "True;")
        skipped = cursor.skip_until("[3SET]")
        assert skipped == 4
        assert cursor.next_line() == "[3SET]"

    def test_skip_until_missing_marker(self, cursor_for):
        cursor = cursor_for("[3MORE]", "x")
        with pytest.raises(TruncationError):
            cursor.skip_until("[3SCOUT]")

    def test_skip_section(self, cursor_for):
        cursor = cursor_for("[3ATTACKCOMBINATION]", "X5;2;R", "V5;4;L", "[3SETTERCALL]")
        assert cursor.skip_section("[3ATTACKCOMBINATION]") == 2
        assert cursor.next_line() == "[3SETTERCALL]"

    def test_skip_section_until_end_of_input(self, cursor_for):
        cursor = cursor_for("[3RESERVE]", "a", "b")
        assert cursor.skip_section("[3RESERVE]") == 2
        assert cursor.at_end

    def test_skip_section_wrong_header(self, cursor_for):
        cursor = cursor_for("[3SETTERCALL]", "K1;;")
        with pytest.raises(SectionHeaderError):
            cursor.skip_section("[3ATTACKCOMBINATION]")


class TestFieldSplitter:
    """Tests for split_fields / Fields."""

    def test_fields_are_trimmed(self):
        fields = split_fields(" VRO ; Verona Volley ;2 ;")
        assert fields.values == ("VRO", "Verona Volley", "2", "")
        assert len(fields) == 4

    def test_get_by_position(self):
        fields = split_fields("20/10/2019;;18.00;2019/2020")
        assert fields.get(0, "date") == "20/10/2019"
        assert fields.get(1, "unused") == ""
        assert fields.get(3, "season") == "2019/2020"

    def test_missing_field_raises_with_context(self):
        fields = split_fields("VRO;Verona Volley;2", section="[3TEAMS]", line_number=19)
        with pytest.raises(FieldMissingError) as exc_info:
            fields.get(4, "assistant_coaches")
        error = exc_info.value
        assert error.section == "[3TEAMS]"
        assert error.line == "VRO;Verona Volley;2"
        assert error.line_number == 19
        assert "assistant_coaches" in str(error)

    def test_integer_conversion(self):
        fields = split_fields("0; 14 ;x")
        assert fields.integer(1, "number") == 14
        with pytest.raises(ConversionError):
            fields.integer(2, "number")

    def test_blank_integer_is_conversion_error(self):
        with pytest.raises(ConversionError):
            split_fields("0;;").integer(1, "number")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("[3SCOUT]", True),
        ("  [3PLAYERS-V]", True),
        ("*14SQ=;s;p", False),
        ("", False),
    ],
)
def test_is_section_header(line, expected):
    assert is_section_header(line) is expected
