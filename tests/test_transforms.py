from __future__ import annotations

import pytest

from markdown_pro.buffer import BufferValidationError, Selection
from markdown_pro.transforms import (
    build_table,
    parse_dimension,
    prefix_lines,
    touched_lines,
    wrap,
)


def test_wrap_bold_reselects_original_text() -> None:
    result = wrap("hello world", Selection(0, 5), "**")

    assert result.text == "**hello** world"
    assert result.selection == Selection(2, 7)


@pytest.mark.parametrize(
    "text, start, end",
    [
        ("", 0, 0),
        ("abc", 0, 0),
        ("abc", 3, 3),
        ("abc", 0, 3),
        ("line one\nline two", 5, 13),
        ("naïve café", 2, 8),
    ],
)
def test_wrap_selection_covers_original_substring(text: str, start: int, end: int) -> None:
    result = wrap(text, Selection(start, end), "[", "](https://example.com)")

    assert result.selection is not None
    new_start, new_end = result.selection.as_tuple()
    assert result.text[new_start:new_end] == text[start:end]


def test_wrap_asymmetric_markers() -> None:
    result = wrap("code", Selection(0, 4), "\n```bash\n", "\n```\n")

    assert result.text == "\n```bash\ncode\n```\n"
    assert result.selection == Selection(9, 13)


def test_wrap_with_empty_after_inserts_before_selection() -> None:
    result = wrap("xy", Selection(1, 1), "TABLE\n", "")

    assert result.text == "xTABLE\ny"
    assert result.selection == Selection(7, 7)


def test_wrap_accepts_reversed_selection() -> None:
    result = wrap("hello", Selection(5, 0), "*")

    assert result.text == "*hello*"
    assert result.selection == Selection(1, 6)


def test_wrap_rejects_out_of_range_selection() -> None:
    with pytest.raises(BufferValidationError):
        wrap("abc", Selection(1, 9), "*")


def test_prefix_lines_caret_in_middle_line() -> None:
    result = prefix_lines("a\nb\nc", Selection(2, 2), "- ")

    assert result.text == "a\n- b\nc"
    assert result.selection is None


def test_prefix_lines_multi_line_selection() -> None:
    result = prefix_lines("one\ntwo\nthree\nfour", Selection(1, 7), "> ")

    assert result.text == "> one\n> two\nthree\nfour"


def test_prefix_lines_ranges_shift_by_inserted_prefix() -> None:
    # Offset 9 is inside "three" before the edit and inside "> two" after it.
    result = prefix_lines("one\ntwo\nthree\nfour", Selection(1, 9), "> ")

    assert result.text == "> one\n> two\nthree\nfour"
    assert touched_lines("one\ntwo\nthree\nfour", Selection(1, 9)) == [0, 1, 2]
    assert touched_lines("one\ntwo\nthree\nfour", Selection(1, 9), "> ") == [0, 1]


def test_touched_lines_at_line_boundaries() -> None:
    # Offset 1 ends "a", offset 2 starts "b".
    assert touched_lines("a\nb", Selection(1, 1)) == [0]
    assert touched_lines("a\nb", Selection(2, 2)) == [1]
    assert touched_lines("a\nb", Selection(1, 2)) == [0, 1]


def test_prefix_lines_on_empty_buffer() -> None:
    result = prefix_lines("", Selection(0, 0), "# ")

    assert result.text == "# "


def test_prefix_lines_horizontal_rule_inserts_rule_line() -> None:
    result = prefix_lines("title\nbody", Selection(7, 7), "---\n")

    assert result.text == "title\n---\nbody"


def test_build_table_two_by_one() -> None:
    table = build_table(2, 1)

    assert table == (
        "| Header 1 | Header 2 | \n"
        "| ---- | ---- | \n"
        "| Data | Data | \n"
    )
    assert table.count("\n") == 3


def test_build_table_rejects_empty_dimensions() -> None:
    with pytest.raises(ValueError):
        build_table(0, 2)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("3", 3),
        (" 4", 4),
        ("2 rows", 2),
        ("+5", 5),
        ("2.9", 2),
        ("0", None),
        ("-1", None),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_dimension(raw: str | None, expected: int | None) -> None:
    assert parse_dimension(raw) == expected
