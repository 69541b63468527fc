"""Unit tests for the quote-aware CSV reader."""

from __future__ import annotations

import pytest

from csvstats.parsing import CSVFormatError, decode_csv_bytes, parse_csv, parse_csv_line

pytestmark = pytest.mark.unit


def test_parse_csv_line_keeps_commas_inside_quotes() -> None:
    """Commas between double quotes stay part of the field."""

    assert parse_csv_line('"Smith, John",42,x') == ["Smith, John", "42", "x"]


def test_parse_csv_line_trims_fields_and_keeps_empty_ones() -> None:
    """Whitespace around fields is dropped; empty trailing fields survive."""

    assert parse_csv_line(" a , b ,,") == ["a", "b", "", ""]
    assert parse_csv_line("") == [""]


def test_parse_csv_line_doubled_quote_is_literal() -> None:
    """A doubled quote inside a quoted field yields one quote character."""

    assert parse_csv_line('"say ""hi""",1') == ['say "hi"', "1"]


def test_parse_csv_pads_short_rows_and_ignores_extra_cells() -> None:
    """Rows map every header; missing cells become empty strings."""

    dataset = parse_csv("name,age\nAnn,30,extra\nBob\n")

    assert dataset.headers == ["name", "age"]
    assert dataset.rows == [{"name": "Ann", "age": "30"}, {"name": "Bob", "age": ""}]


def test_parse_csv_handles_crlf_and_blank_lines() -> None:
    """Windows line endings and blank lines do not leak into the cells."""

    dataset = parse_csv("a,b\r\n1,2\r\n\r\n3,4\r\n")

    assert dataset.headers == ["a", "b"]
    assert dataset.column("b") == ["2", "4"]


def test_parse_csv_makes_duplicate_headers_unique() -> None:
    """Repeated header names get numeric suffixes so no column is lost."""

    dataset = parse_csv("x,x,x\n1,2,3")

    assert dataset.headers == ["x", "x.1", "x.2"]
    assert dataset.rows[0] == {"x": "1", "x.1": "2", "x.2": "3"}


def test_parse_csv_rejects_empty_text() -> None:
    """A file without a header line is reported as a format error."""

    with pytest.raises(CSVFormatError):
        parse_csv("  \n\n")


def test_dataset_column_unknown_name_raises() -> None:
    dataset = parse_csv("a\n1")

    with pytest.raises(KeyError):
        dataset.column("b")


def test_to_frame_keeps_header_order() -> None:
    frame = parse_csv("b,a\n1,2").to_frame()

    assert list(frame.columns) == ["b", "a"]
    assert frame.iloc[0]["a"] == "2"


def test_decode_csv_bytes_strips_bom_and_falls_back_to_cp1252() -> None:
    """UTF-8 with BOM decodes cleanly; legacy Windows files still decode."""

    assert decode_csv_bytes(b"\xef\xbb\xbfa,b") == "a,b"
    assert decode_csv_bytes("Häufigkeit".encode("cp1252")) == "Häufigkeit"
