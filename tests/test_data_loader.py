"""
Tests for reading tables from disk and the bundled sample file.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dataio import SAMPLE_CSV, load_table_from_file, read_text_file, write_sample_csv
from models import EmptyInputError, ReadFailureError


def test_sample_file_round_trip(tmp_path):
    path = write_sample_csv(str(tmp_path / "sample.csv"))
    table, info = load_table_from_file(path)
    assert table.headers == ("Depth", "GR", "RES", "BulkDensity")
    assert table.row_count == 6
    assert info["name"] == "sample.csv"
    assert info["size"] == len(SAMPLE_CSV.encode("utf-8"))


def test_bom_and_crlf(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes(b"\xef\xbb\xbfx,y\r\n1,2\r\n")
    table, _ = load_table_from_file(str(path))
    assert table.headers == ("x", "y")
    assert table.rows == (("1", "2"),)


def test_undecodable_bytes_are_replaced(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes(b"name,v\ncaf\xe9,1\n")
    text = read_text_file(str(path))
    assert text.startswith("name,v")
    assert "�" in text


def test_missing_file_raises_read_failure(tmp_path):
    with pytest.raises(ReadFailureError) as info:
        read_text_file(str(tmp_path / "nope.csv"))
    assert "nope.csv" in str(info.value)


def test_blank_file_raises_empty_input(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("\n  \n", encoding="utf-8")
    with pytest.raises(EmptyInputError):
        load_table_from_file(str(path))


def test_custom_delimiter(tmp_path):
    path = tmp_path / "semi.csv"
    path.write_text("a;b\n1;2\n", encoding="utf-8")
    table, _ = load_table_from_file(str(path), delimiter=";")
    assert table.headers == ("a", "b")
