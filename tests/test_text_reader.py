"""
Tests for TextReader.
"""

from unittest.mock import patch

import pytest

from data.reader import TextReader


class TestTextReader:
    """Test suite for TextReader."""

    def test_read(self, tmp_path):
        filepath = tmp_path / "text.txt"
        filepath.write_text("ABABDABACDABABCABAB", encoding="utf-8")

        with TextReader(filepath) as reader:
            assert reader.read() == "ABABDABACDABABCABAB"
            assert reader.size() == 19

    def test_read_utf8(self, tmp_path):
        filepath = tmp_path / "text.txt"
        filepath.write_text("naïve café", encoding="utf-8")

        with TextReader(str(filepath)) as reader:
            assert reader.read() == "naïve café"
            assert reader.size() == len("naïve café".encode("utf-8"))

    def test_empty_file(self, tmp_path):
        filepath = tmp_path / "empty.txt"
        filepath.write_bytes(b"")

        with TextReader(filepath) as reader:
            assert reader.read() == ""
            assert reader.size() == 0
            assert list(reader.iter_lines()) == []

    def test_iter_lines(self, tmp_path):
        filepath = tmp_path / "lines.txt"
        filepath.write_bytes(b"first\nsecond\r\nthird")

        with TextReader(filepath) as reader:
            assert list(reader.iter_lines()) == ["first", "second", "third"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TextReader(tmp_path / "missing.txt")

    def test_mmap_failure_closes_file(self, tmp_path):
        filepath = tmp_path / "text.txt"
        filepath.write_text("abc", encoding="utf-8")
        opened = []

        def tracking_open(*args, **kwargs):
            handle = open(*args, **kwargs)
            opened.append(handle)
            return handle

        with patch("data.reader.open", create=True, side_effect=tracking_open), patch(
            "data.reader.mmap.mmap", side_effect=OSError("cannot map")
        ):
            with pytest.raises(OSError):
                TextReader(filepath)

        assert len(opened) == 1
        assert opened[0].closed

    def test_close_is_idempotent(self, tmp_path):
        filepath = tmp_path / "text.txt"
        filepath.write_text("abc", encoding="utf-8")
        reader = TextReader(filepath)

        reader.close()
        reader.close()

        assert reader._data_file.closed
