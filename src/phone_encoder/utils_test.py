import pytest
from phone_encoder.utils import InputFileError, read_lines


class TestReadLines:
    """Test suite for read_lines"""

    def test_strips_line_endings(self, tmp_path):
        """Test both LF and CRLF endings are removed"""
        path = tmp_path / "numbers.txt"
        path.write_bytes(b"4824\r\n5624-82\n\n04824")
        assert list(read_lines(path)) == ["4824", "5624-82", "", "04824"]

    def test_skips_undecodable_lines(self, tmp_path):
        """Test a line that is not valid UTF-8 is dropped and reading continues"""
        path = tmp_path / "numbers.txt"
        path.write_bytes(b"4824\n\xff\xfe12\n04824\n")
        assert list(read_lines(path)) == ["4824", "04824"]

    def test_keeps_other_whitespace(self, tmp_path):
        """Test only the line ending is removed"""
        path = tmp_path / "words.txt"
        path.write_text(" Tor \n", encoding="utf-8")
        assert list(read_lines(path)) == [" Tor "]

    def test_missing_file_fails_eagerly(self, tmp_path):
        """Test the error is raised on the call, before iteration"""
        with pytest.raises(InputFileError) as exc_info:
            read_lines(tmp_path / "nope.txt")
        assert isinstance(exc_info.value.reason, FileNotFoundError)
        assert "nope.txt" in str(exc_info.value)

    def test_directory_is_unreadable(self, tmp_path):
        """Test a directory path is reported as an input error"""
        with pytest.raises(InputFileError):
            read_lines(tmp_path)
