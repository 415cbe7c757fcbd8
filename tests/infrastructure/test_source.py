"""Tests for wikimark.infrastructure.source."""

import io

import pytest

from wikimark.core.exceptions import InputError
from wikimark.infrastructure.source import read_source


class TestReadSource:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("# Title\n- [[Link]]\n", encoding="utf-8")
        assert read_source(path) == "# Title\n- [[Link]]\n"

    def test_reads_string_path(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("x", encoding="utf-8")
        assert read_source(str(path)) == "x"

    def test_dash_reads_stdin(self):
        assert read_source("-", stdin=io.StringIO("from stdin")) == "from stdin"

    def test_custom_encoding(self, tmp_path):
        path = tmp_path / "latin.md"
        path.write_bytes("# café".encode("latin-1"))
        assert read_source(path, encoding="latin-1") == "# café"

    def test_undecodable(self, tmp_path):
        path = tmp_path / "bad.md"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(InputError) as exc_info:
            read_source(path)
        assert "Cannot decode" in exc_info.value.message
        assert exc_info.value.details["encoding"] == "utf-8"

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError) as exc_info:
            read_source(tmp_path / "nope.md")
        assert exc_info.value.details["path"].endswith("nope.md")

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("x", encoding="utf-8")
        with pytest.raises(InputError, match="Unknown encoding"):
            read_source(path, encoding="no-such-codec")
