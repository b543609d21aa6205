"""
Tests for the KEY=VALUE config file repository.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from deyecli.domain.errors import ConfigFileError
from deyecli.infrastructure.config.repository import ConfigRepository, decode_value


class TestDecodeValue:
    """Test cases for value decoding."""

    def test_plain_value(self):
        """Test an unquoted value is returned as is."""
        assert decode_value("abc") == "abc"

    def test_double_quotes_removed(self):
        """Test surrounding double quotes are removed."""
        assert decode_value('"hello world"') == "hello world"

    def test_single_quotes_removed(self):
        """Test surrounding single quotes are removed."""
        assert decode_value("'hello world'") == "hello world"

    def test_only_one_layer_of_quotes_removed(self):
        """Test nested quotes lose only the outer pair."""
        assert decode_value("\"'x'\"") == "'x'"

    def test_mismatched_quotes_kept(self):
        """Test mismatched quotes are left in place."""
        assert decode_value("\"abc'") == "\"abc'"

    def test_inline_comment_stripped(self):
        """Test a trailing comment is dropped."""
        assert decode_value("abc   # my token") == "abc"

    def test_hash_without_leading_space_kept(self):
        """A '#' inside a value is only a comment after whitespace."""
        assert decode_value("pa#ss") == "pa#ss"

    def test_surrounding_whitespace_stripped(self):
        """Test leading and trailing spaces are dropped."""
        assert decode_value("  value  ") == "value"


class TestConfigRepositoryRead:
    """Test cases for ConfigRepository.read."""

    def test_missing_file_yields_empty_dict(self, tmp_path):
        """Test that a missing file is not an error."""
        repo = ConfigRepository(tmp_path / "nope" / "config")
        assert repo.read() == {}

    def test_reads_entries_and_skips_comments(self, tmp_path):
        """Test blank lines and comment lines are ignored."""
        path = tmp_path / "config"
        path.write_text(
            "# deyecli config\n"
            "\n"
            "   # indented comment\n"
            "DEYE_APP_ID=12345\n"
            'DEYE_EMAIL="me@example.com"   # login\n'
            "  DEYE_DEVICE_SN = 'SN001'\n"
        )

        values = ConfigRepository(path).read()

        assert values == {
            "DEYE_APP_ID": "12345",
            "DEYE_EMAIL": "me@example.com",
            "DEYE_DEVICE_SN": "SN001",
        }

    def test_unknown_keys_pass_through(self, tmp_path):
        """Test keys outside DEYE_* are still read."""
        path = tmp_path / "config"
        path.write_text("SOMETHING_ELSE=1\n")
        assert ConfigRepository(path).read() == {"SOMETHING_ELSE": "1"}

    def test_malformed_lines_skipped(self, tmp_path):
        """Test lines that are not KEY=VALUE are ignored, never evaluated."""
        path = tmp_path / "config"
        path.write_text("export DEYE_TOKEN=x\n$(rm -rf /)\n1BAD=2\nDEYE_TOKEN=good\n")
        assert ConfigRepository(path).read() == {"DEYE_TOKEN": "good"}

    def test_last_duplicate_wins(self, tmp_path):
        """Test the last of duplicate keys wins."""
        path = tmp_path / "config"
        path.write_text("DEYE_TOKEN=first\nDEYE_TOKEN=second\n")
        assert ConfigRepository(path).read()["DEYE_TOKEN"] == "second"

    def test_crlf_line_endings(self, tmp_path):
        """Test CRLF line endings are handled."""
        path = tmp_path / "config"
        path.write_bytes(b"DEYE_APP_ID=42\r\nDEYE_EMAIL=a@b.c\r\n")
        assert ConfigRepository(path).read() == {"DEYE_APP_ID": "42", "DEYE_EMAIL": "a@b.c"}

    def test_non_utf8_file_raises_config_error(self, tmp_path):
        """Test a file that is not UTF-8 is reported, not a decode traceback."""
        path = tmp_path / "config"
        path.write_bytes(b"DEYE_TOKEN=abc\nDEYE_USERNAME=caf\xe9\n")

        with pytest.raises(ConfigFileError, match="Cannot read config file"):
            ConfigRepository(path).read()

    def test_unreadable_file_raises_config_error(self, tmp_path):
        """Test an OS error while opening the file becomes ConfigFileError."""
        path = tmp_path / "config"
        path.write_text("DEYE_TOKEN=abc\n")

        with patch(
            "deyecli.infrastructure.config.repository.open",
            side_effect=PermissionError("denied"),
            create=True,
        ):
            with pytest.raises(ConfigFileError, match="denied"):
                ConfigRepository(path).read()


class TestConfigRepositorySet:
    """Test cases for ConfigRepository.set."""

    def test_creates_file_and_parent_directories(self, tmp_path):
        """Test set on a missing file creates it."""
        path = tmp_path / "a" / "b" / "config"
        repo = ConfigRepository(path)

        repo.set("DEYE_TOKEN", "abc123")

        assert path.read_text() == "DEYE_TOKEN=abc123\n"

    def test_replaces_existing_key_and_preserves_other_lines(self, tmp_path):
        """Test unrelated lines survive byte-for-byte."""
        path = tmp_path / "config"
        original = "# my settings\nDEYE_APP_ID=1\n  DEYE_TOKEN = old  # stale\n\nOTHER='x y'\n"
        path.write_text(original)

        ConfigRepository(path).set("DEYE_TOKEN", "new")

        assert path.read_text() == "# my settings\nDEYE_APP_ID=1\nDEYE_TOKEN=new\n\nOTHER='x y'\n"

    def test_appends_missing_key(self, tmp_path):
        """Test a new key is appended."""
        path = tmp_path / "config"
        path.write_text("DEYE_APP_ID=1\n")

        ConfigRepository(path).set("DEYE_TOKEN", "abc")

        assert path.read_text() == "DEYE_APP_ID=1\nDEYE_TOKEN=abc\n"

    def test_appends_after_file_without_trailing_newline(self, tmp_path):
        """Test appending to a file without a final newline."""
        path = tmp_path / "config"
        path.write_text("DEYE_APP_ID=1")

        ConfigRepository(path).set("DEYE_TOKEN", "abc")

        assert path.read_text() == "DEYE_APP_ID=1\nDEYE_TOKEN=abc\n"

    def test_set_then_read_returns_value(self, tmp_path):
        """Test the written value is read back and other keys are untouched."""
        path = tmp_path / "config"
        path.write_text('DEYE_EMAIL="me@example.com"\nDEYE_TOKEN=old\n')
        repo = ConfigRepository(path)

        repo.set("DEYE_TOKEN", "fresh")

        values = repo.read()
        assert values["DEYE_TOKEN"] == "fresh"
        assert values["DEYE_EMAIL"] == "me@example.com"

    def test_set_is_idempotent(self, tmp_path):
        """Test setting the same value twice changes nothing."""
        path = tmp_path / "config"
        repo = ConfigRepository(path)

        repo.set("DEYE_TOKEN", "abc")
        first = path.read_text()
        repo.set("DEYE_TOKEN", "abc")

        assert path.read_text() == first

    def test_duplicate_keys_all_replaced(self, tmp_path):
        """Test every line carrying the key is rewritten."""
        path = tmp_path / "config"
        path.write_text("DEYE_TOKEN=a\nX=1\nDEYE_TOKEN=b\n")

        ConfigRepository(path).set("DEYE_TOKEN", "c")

        assert path.read_text() == "DEYE_TOKEN=c\nX=1\nDEYE_TOKEN=c\n"

    def test_similar_key_prefix_not_replaced(self, tmp_path):
        """Test a key sharing a prefix is left alone."""
        path = tmp_path / "config"
        path.write_text("DEYE_TOKEN_OLD=keep\n")

        ConfigRepository(path).set("DEYE_TOKEN", "new")

        assert path.read_text() == "DEYE_TOKEN_OLD=keep\nDEYE_TOKEN=new\n"

    def test_no_temporary_files_left_behind(self, tmp_path):
        """Test the atomic write cleans up its temp file."""
        path = tmp_path / "config"
        ConfigRepository(path).set("DEYE_TOKEN", "abc")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["config"]

    def test_invalid_key_rejected(self, tmp_path):
        """Test an invalid key name is rejected."""
        with pytest.raises(ValueError):
            ConfigRepository(tmp_path / "config").set("BAD KEY", "x")

    def test_value_with_newline_rejected(self, tmp_path):
        """Test a value with a line break is rejected."""
        with pytest.raises(ValueError):
            ConfigRepository(tmp_path / "config").set("DEYE_TOKEN", "a\nDEYE_APP_ID=evil")

    def test_failed_rename_raises_config_error_and_keeps_original(self, tmp_path):
        """Test a crash before the rename leaves the old file intact."""
        path = tmp_path / "config"
        path.write_text("DEYE_TOKEN=old\n")

        with patch("deyecli.infrastructure.config.repository.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(ConfigFileError, match="disk full"):
                ConfigRepository(path).set("DEYE_TOKEN", "new")

        assert path.read_text() == "DEYE_TOKEN=old\n"
        assert [p.name for p in tmp_path.iterdir()] == ["config"]

    def test_non_utf8_file_is_not_overwritten(self, tmp_path):
        """Test set refuses to rewrite a file it cannot decode."""
        path = tmp_path / "config"
        path.write_bytes(b"DEYE_USERNAME=caf\xe9\n")

        with pytest.raises(ConfigFileError, match="Cannot read config file"):
            ConfigRepository(path).set("DEYE_TOKEN", "new")

        assert path.read_bytes() == b"DEYE_USERNAME=caf\xe9\n"

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
    def test_new_file_is_private(self, tmp_path):
        """Test a new config file is readable by the owner only."""
        path = tmp_path / "config"
        ConfigRepository(path).set("DEYE_TOKEN", "abc")
        assert Path(path).stat().st_mode & 0o077 == 0
