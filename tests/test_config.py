"""Tests for configuration."""

from treecopy.infrastructure.config import (
    DEFAULT_CHUNK_SIZE,
    MIN_CHUNK_SIZE,
    parse_bool,
    parse_chunk_size,
    read_env_file,
)


class TestReadEnvFile:
    def test_reads_env_values(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=debug\nTREECOPY_CHUNK_SIZE=8192\n")
        monkeypatch.chdir(tmp_path)

        result = read_env_file(["LOG_LEVEL", "TREECOPY_CHUNK_SIZE"])
        assert result == {"LOG_LEVEL": "debug", "TREECOPY_CHUNK_SIZE": "8192"}

    def test_strips_quotes(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text('KEY1="quoted"\nKEY2=\'single\'\n')
        monkeypatch.chdir(tmp_path)

        result = read_env_file(["KEY1", "KEY2"])
        assert result["KEY1"] == "quoted"
        assert result["KEY2"] == "single"

    def test_skips_comments_and_blank_lines(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\n\nKEY1=value1\n\n")
        monkeypatch.chdir(tmp_path)

        assert read_env_file(["KEY1"]) == {"KEY1": "value1"}

    def test_only_requested_keys(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("KEY1=value1\nKEY2=value2\n")
        monkeypatch.chdir(tmp_path)

        assert "KEY2" not in read_env_file(["KEY1"])

    def test_missing_file_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert read_env_file(["KEY1"]) == {}

    def test_empty_values_skipped(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("KEY1=\n")
        monkeypatch.chdir(tmp_path)

        assert "KEY1" not in read_env_file(["KEY1"])


class TestParseBool:
    def test_truthy(self):
        for value in ("1", "true", "TRUE", " yes ", "on"):
            assert parse_bool(value, default=False) is True

    def test_falsy(self):
        for value in ("0", "false", "No", "off"):
            assert parse_bool(value, default=True) is False

    def test_unset_or_unknown_uses_default(self):
        assert parse_bool(None, default=True) is True
        assert parse_bool("maybe", default=False) is False


class TestParseChunkSize:
    def test_default_when_unset(self):
        assert parse_chunk_size(None) == DEFAULT_CHUNK_SIZE

    def test_invalid_falls_back_to_default(self):
        assert parse_chunk_size("big") == DEFAULT_CHUNK_SIZE

    def test_clamped_to_minimum(self):
        assert parse_chunk_size("16") == MIN_CHUNK_SIZE

    def test_custom_value(self):
        assert parse_chunk_size("65536") == 65536
