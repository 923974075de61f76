"""Configuration constants and .env parsing."""

from __future__ import annotations

import os
from pathlib import Path


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env file and return values for requested keys.

    Does NOT load into os.environ; callers decide what to do with values.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def parse_bool(value: str | None, default: bool) -> bool:
    """Interpret a config flag; unrecognised values fall back to the default."""
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    return default


def parse_chunk_size(value: str | None) -> int:
    try:
        size = int(value) if value else DEFAULT_CHUNK_SIZE
    except ValueError:
        return DEFAULT_CHUNK_SIZE
    return max(MIN_CHUNK_SIZE, size)


DEFAULT_CHUNK_SIZE = 1024 * 1024
MIN_CHUNK_SIZE = 4096

_env_config = read_env_file(["LOG_LEVEL", "TREECOPY_PRESERVE_METADATA", "TREECOPY_CHUNK_SIZE"])


def _setting(key: str) -> str | None:
    return os.environ.get(key) or _env_config.get(key)


# Progress lines go to stdout/stderr directly, so keep log noise down by default.
LOG_LEVEL: str = _setting("LOG_LEVEL") or "WARNING"
PRESERVE_METADATA: bool = parse_bool(_setting("TREECOPY_PRESERVE_METADATA"), default=True)
CHUNK_SIZE: int = parse_chunk_size(_setting("TREECOPY_CHUNK_SIZE"))

EXIT_OK = 0
EXIT_SOURCE_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_PARTIAL_FAILURE = 3
