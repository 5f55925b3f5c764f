"""
Tests unitaires pour le service de hash SHA-256.
"""

import hashlib
from pathlib import Path

import pytest

from crowdclient.core.exceptions import ConfigurationError
from crowdclient.services.hash_service import (
    calculate_sha256,
    parse_size_with_unit,
    should_calculate_hash,
)

MB = 1024 * 1024
GB = 1024 * MB


class TestCalculateSha256:
    def test_matches_hashlib(self, tmp_path: Path) -> None:
        path = tmp_path / "episode.mkv"
        path.write_bytes(b"hello crowdnfo" * 100)

        assert calculate_sha256(path) == hashlib.sha256(b"hello crowdnfo" * 100).hexdigest()

    def test_chunk_size_does_not_change_result(self, tmp_path: Path) -> None:
        path = tmp_path / "episode.mkv"
        path.write_bytes(bytes(range(256)) * 10)

        assert calculate_sha256(path, chunk_size=7) == calculate_sha256(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.mkv"
        path.touch()

        assert calculate_sha256(path) == hashlib.sha256(b"").hexdigest()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            calculate_sha256(tmp_path / "absent.mkv")


class TestParseSizeWithUnit:
    @pytest.mark.parametrize(
        "size,expected",
        [
            ("800MB", 800 * MB),
            ("24GB", 24 * GB),
            ("24gb", 24 * GB),
            (" 5.5 ", int(5.5 * GB)),
            ("2", 2 * GB),
        ],
    )
    def test_valid_sizes(self, size: str, expected: int) -> None:
        assert parse_size_with_unit(size) == expected

    @pytest.mark.parametrize("size", ["abc", "GB", "12TB", ""])
    def test_invalid_sizes(self, size: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_size_with_unit(size)


class TestShouldCalculateHash:
    @pytest.fixture
    def small_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "small.mkv"
        path.write_bytes(b"x" * 2048)
        return path

    def test_no_limit(self, small_file: Path) -> None:
        assert should_calculate_hash(small_file, "")

    def test_disabled(self, small_file: Path) -> None:
        assert not should_calculate_hash(small_file, "0")

    def test_under_limit(self, small_file: Path) -> None:
        assert should_calculate_hash(small_file, "1MB")

    def test_over_limit(self, small_file: Path) -> None:
        # 0.000001 GB ~ 1073 octets
        assert not should_calculate_hash(small_file, "0.000001")

    def test_invalid_limit_is_ignored(self, small_file: Path) -> None:
        assert should_calculate_hash(small_file, "lots")
