"""
Tests unitaires pour la classification des releases en categories CrowdNFO.
"""

import pytest

from crowdclient.config import DEFAULT_CATEGORY_MAPPINGS
from crowdclient.services.category import (
    is_category_excluded,
    is_valid_category,
    map_category,
    match_category_by_regex,
)


class TestMapCategory:
    @pytest.mark.parametrize(
        "client_category,expected",
        [
            ("tv", "TV"),
            ("Sonarr", "TV"),
            ("radarr", "Movies"),
            ("hoerbuch", "Audiobooks"),
            ("FLAC", "Music"),
        ],
    )
    def test_configured_mappings(self, client_category: str, expected: str) -> None:
        assert map_category(client_category, "Whatever", DEFAULT_CATEGORY_MAPPINGS) == expected

    def test_builtin_category_names(self) -> None:
        assert map_category("software", "Whatever", {}) == "Software"

    def test_invalid_configured_category_is_skipped(self) -> None:
        assert map_category("films", "Whatever", {"Films": ["films"], "Movies": ["films"]}) == "Movies"

    def test_empty_category_uses_release_name(self) -> None:
        assert map_category("", "Show.Name.S01E01.1080p.WEB-GRP", DEFAULT_CATEGORY_MAPPINGS) == "TV"

    def test_wildcard_category_uses_release_name(self) -> None:
        assert map_category("*", "Movie.2020.1080p.BluRay.x264-GRP", DEFAULT_CATEGORY_MAPPINGS) == "Movies"

    def test_unknown_category_uses_release_name(self) -> None:
        assert map_category("private", "Artist-Album-WEB-FLAC-2020-GRP", {}) == "Music"


class TestMatchCategoryByRegex:
    @pytest.mark.parametrize(
        "release_name,expected",
        [
            ("Author-Title-Hoerbuch-2020-GRP", "Audiobooks"),
            ("Author.Title.2021.EPUB", "Books"),
            ("Show.Name.S02.German.1080p", "TV"),
            ("Daily.Show.2024-03-15.720p", "TV"),
            ("Game.Title-ElAmigos", "Games"),
            ("Tool.v1.2.x64.Cracked", "Software"),
            ("Movie.2019.2160p.UHD.BluRay.x265", "Movies"),
            ("Random_Name", ""),
        ],
    )
    def test_match_category_by_regex(self, release_name: str, expected: str) -> None:
        assert match_category_by_regex(release_name) == expected


class TestCategoryHelpers:
    def test_is_valid_category(self) -> None:
        assert is_valid_category("TV")
        assert not is_valid_category("tv")

    def test_is_category_excluded_ignores_case(self) -> None:
        assert is_category_excluded("XXX", ["xxx", "private"])
        assert not is_category_excluded("tv", ["xxx"])
        assert not is_category_excluded("tv", [])
