"""
Tests unitaires pour les fonctions de comparaison de noms de release.
"""

import pytest

from crowdclient.services.layout import is_season_pack_name
from crowdclient.utils.constants import FIRST_TRACK_PATTERN, ISO_DATE_PATTERN
from crowdclient.utils.helpers import (
    extract_episode_number,
    generate_episode_release_name,
    is_completely_lowercase,
    matches_pack_prefix,
    normalize_name,
)


class TestNormalizeName:
    def test_removes_dots_spaces_and_case(self) -> None:
        assert normalize_name("Show.Name The Series") == "shownametheseries"

    def test_keeps_dashes(self) -> None:
        assert normalize_name("Show-Name.") == "show-name"


class TestIsCompletelyLowercase:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("show.name.s01e01.1080p-grp", True),
            ("Show.Name.S01E01", False),
            ("show.name.s01e01-GRP", False),
            ("s01e03", True),
            ("2024-03-15", False),  # aucune lettre
            ("", False),
        ],
    )
    def test_is_completely_lowercase(self, text: str, expected: bool) -> None:
        assert is_completely_lowercase(text) is expected


class TestMatchesPackPrefix:
    def test_same_prefix(self) -> None:
        assert matches_pack_prefix("Show.Name.S01E01.1080p-GRP", "Show.Name.S01.1080p-GRP")

    def test_prefix_comparison_is_normalized(self) -> None:
        assert matches_pack_prefix("show name.s01e01", "Show.Name.S01.720p")

    def test_different_prefix(self) -> None:
        assert not matches_pack_prefix("Other.Show.S01E01", "Show.Name.S01.1080p")

    def test_episode_without_prefix(self) -> None:
        assert not matches_pack_prefix("S01E01", "Show.Name.S01.1080p")

    def test_pack_without_season(self) -> None:
        assert not matches_pack_prefix("Show.Name.S01E01", "Show.Name.1080p")


class TestExtractEpisodeNumber:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Show.Name.S01E05.1080p", "E05"),
            ("show.name.s01e05.1080p", "E05"),
            ("Show.Name.S2024E112", "E112"),
            ("Show.Name.E07.subs", "E07"),
            ("Show.Name.S01.1080p.WEB", ""),
        ],
    )
    def test_extract_episode_number(self, name: str, expected: str) -> None:
        assert extract_episode_number(name) == expected


class TestGenerateEpisodeReleaseName:
    def test_inserts_episode_after_season(self) -> None:
        assert (
            generate_episode_release_name("Show.Name.S01.1080p.WEB-GRP", "E05")
            == "Show.Name.S01E05.1080p.WEB-GRP"
        )

    def test_removes_complete_marker(self) -> None:
        assert (
            generate_episode_release_name("Show.Name.S01.COMPLETE.1080p", "E02")
            == "Show.Name.S01E02..1080p"
        )

    def test_year_season(self) -> None:
        assert generate_episode_release_name("Show.S2024.720p", "E10") == "Show.S2024E10.720p"

    def test_key_is_idempotent(self) -> None:
        """La cle re-extraite d'un nom synthetise est la cle d'origine."""
        name = generate_episode_release_name("Show.Name.S03.1080p", "E09")

        assert extract_episode_number(name) == "E09"
        assert generate_episode_release_name("Show.Name.S03.1080p", extract_episode_number(name)) == name


class TestAsciiOnlyPatterns:
    """Les chiffres et limites de mots non ASCII ne comptent pas dans les noms."""

    def test_non_ascii_digits_are_not_episode_numbers(self) -> None:
        # chiffres arabes-indiens
        assert extract_episode_number("Show.Name.S٠١E٠٢") == ""

    def test_fullwidth_digits_are_not_a_season(self) -> None:
        assert not is_season_pack_name("Show.Name.S０１.1080p")

    def test_accented_letter_is_a_word_boundary(self) -> None:
        assert is_season_pack_name("CaféS01.1080p")

    def test_non_ascii_date_is_not_a_date(self) -> None:
        assert ISO_DATE_PATTERN.search("Daily.Show.٢٠٢٤-03-15") is None

    def test_first_track_requires_ascii_digit(self) -> None:
        assert FIRST_TRACK_PATTERN.search("track ١") is None
        assert FIRST_TRACK_PATTERN.search("é01") is not None
