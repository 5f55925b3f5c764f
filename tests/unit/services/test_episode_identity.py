"""
Tests unitaires pour l'extraction de l'identite des episodes.

L'extracteur ne lit pas le disque : les VideoFile sont construits
directement a partir de chemins.
"""

from pathlib import Path

import pytest

from crowdclient.core.entities.release import VideoFile
from crowdclient.core.value_objects import EpisodeIdentity, PackLayout
from crowdclient.services.episode_identity import (
    EpisodeIdentityExtractor,
    IsoDateMatcher,
    SeasonEpisodeMatcher,
)

PACK = "Show.Name.S01.1080p"


@pytest.fixture
def extractor() -> EpisodeIdentityExtractor:
    return EpisodeIdentityExtractor()


def _shared(name: str, pack: str = PACK) -> VideoFile:
    return VideoFile.from_path(Path("/downloads") / pack / name)


def _subdir(directory: str, name: str = "episode.mkv", pack: str = PACK) -> VideoFile:
    return VideoFile.from_path(Path("/downloads") / pack / directory / name)


class TestSharedDirectory:
    """Disposition repertoire partage : le nom du fichier est analyse."""

    def test_keeps_file_name_with_pack_prefix(self, extractor: EpisodeIdentityExtractor) -> None:
        identity = extractor.extract(_shared("Show.Name.S01E01.mkv"), PACK)

        assert identity == EpisodeIdentity(
            key="E01",
            release_name="Show.Name.S01E01",
            layout=PackLayout.SHARED_DIRECTORY,
            source_name_kept=True,
        )

    def test_preserves_case(self, extractor: EpisodeIdentityExtractor) -> None:
        identity = extractor.extract(_shared("Show.Name.S01E02.GERMAN.mkv"), PACK)

        assert identity.key == "E02"
        assert identity.release_name == "Show.Name.S01E02.GERMAN"

    def test_lowercase_file_name_is_synthesized(self, extractor: EpisodeIdentityExtractor) -> None:
        identity = extractor.extract(_shared("show.name.s01e02.mkv"), PACK)

        assert identity.key == "E02"
        assert identity.release_name == "Show.Name.S01E02.1080p"
        assert identity.source_name_kept is False

    def test_other_prefix_is_synthesized(self, extractor: EpisodeIdentityExtractor) -> None:
        identity = extractor.extract(_shared("SN.S01E03.mkv"), PACK)

        assert identity.release_name == "Show.Name.S01E03.1080p"
        assert identity.is_valid

    def test_key_case_insensitive(self, extractor: EpisodeIdentityExtractor) -> None:
        identity = extractor.extract(_shared("Show.Name.s01e04.Proper.mkv"), PACK)
        assert identity.key == "E04"


class TestEpisodeSubdirectory:
    """Disposition sous-repertoire : le nom du repertoire parent est analyse."""

    def test_keeps_directory_name(self, extractor: EpisodeIdentityExtractor) -> None:
        video = _subdir("Show.Name.S01E03.1080p.WEB-GRP", "abc123.mkv")

        identity = extractor.extract(video, PACK)

        assert identity.key == "E03"
        assert identity.release_name == "Show.Name.S01E03.1080p.WEB-GRP"
        assert identity.layout == PackLayout.EPISODE_SUBDIRECTORY

    def test_lowercase_directory_with_pack_prefix_is_rejected(
        self, extractor: EpisodeIdentityExtractor
    ) -> None:
        video = _subdir("show.name.s01e03.1080p", "show.name.s01e03.1080p.mkv")

        identity = extractor.extract(video, PACK)

        assert identity is not None
        assert identity.release_name == ""
        assert not identity.is_valid

    def test_lowercase_directory_with_other_prefix_is_kept(
        self, extractor: EpisodeIdentityExtractor
    ) -> None:
        identity = extractor.extract(_subdir("other.show.s01e03.1080p"), PACK)

        assert identity.release_name == "other.show.s01e03.1080p"

    def test_file_name_is_ignored(self, extractor: EpisodeIdentityExtractor) -> None:
        """Seul le repertoire compte, meme si le fichier porte un SxxExx."""
        identity = extractor.extract(_subdir("Extras", "Show.Name.S01E01.mkv"), PACK)

        assert identity is None


class TestDatedEpisodes:
    def test_iso_date_key(self, extractor: EpisodeIdentityExtractor) -> None:
        pack = "Daily.Show.S2024.720p"
        identity = extractor.extract(_shared("Daily.Show.2024-03-15.720p.mkv", pack), pack)

        assert identity.key == "2024-03-15"
        assert identity.release_name == "Daily.Show.2024-03-15.720p"
        assert identity.is_date_key

    def test_season_episode_has_priority(self, extractor: EpisodeIdentityExtractor) -> None:
        identity = extractor.extract(_shared("Show.Name.S01E07.2024-03-15.mkv"), PACK)

        assert identity.key == "E07"
        assert not identity.is_date_key


class TestNoMatch:
    def test_unrecognized_name_returns_none(self, extractor: EpisodeIdentityExtractor) -> None:
        assert extractor.extract(_shared("Show.Name.Featurette.mkv"), PACK) is None

    def test_custom_matcher_order(self) -> None:
        extractor = EpisodeIdentityExtractor(matchers=[IsoDateMatcher()])

        assert extractor.extract(_shared("Show.Name.S01E01.mkv"), PACK) is None

    def test_matchers_return_none_on_miss(self) -> None:
        assert SeasonEpisodeMatcher().match("Featurette", PackLayout.SHARED_DIRECTORY, PACK) is None
        assert IsoDateMatcher().match("Featurette", PackLayout.SHARED_DIRECTORY, PACK) is None
