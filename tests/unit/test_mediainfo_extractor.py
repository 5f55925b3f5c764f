"""
Tests unitaires pour MediaInfoExtractor.

pymediainfo est mocke : les tests ne dependent pas de la presence
de libmediainfo sur la machine.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from crowdclient.adapters.parsing.mediainfo_extractor import MediaInfoExtractor
from crowdclient.core.ports.parser import IMediaInfoExtractor

_PYMEDIAINFO = "crowdclient.adapters.parsing.mediainfo_extractor.PyMediaInfo"


@pytest.fixture
def extractor() -> MediaInfoExtractor:
    """Instance de l'extracteur pour les tests."""
    return MediaInfoExtractor()


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    path = tmp_path / "Show.S01E01.mkv"
    path.write_bytes(b"\x1a\x45\xdf\xa3")
    return path


class TestMediaInfoExtractor:
    """Tests pour la generation du rapport JSON."""

    def test_implements_interface(self, extractor: MediaInfoExtractor) -> None:
        assert isinstance(extractor, IMediaInfoExtractor)

    def test_returns_json_bytes(self, extractor: MediaInfoExtractor, video_file: Path) -> None:
        with patch(_PYMEDIAINFO) as mock_pymediainfo:
            mock_pymediainfo.can_parse.return_value = True
            mock_pymediainfo.parse.return_value = '{"media": {"@ref": "x"}}'

            result = extractor.extract_json(video_file)

        assert result == b'{"media": {"@ref": "x"}}'
        mock_pymediainfo.parse.assert_called_once_with(
            str(video_file), library_file=None, output="JSON"
        )

    def test_unavailable_library_returns_none(
        self, extractor: MediaInfoExtractor, video_file: Path
    ) -> None:
        with patch(_PYMEDIAINFO) as mock_pymediainfo:
            mock_pymediainfo.can_parse.return_value = False

            assert extractor.available is False
            assert extractor.extract_json(video_file) is None

        mock_pymediainfo.parse.assert_not_called()

    def test_availability_is_checked_once(
        self, extractor: MediaInfoExtractor, video_file: Path
    ) -> None:
        with patch(_PYMEDIAINFO) as mock_pymediainfo:
            mock_pymediainfo.can_parse.return_value = True
            mock_pymediainfo.parse.return_value = "{}"

            extractor.extract_json(video_file)
            extractor.extract_json(video_file)

        assert mock_pymediainfo.can_parse.call_count == 1

    def test_parse_error_returns_none(self, extractor: MediaInfoExtractor, video_file: Path) -> None:
        with patch(_PYMEDIAINFO) as mock_pymediainfo:
            mock_pymediainfo.can_parse.return_value = True
            mock_pymediainfo.parse.side_effect = RuntimeError("corrupted file")

            assert extractor.extract_json(video_file) is None

    def test_missing_file_returns_none(self, extractor: MediaInfoExtractor, tmp_path: Path) -> None:
        with patch(_PYMEDIAINFO) as mock_pymediainfo:
            mock_pymediainfo.can_parse.return_value = True

            assert extractor.extract_json(tmp_path / "absent.mkv") is None
