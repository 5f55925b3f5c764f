"""
Fixtures pytest partagees pour les tests crowdclient.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystem, IReleaseUploader, IMediaInfoExtractor)
- Settings de test avec chemins temporaires
- Arborescences de season packs reelles construites dans tmp_path
"""

from pathlib import Path
from typing import Callable, Union
from unittest.mock import AsyncMock, MagicMock

import pytest

from crowdclient.adapters.file_system import FileSystemAdapter
from crowdclient.config import Settings
from crowdclient.core.ports.api_clients import IReleaseUploader
from crowdclient.core.ports.file_system import IFileSystem
from crowdclient.core.ports.parser import IMediaInfoExtractor

TreeSpec = dict[str, Union[str, bytes]]


def build_tree(root: Path, files: TreeSpec) -> Path:
    """
    Cree une arborescence de fichiers sous root.

    Args:
        root: Repertoire racine (cree si besoin)
        files: Chemin relatif ("sub/file.mkv") -> contenu

    Returns:
        root
    """
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str, TreeSpec], Path]:
    """Fabrique d'arborescences : make_tree("Pack.S01", {"a.mkv": "x"})."""

    def _make(name: str, files: TreeSpec) -> Path:
        return build_tree(tmp_path / name, files)

    return _make


@pytest.fixture
def file_system() -> FileSystemAdapter:
    """Adaptateur systeme de fichiers reel."""
    return FileSystemAdapter()


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.find_all_video_files.return_value = []
    mock.list_directory_files.return_value = []
    mock.get_size.return_value = 500 * 1024 * 1024  # 500 MB par defaut
    return mock


@pytest.fixture
def mock_uploader() -> AsyncMock:
    """Mock de IReleaseUploader : tous les envois reussissent par defaut."""
    mock = AsyncMock(spec=IReleaseUploader)
    mock.upload_file.return_value = None
    mock.upload_file_list.return_value = None
    mock.latest_version = None
    return mock


@pytest.fixture
def mock_media_info_extractor() -> MagicMock:
    """Mock de IMediaInfoExtractor retournant un JSON minimal."""
    mock = MagicMock(spec=IMediaInfoExtractor)
    mock.available = True
    mock.extract_json.return_value = b'{"media": {"track": []}}'
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    _env_file=None pour ignorer un eventuel .env du developpeur.
    """
    return Settings(
        _env_file=None,
        api_key="test-api-key",
        base_url="https://crowdnfo.test/api/releases",
        archive_dir=tmp_path / "archive",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def shared_pack(make_tree) -> Path:
    """
    Season pack en repertoire partage : 3 episodes, un NFO d'episode,
    un NFO general et un sous-titre rattache a E02.
    """
    return make_tree(
        "Show.Name.S01.1080p.WEB.h264-GRP",
        {
            "Show.Name.S01E01.1080p.WEB.h264-GRP.mkv": "episode one",
            "Show.Name.S01E02.1080p.WEB.h264-GRP.mkv": "episode two!",
            "Show.Name.S01E03.1080p.WEB.h264-GRP.mkv": "episode three",
            "Show.Name.S01E01.1080p.WEB.h264-GRP.nfo": "nfo e01",
            "Show.Name.S01E02.1080p.WEB.h264-GRP.srt": "subs e02",
            "show.name.s01.1080p.web.h264-grp.nfo": "nfo pack",
        },
    )


@pytest.fixture
def subdir_pack(make_tree) -> Path:
    """Season pack avec un sous-repertoire par episode."""
    return make_tree(
        "Show.Name.S02.720p.HDTV.x264-GRP",
        {
            "Show.Name.S02E01.720p.HDTV.x264-GRP/show.name.s02e01.720p.hdtv.x264-grp.mkv": "a",
            "Show.Name.S02E01.720p.HDTV.x264-GRP/show.name.s02e01.720p.hdtv.x264-grp.nfo": "nfo 1",
            "Show.Name.S02E02.720p.HDTV.x264-GRP/show.name.s02e02.720p.hdtv.x264-grp.mkv": "bb",
            "Show.Name.S02E02.720p.HDTV.x264-GRP/Sample/sample.mkv": "s",
            "Show.Name.S02E03.720p.HDTV.x264-GRP/show.name.s02e03.720p.hdtv.x264-grp.mkv": "ccc",
        },
    )
