"""
Classification des releases : season pack ou release unique.

Un season pack est detecte par son nom (S01, S2024) ou, a defaut, par le
nombre de fichiers video qu'il contient. Pour un pack, la disposition
(repertoire partage ou sous-repertoire par episode) est decidee fichier
par fichier : certains packs melangent les deux.
"""

from pathlib import Path

from loguru import logger

from crowdclient.core.entities.release import VideoFile
from crowdclient.core.exceptions import ScanError
from crowdclient.core.ports.file_system import IFileSystem
from crowdclient.core.value_objects import PackDetection, PackLayout
from crowdclient.utils.constants import (
    MIN_PACK_VIDEO_FILES,
    SEASON_PATTERN,
    SINGLE_EPISODE_PATTERN,
    YEAR_SEASON_PATTERN,
)


def is_season_pack_name(release_name: str) -> bool:
    """
    Determine si un nom de release designe un season pack.

    - "Show.S01.1080p" : pack
    - "Show.S01E05.1080p" : episode, pas un pack
    - "Show.S2024.1080p" : pack (saison numerotee par annee), toujours

    Args:
        release_name: Nom du torrent

    Returns:
        True si le nom correspond a un season pack
    """
    if SEASON_PATTERN.search(release_name) and not SINGLE_EPISODE_PATTERN.search(release_name):
        return True

    return YEAR_SEASON_PATTERN.search(release_name) is not None


def is_season_pack_by_file_count(directory: Path, file_system: IFileSystem) -> bool:
    """
    Repli quand le nom ne contient pas de marqueur de saison.

    Returns:
        True si au moins MIN_PACK_VIDEO_FILES fichiers video sont trouves
        sous directory. Un repertoire illisible donne False.
    """
    try:
        video_files = file_system.find_all_video_files(directory)
    except ScanError as e:
        logger.debug("Comptage des videos impossible", error=str(e))
        return False

    return len(video_files) >= MIN_PACK_VIDEO_FILES


def detect_season_pack(
    release_name: str,
    directory: Path,
    file_system: IFileSystem,
) -> PackDetection:
    """
    Determine si une release doit etre traitee comme season pack.

    Le nom est teste en premier, le comptage de fichiers n'est fait
    qu'en l'absence de marqueur de saison.
    """
    if is_season_pack_name(release_name):
        return PackDetection.NAME_PATTERN
    if is_season_pack_by_file_count(directory, file_system):
        return PackDetection.FILE_COUNT
    return PackDetection.NONE


def classify_layout(video_file: VideoFile, pack_name: str) -> PackLayout:
    """
    Determine la disposition d'un fichier video dans le pack.

    Le fichier est dans le repertoire partage si son repertoire parent porte
    le nom du pack (comparaison insensible a la casse), sinon il est dans
    un sous-repertoire d'episode.
    """
    if video_file.directory.name.casefold() == pack_name.casefold():
        return PackLayout.SHARED_DIRECTORY
    return PackLayout.EPISODE_SUBDIRECTORY
