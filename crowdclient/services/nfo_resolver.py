"""
Recherche des fichiers NFO d'un season pack.

Un NFO specifique a l'episode est toujours prefere au NFO general du pack.
Le NFO general n'est utilise qu'en repli : pour E01 (le NFO du pack decrit
en general le premier episode) et pour tous les episodes dates.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from crowdclient.core.entities.release import VideoFile
from crowdclient.core.exceptions import ScanError
from crowdclient.core.ports.file_system import IFileSystem
from crowdclient.core.value_objects import EpisodeIdentity, FileCategory, PackLayout
from crowdclient.utils.constants import EPISODE_NFO_PATTERN, NFO_EXTENSION

# Seul episode SxxExx qui recoit le NFO general du pack
GENERAL_NFO_EPISODE = "E01"


class NfoResolver:
    """Associe un NFO au pack et a chacun de ses episodes."""

    def __init__(self, file_system: IFileSystem) -> None:
        self._file_system = file_system

    def _first_nfo_in(self, directory: Path) -> Optional[Path]:
        try:
            files = self._file_system.list_directory_files(directory)
        except ScanError as e:
            logger.debug("Recherche NFO impossible", error=str(e))
            return None

        for path in files:
            if self._file_system.classify(path) == FileCategory.NFO:
                return path
        return None

    def find_general_nfo(self, pack_dir: Path) -> Optional[Path]:
        """
        Trouve le NFO general du pack (non recursif).

        Les NFO dont le nom contient SxxExx appartiennent a un episode
        et sont ignores.
        """
        try:
            files = self._file_system.list_directory_files(pack_dir)
        except ScanError as e:
            logger.debug("Recherche du NFO general impossible", error=str(e))
            return None

        for path in files:
            name = path.name.lower()
            if name.endswith(NFO_EXTENSION) and not EPISODE_NFO_PATTERN.search(name):
                return path
        return None

    def resolve(
        self,
        video_file: VideoFile,
        identity: EpisodeIdentity,
        general_nfo: Optional[Path],
    ) -> Optional[Path]:
        """
        Retourne le NFO a associer a un episode.

        - Repertoire partage : <release>.nfo a cote de la video, seulement
          quand le nom du fichier a ete garde comme nom de release
        - Sous-repertoire : n'importe quel .nfo du sous-repertoire
        - Repli sur le NFO general pour E01 et pour les episodes dates

        Args:
            video_file: Fichier video de l'episode
            identity: Identite extraite de l'episode
            general_nfo: NFO general du pack (peut etre None)
        """
        nfo: Optional[Path] = None

        if identity.layout == PackLayout.SHARED_DIRECTORY:
            if identity.source_name_kept:
                candidate = video_file.directory / f"{identity.release_name}{NFO_EXTENSION}"
                if candidate.is_file():
                    nfo = candidate
        else:
            nfo = self._first_nfo_in(video_file.directory)

        if nfo is None and general_nfo is not None:
            if identity.is_date_key or identity.key == GENERAL_NFO_EPISODE:
                nfo = general_nfo

        return nfo
