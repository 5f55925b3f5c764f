"""
Décomposition d'un season pack en épisodes individuels.

Enchaîne le scan des vidéos, l'extraction d'identité et la recherche des NFO
pour produire un EpisodeUnit par épisode valide. Chaque épisode est traité
indépendamment : une erreur sur un épisode est enregistrée et n'empêche pas
le traitement des autres.

Le service est sans état : aucune information n'est conservée d'un appel à l'autre.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from crowdclient.core.entities.release import EpisodeUnit, VideoFile
from crowdclient.core.ports.file_system import IFileSystem
from crowdclient.core.value_objects import FileListEntry
from crowdclient.services.episode_identity import EpisodeIdentityExtractor
from crowdclient.services.file_list import build_episode_file_list
from crowdclient.services.nfo_resolver import NfoResolver
from crowdclient.utils.constants import MIN_PACK_VIDEO_FILES


@dataclass
class EpisodeFailure:
    """Erreur survenue sur un épisode, sans interrompre le pack."""

    video_file: VideoFile
    error: str


@dataclass
class DecompositionResult:
    """
    Résultat de la décomposition d'un season pack.

    Attributs :
        pack_name: Nom du season pack
        pack_videos: Tous les fichiers vidéo trouvés dans le pack
        episodes: Épisodes valides, dans l'ordre du scan
        skipped: Vidéos sans motif reconnu ou rejetées
        failures: Épisodes en erreur
        single_release: True si le pack contient trop peu de vidéos
                        et doit être traité comme une release unique
    """

    pack_name: str
    pack_videos: list[VideoFile] = field(default_factory=list)
    episodes: list[EpisodeUnit] = field(default_factory=list)
    skipped: list[VideoFile] = field(default_factory=list)
    failures: list[EpisodeFailure] = field(default_factory=list)
    single_release: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.episodes


class SeasonPackDecomposer:
    """
    Service de décomposition des season packs.

    Coordonne:
    - Le système de fichiers (IFileSystem) pour lister les vidéos
    - L'extracteur d'identité pour la clé et le nom de chaque épisode
    - Le résolveur de NFO pour le NFO général et ceux des épisodes
    """

    def __init__(
        self,
        file_system: IFileSystem,
        extractor: Optional[EpisodeIdentityExtractor] = None,
        nfo_resolver: Optional[NfoResolver] = None,
    ) -> None:
        self._file_system = file_system
        self._extractor = extractor or EpisodeIdentityExtractor()
        self._nfo_resolver = nfo_resolver or NfoResolver(file_system)

    def decompose(self, pack_dir: Path, pack_name: str) -> DecompositionResult:
        """
        Décompose un season pack en épisodes.

        Args:
            pack_dir: Répertoire du téléchargement terminé
            pack_name: Nom du torrent (nom du pack)

        Returns:
            DecompositionResult, éventuellement sans épisode

        Raises:
            ScanError: Si pack_dir est absent ou illisible
        """
        result = DecompositionResult(pack_name=pack_name)
        result.pack_videos = self._file_system.find_all_video_files(pack_dir)

        if len(result.pack_videos) < MIN_PACK_VIDEO_FILES:
            logger.info(
                f"Moins de {MIN_PACK_VIDEO_FILES} fichiers vidéo trouvés, traitement en release unique"
            )
            result.single_release = True
            return result

        logger.info(f"{len(result.pack_videos)} fichiers vidéo trouvés dans le season pack")

        general_nfo = self._nfo_resolver.find_general_nfo(pack_dir)
        if general_nfo is not None:
            logger.debug("NFO général du pack", nfo=str(general_nfo))

        for video_file in result.pack_videos:
            try:
                unit = self._build_unit(video_file, pack_name, general_nfo)
            except Exception as e:
                logger.error(f"Erreur sur l'épisode {video_file.name} : {e}")
                result.failures.append(EpisodeFailure(video_file=video_file, error=str(e)))
                continue

            if unit is None or not unit.is_processable:
                result.skipped.append(video_file)
                continue
            result.episodes.append(unit)

        if result.is_empty:
            logger.info("Aucun épisode valide trouvé dans le season pack")

        return result

    def _build_unit(
        self,
        video_file: VideoFile,
        pack_name: str,
        general_nfo: Optional[Path],
    ) -> Optional[EpisodeUnit]:
        identity = self._extractor.extract(video_file, pack_name)
        if identity is None:
            return None
        if not identity.is_valid:
            return EpisodeUnit(video_file=video_file, episode_key="", release_name="")

        return EpisodeUnit(
            video_file=video_file,
            episode_key=identity.key,
            release_name=identity.release_name,
            nfo_path=self._nfo_resolver.resolve(video_file, identity, general_nfo),
        )

    def file_list(self, unit: EpisodeUnit, result: DecompositionResult) -> list[FileListEntry]:
        """Liste de fichiers d'un épisode, relative au répertoire de sa vidéo."""
        return build_episode_file_list(unit, result.pack_videos, self._file_system)
