"""
Traitement complet d'un torrent terminé : identification puis envoi vers CrowdNFO.

Deux parcours :
- release unique : plus gros fichier vidéo (ou image disque), à défaut la
  première piste audio ; premier NFO trouvé ; liste de tous les fichiers
- season pack : décomposition en épisodes, puis pour chaque épisode son
  propre hash, MediaInfo, NFO et liste de fichiers

Pour chaque release, les trois envois (MediaInfo, NFO, liste de fichiers)
sont indépendants : un échec n'empêche pas les autres. Dans un pack, un
épisode en échec n'empêche pas le traitement des épisodes suivants.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from loguru import logger

from crowdclient.config import Settings
from crowdclient.core.entities.release import EpisodeUnit
from crowdclient.core.exceptions import CrowdClientError, TitleLookupError, UploadError
from crowdclient.core.ports.api_clients import (
    IReleaseUploader,
    ITitleLookup,
    UploadFileType,
    upload_file_name,
)
from crowdclient.core.ports.file_system import IFileSystem
from crowdclient.core.ports.parser import IMediaInfoExtractor
from crowdclient.core.value_objects import (
    FileCategory,
    FileListEntry,
    FileListRequest,
    PackDetection,
    TorrentJob,
)
from crowdclient.services.category import is_category_excluded, map_category
from crowdclient.services.file_list import build_file_list
from crowdclient.services.hash_service import calculate_sha256, should_calculate_hash
from crowdclient.services.layout import detect_season_pack
from crowdclient.services.season_pack import DecompositionResult, SeasonPackDecomposer


@dataclass
class UploadReport:
    """
    Bilan des envois d'une release (ou d'un épisode).

    Attributs:
        release_name: Nom de la release envoyée
        success_count: Nombre d'envois réussis
        errors: Messages des envois en échec ("NFO: ...", "FileList: ...")
    """

    release_name: str
    success_count: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def partial_failure(self) -> bool:
        return bool(self.errors) and self.success_count > 0

    @property
    def total_failure(self) -> bool:
        return bool(self.errors) and self.success_count == 0


@dataclass
class ProcessingSummary:
    """Bilan du traitement d'un torrent."""

    release_name: str
    category: str = ""
    excluded: bool = False
    title_lookup_failed: bool = False
    season_pack: bool = False
    reports: list[UploadReport] = field(default_factory=list)
    skipped_episodes: int = 0
    failed_episodes: int = 0

    @property
    def successful_releases(self) -> int:
        return sum(1 for report in self.reports if report.ok)


class ReleaseProcessor:
    """
    Service orchestrant l'identification et l'envoi d'un torrent.

    Coordonne:
    - Le système de fichiers (IFileSystem) pour trouver les fichiers
    - Le décomposeur de season packs
    - L'extracteur MediaInfo (IMediaInfoExtractor)
    - Le client CrowdNFO (IReleaseUploader)
    - Le client UmlautAdaptarr (ITitleLookup), si activé
    """

    def __init__(
        self,
        settings: Settings,
        file_system: IFileSystem,
        uploader: IReleaseUploader,
        media_info_extractor: IMediaInfoExtractor,
        decomposer: Optional[SeasonPackDecomposer] = None,
        title_lookup: Optional[ITitleLookup] = None,
    ) -> None:
        self._settings = settings
        self._file_system = file_system
        self._uploader = uploader
        self._media_info_extractor = media_info_extractor
        self._decomposer = decomposer or SeasonPackDecomposer(file_system)
        self._title_lookup = title_lookup

    async def process(self, job: TorrentJob) -> ProcessingSummary:
        """
        Traite un torrent terminé.

        Si UmlautAdaptarr est activé, le titre d'origine remplace le nom du
        torrent pour toute la suite ; une recherche en échec annule les envois.

        Raises:
            ConfigurationError: Si la clé API n'est pas configurée
            ScanError: Si le contenu du torrent est absent ou illisible
        """
        summary = ProcessingSummary(release_name=job.torrent_name)

        if is_category_excluded(job.category, self._settings.excluded_categories):
            logger.info(f"Catégorie '{job.category}' exclue, envoi CrowdNFO ignoré")
            summary.excluded = True
            return summary

        self._settings.require_api_key()

        if self._settings.umlautadaptarr_enabled and self._title_lookup is not None:
            try:
                original_title = await self._title_lookup.lookup_original_title(job.torrent_name)
            except TitleLookupError as e:
                logger.error(f"Recherche UmlautAdaptarr en échec : {e}")
                logger.warning("Envoi CrowdNFO ignoré, le post-traitement continue")
                summary.title_lookup_failed = True
                return summary
            if original_title:
                logger.info(f"Titre d'origine UmlautAdaptarr : {original_title}")
                job = replace(job, torrent_name=original_title)
                summary.release_name = original_title

        detection = detect_season_pack(job.torrent_name, job.content_path, self._file_system)
        if detection.is_pack:
            if detection == PackDetection.NAME_PATTERN:
                logger.info(f"Season pack détecté par le nom : {job.torrent_name}")
            else:
                logger.info(f"Season pack détecté par le nombre de fichiers : {job.torrent_name}")

            result = self._decomposer.decompose(job.content_path, job.torrent_name)
            if not result.single_release:
                summary.season_pack = True
                await self._process_season_pack(job, result, summary)
                return summary

        summary.category = map_category(
            job.category, job.torrent_name, self._settings.category_mappings
        )
        summary.reports.append(await self._process_single_release(job, summary.category))
        return summary

    async def _process_single_release(self, job: TorrentJob, category: str) -> UploadReport:
        media_file = self._file_system.find_biggest_file(job.content_path)
        if media_file is None:
            media_file = self._file_system.find_first_audio_file(job.content_path)

        file_hash = ""
        media_info: Optional[bytes] = None
        if media_file is not None:
            logger.info(f"Traitement du fichier média : {media_file.name}")
            media_info = self._generate_media_info(media_file)
            try:
                file_hash = self._hash(media_file)
            except OSError as e:
                logger.warning(f"Échec du calcul SHA-256 : {e}")

        nfo = self._file_system.find_first_nfo(job.content_path)
        if nfo is None:
            logger.info("Aucun fichier NFO trouvé")

        try:
            entries = build_file_list(job.content_path, self._file_system)
            file_list_error = None
        except CrowdClientError as e:
            entries, file_list_error = [], str(e)

        report = await self._upload_release(
            job.torrent_name, category, file_hash, media_info, nfo, entries, file_list_error
        )
        self._log_report(report)
        return report

    async def _process_season_pack(
        self,
        job: TorrentJob,
        result: DecompositionResult,
        summary: ProcessingSummary,
    ) -> None:
        summary.skipped_episodes = len(result.skipped)
        summary.failed_episodes = len(result.failures)

        if result.is_empty:
            logger.info("Aucun épisode valide trouvé dans le season pack")
            return

        logger.info(f"Traitement de {len(result.episodes)} épisodes")

        for index, episode in enumerate(result.episodes, start=1):
            logger.info(f"Épisode {index}/{len(result.episodes)} : {episode.release_name}")
            report = await self._process_episode(job, episode, result)
            if report is None:
                summary.failed_episodes += 1
                continue
            summary.reports.append(report)

        logger.info(
            f"Season pack terminé : {summary.successful_releases}/{len(result.episodes)} épisodes réussis"
        )

    async def _process_episode(
        self,
        job: TorrentJob,
        episode: EpisodeUnit,
        result: DecompositionResult,
    ) -> Optional[UploadReport]:
        """Envoie un épisode ; retourne None si l'épisode a dû être abandonné."""
        video_path = episode.video_file.path

        try:
            file_hash = self._hash(video_path)
        except OSError as e:
            logger.error(f"Échec du calcul SHA-256 pour {episode.release_name} : {e}")
            return None

        category = map_category(job.category, episode.release_name, self._settings.category_mappings)
        media_info = self._generate_media_info(video_path)

        try:
            entries = self._decomposer.file_list(episode, result)
            file_list_error = None
        except (CrowdClientError, OSError) as e:
            entries, file_list_error = [], str(e)

        report = await self._upload_release(
            episode.release_name,
            category,
            file_hash,
            media_info,
            episode.nfo_path,
            entries,
            file_list_error,
        )
        self._log_report(report)
        return report

    def _hash(self, media_file: Path) -> str:
        """SHA-256 du fichier, ou chaîne vide si la limite de taille l'exclut."""
        if not should_calculate_hash(media_file, self._settings.max_hash_file_size):
            return ""
        return calculate_sha256(media_file)

    def _generate_media_info(self, media_file: Path) -> Optional[bytes]:
        """Rapport MediaInfo, jamais pour les images disque (ISO/IMG)."""
        if not self._settings.mediainfo_enabled:
            return None
        if self._file_system.classify(media_file) == FileCategory.HASH_ONLY:
            return None
        return self._media_info_extractor.extract_json(media_file)

    async def _upload_release(
        self,
        release_name: str,
        category: str,
        file_hash: str,
        media_info: Optional[bytes],
        nfo: Optional[Path],
        entries: list[FileListEntry],
        file_list_error: Optional[str] = None,
    ) -> UploadReport:
        """Envoie MediaInfo, NFO et liste de fichiers, chacun indépendamment."""
        report = UploadReport(release_name=release_name)

        if media_info:
            try:
                await self._uploader.upload_file(
                    release_name, UploadFileType.MEDIAINFO, media_info, category, file_hash
                )
            except UploadError as e:
                report.errors.append(f"MediaInfo: {e}")
                logger.error(f"Échec de l'envoi MediaInfo : {e}")
            else:
                report.success_count += 1
                logger.info("MediaInfo envoyé")
                self._archive(release_name, upload_file_name(UploadFileType.MEDIAINFO, release_name), media_info)
        else:
            logger.info("Envoi MediaInfo ignoré - aucune donnée MediaInfo")

        if nfo is not None:
            await self._upload_nfo(report, release_name, category, file_hash, nfo)
        else:
            logger.info("Aucun NFO à envoyer")

        if file_list_error is not None:
            report.errors.append(f"FileList: échec de création de la liste - {file_list_error}")
            logger.error(f"Échec de création de la liste de fichiers : {file_list_error}")
        elif entries:
            request = FileListRequest(
                release_name=release_name, category=category, entries=tuple(entries)
            )
            try:
                await self._uploader.upload_file_list(request)
            except UploadError as e:
                report.errors.append(f"FileList: {e}")
                logger.error(f"Échec de l'envoi de la liste de fichiers : {e}")
            else:
                report.success_count += 1
                logger.info(f"Liste de fichiers envoyée ({len(entries)} fichiers)")
        else:
            logger.info("Aucun fichier pour la liste de fichiers")

        return report

    async def _upload_nfo(
        self,
        report: UploadReport,
        release_name: str,
        category: str,
        file_hash: str,
        nfo: Path,
    ) -> None:
        try:
            data = nfo.read_bytes()
        except OSError as e:
            report.errors.append(f"NFO: lecture impossible - {e}")
            logger.error(f"Échec de l'envoi NFO : lecture impossible - {e}")
            return

        try:
            await self._uploader.upload_file(
                release_name, UploadFileType.NFO, data, category, file_hash, nfo.name
            )
        except UploadError as e:
            report.errors.append(f"NFO: {e}")
            logger.error(f"Échec de l'envoi NFO : {e}")
            return

        report.success_count += 1
        logger.info("NFO envoyé")
        self._archive(release_name, upload_file_name(UploadFileType.NFO, release_name, nfo.name), data)

    def _archive(self, release_name: str, file_name: str, data: bytes) -> None:
        """Copie un fichier envoyé dans archive/<release>/ (échec non bloquant)."""
        target = self._settings.archive_dir / release_name / file_name
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            logger.warning(f"Échec de l'archivage de {file_name} : {e}")

    @staticmethod
    def _log_report(report: UploadReport) -> None:
        if report.partial_failure:
            logger.warning(
                f"Envoi partiel : {report.success_count} réussi(s), {len(report.errors)} en échec"
            )
        elif report.total_failure:
            logger.error(f"Échec de l'envoi : {len(report.errors)} envoi(s) en échec")
