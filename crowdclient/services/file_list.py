"""
Construction des listes de fichiers envoyees a CrowdNFO.

Les chemins sont relatifs au repertoire de base et toujours separes par "/",
quelle que soit la plateforme. Les tailles sont lues au moment de la
construction de la liste.

Pour un episode de season pack :
- repertoire partage (plusieurs videos a cote) : la video puis les seuls
  fichiers du meme repertoire portant la meme cle d'episode
- sous-repertoire (une seule video) : tout le sous-repertoire
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from crowdclient.core.entities.release import EpisodeUnit, VideoFile
from crowdclient.core.ports.file_system import IFileSystem
from crowdclient.core.value_objects import FileListEntry
from crowdclient.utils.helpers import extract_episode_number


def _entry(path: Path, base_dir: Path, file_system: IFileSystem) -> FileListEntry:
    """Cree une entree relative a base_dir (leve OSError si le fichier est illisible)."""
    return FileListEntry(
        file_path=path.relative_to(base_dir).as_posix(),
        file_size_bytes=file_system.get_size(path),
    )


def build_file_list(directory: Path, file_system: IFileSystem) -> list[FileListEntry]:
    """
    Liste recursivement tous les fichiers d'un repertoire.

    Pour un torrent a fichier unique, la liste contient ce fichier, relatif
    a son repertoire parent. Les fichiers dont la taille ne peut pas etre
    lue sont ignores.

    Raises:
        ScanError: Si directory est absent ou illisible
    """
    base_dir = directory.parent if directory.is_file() else directory
    entries: list[FileListEntry] = []
    for path in file_system.walk_files(directory):
        try:
            entries.append(_entry(path, base_dir, file_system))
        except OSError as e:
            logger.debug("Fichier ignore dans la liste", path=str(path), error=str(e))
    return entries


def find_related_files(
    video_file: VideoFile,
    file_system: IFileSystem,
) -> list[FileListEntry]:
    """
    Liste la video et les fichiers du meme repertoire appartenant au meme episode.

    Un fichier est rattache a l'episode si sa cle (SxxExx ou Exx) est egale,
    sans tenir compte de la casse, a celle de la video. Les fichiers sans
    cle ou d'un autre episode sont exclus. Non recursif.

    Raises:
        OSError: Si la video elle-meme est illisible
    """
    base_dir = video_file.directory
    entries = [_entry(video_file.path, base_dir, file_system)]

    episode_key = extract_episode_number(video_file.stem)
    if not episode_key:
        logger.warning(f"Numero d'episode introuvable dans : {video_file.stem}")
        return entries

    for path in file_system.list_directory_files(base_dir):
        if path.name == video_file.name:
            continue
        if extract_episode_number(path.stem).casefold() != episode_key.casefold():
            continue
        try:
            entries.append(_entry(path, base_dir, file_system))
        except OSError as e:
            logger.debug("Fichier associe ignore", path=str(path), error=str(e))

    return entries


def build_episode_file_list(
    unit: EpisodeUnit,
    pack_videos: Iterable[VideoFile],
    file_system: IFileSystem,
) -> list[FileListEntry]:
    """
    Construit la liste de fichiers d'un episode de season pack.

    Args:
        unit: Episode a lister
        pack_videos: Tous les fichiers video du pack
        file_system: Acces au systeme de fichiers

    Returns:
        Entrees relatives au repertoire de la video de l'episode
    """
    video = unit.video_file
    same_dir_count = sum(1 for vf in pack_videos if vf.directory == video.directory)

    if same_dir_count == 0:
        logger.warning(
            f"Aucune video dans la structure attendue, traite comme fichier unique : {video.name}"
        )
        return build_file_list(video.directory, file_system)

    if same_dir_count > 1:
        return find_related_files(video, file_system)

    return build_file_list(video.directory, file_system)
