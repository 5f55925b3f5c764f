"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem : parcours en profondeur d'un
telechargement termine, classification des fichiers par extension et
requetes derivees (plus gros fichier, premiere piste audio, fichiers video).

Les entrees de chaque repertoire sont parcourues par ordre alphabetique,
ce qui rend les departages ("premier rencontre") reproductibles.
"""

import os
from pathlib import Path
from typing import Iterator, Optional

from loguru import logger

from crowdclient.core.entities.release import VideoFile
from crowdclient.core.exceptions import ScanError
from crowdclient.core.ports.file_system import IFileSystem
from crowdclient.core.value_objects import FileCategory
from crowdclient.utils.constants import (
    AUDIO_EXTENSIONS,
    FIRST_TRACK_PATTERN,
    HASH_ONLY_EXTENSIONS,
    NFO_EXTENSION,
    VIDEO_EXTENSIONS,
)


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    """Lit un repertoire et trie ses entrees par nom."""
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Un repertoire racine absent ou illisible leve ScanError. Un sous-repertoire
    ou un fichier illisible est journalise puis ignore, le parcours continue.
    """

    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt en profondeur tous les fichiers reguliers sous root.

        Un torrent a fichier unique (root est un fichier) donne ce seul fichier.
        Les liens symboliques vers des repertoires ne sont pas suivis.

        Raises:
            ScanError: Si root est absent, n'est pas un repertoire ou est illisible
        """
        if root.is_file():
            yield root
            return

        try:
            entries = _sorted_entries(root)
        except OSError as e:
            raise ScanError(root, e.strerror or str(e)) from e

        yield from self._walk_entries(entries)

    def _walk_entries(self, entries: list[os.DirEntry]) -> Iterator[Path]:
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file()
            except OSError as e:
                logger.debug("Entree ignoree", path=entry.path, error=str(e))
                continue

            if is_dir:
                try:
                    children = _sorted_entries(Path(entry.path))
                except OSError as e:
                    logger.warning(f"Sous-repertoire illisible ignore : {entry.path} ({e})")
                    continue
                yield from self._walk_entries(children)
            elif is_file:
                yield Path(entry.path)

    def classify(self, path: Path) -> FileCategory:
        """Classe un fichier selon son extension (insensible a la casse)."""
        ext = path.suffix.lower()
        if ext in VIDEO_EXTENSIONS:
            return FileCategory.VIDEO
        if ext in AUDIO_EXTENSIONS:
            return FileCategory.AUDIO
        if ext in HASH_ONLY_EXTENSIONS:
            return FileCategory.HASH_ONLY
        if ext == NFO_EXTENSION:
            return FileCategory.NFO
        return FileCategory.OTHER

    def find_all_video_files(self, root: Path) -> list[VideoFile]:
        """Retourne tous les fichiers video sous root (audio exclu)."""
        return [
            VideoFile.from_path(path)
            for path in self.walk_files(root)
            if self.classify(path) == FileCategory.VIDEO
        ]

    def find_biggest_file(self, root: Path) -> Optional[Path]:
        """
        Trouve le plus gros fichier video ou image disque sous root.

        En cas d'egalite de taille, le premier fichier rencontre est garde.
        """
        biggest_file: Optional[Path] = None
        biggest_size = 0

        for path in self.walk_files(root):
            if self.classify(path) not in (FileCategory.VIDEO, FileCategory.HASH_ONLY):
                continue
            try:
                size = self.get_size(path)
            except OSError as e:
                logger.debug("Taille illisible", path=str(path), error=str(e))
                continue
            if size > biggest_size:
                biggest_size = size
                biggest_file = path

        return biggest_file

    def find_first_audio_file(self, root: Path) -> Optional[Path]:
        """
        Trouve la premiere piste d'un album ou d'un livre audio.

        Cherche un fichier audio dont le nom contient le numero de piste 1
        ("1", "01", "001"), sinon retourne le premier fichier audio rencontre.
        """
        fallback: Optional[Path] = None

        for path in self.walk_files(root):
            if self.classify(path) != FileCategory.AUDIO:
                continue
            if fallback is None:
                fallback = path
            if FIRST_TRACK_PATTERN.search(path.stem):
                return path

        return fallback

    def find_first_nfo(self, root: Path) -> Optional[Path]:
        for path in self.walk_files(root):
            if self.classify(path) == FileCategory.NFO:
                return path
        return None

    def list_directory_files(self, directory: Path) -> list[Path]:
        """
        Liste les fichiers reguliers directement dans directory.

        Raises:
            ScanError: Si le repertoire est illisible
        """
        try:
            entries = _sorted_entries(directory)
        except OSError as e:
            raise ScanError(directory, e.strerror or str(e)) from e

        files: list[Path] = []
        for entry in entries:
            try:
                if entry.is_file():
                    files.append(Path(entry.path))
            except OSError:
                continue
        return files

    def count_video_files_in_directory(self, directory: Path) -> int:
        return sum(
            1
            for path in self.list_directory_files(directory)
            if self.classify(path) == FileCategory.VIDEO
        )

    def get_size(self, path: Path) -> int:
        """Taille du fichier en octets, lue a chaque appel (pas de cache)."""
        return path.stat().st_size
