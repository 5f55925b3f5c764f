"""
Interfaces ports pour le système de fichiers.

Interface abstraite définissant le parcours d'un téléchargement terminé et
les requêtes dérivées utilisées par la décomposition des season packs.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional

from crowdclient.core.entities.release import VideoFile
from crowdclient.core.value_objects import FileCategory


class IFileSystem(ABC):
    """
    Interface pour le parcours et la classification des fichiers.

    Les erreurs sur le répertoire racine sont fatales (ScanError), les erreurs
    sur une entrée descendante sont ignorées par l'implémentation.
    """

    @abstractmethod
    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt en profondeur tous les fichiers réguliers sous root.

        Args :
            root : Répertoire racine

        Retourne :
            Itérateur paresseux de chemins de fichiers

        Raises :
            ScanError : Si root est absent ou illisible
        """
        ...

    @abstractmethod
    def classify(self, path: Path) -> FileCategory:
        """Classe un fichier selon son extension (sans lire son contenu)."""
        ...

    @abstractmethod
    def find_all_video_files(self, root: Path) -> list[VideoFile]:
        """Retourne tous les fichiers vidéo sous root, dans l'ordre de parcours."""
        ...

    @abstractmethod
    def find_biggest_file(self, root: Path) -> Optional[Path]:
        """
        Trouve le plus gros fichier vidéo ou image disque (ISO/IMG).

        En cas d'égalité, le premier rencontré est conservé.
        """
        ...

    @abstractmethod
    def find_first_audio_file(self, root: Path) -> Optional[Path]:
        """Trouve la piste 1 (01, 001...) ou à défaut le premier fichier audio."""
        ...

    @abstractmethod
    def find_first_nfo(self, root: Path) -> Optional[Path]:
        """Trouve le premier fichier .nfo sous root (récursif)."""
        ...

    @abstractmethod
    def list_directory_files(self, directory: Path) -> list[Path]:
        """Liste les fichiers réguliers directement dans directory (non récursif)."""
        ...

    @abstractmethod
    def count_video_files_in_directory(self, directory: Path) -> int:
        """Compte les fichiers vidéo directement dans directory (non récursif)."""
        ...

    @abstractmethod
    def get_size(self, path: Path) -> int:
        """
        Récupère la taille du fichier en octets.

        Raises :
            OSError : Si le fichier ne peut pas être lu
        """
        ...
