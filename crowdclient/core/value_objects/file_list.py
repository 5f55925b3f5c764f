"""
Objets valeur pour la classification des fichiers et les listes de fichiers.

La forme JSON de FileListRequest est celle attendue par l'endpoint
/filelists de l'API CrowdNFO.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FileCategory(Enum):
    """Categorie d'un fichier, determinee uniquement par son extension."""

    VIDEO = "video"
    AUDIO = "audio"
    HASH_ONLY = "hash_only"
    NFO = "nfo"
    OTHER = "other"


@dataclass(frozen=True)
class FileListEntry:
    """
    Entree d'une liste de fichiers.

    Attributs:
        file_path: Chemin relatif au repertoire de base, separateur "/"
        file_size_bytes: Taille lue au moment de la construction de la liste
    """

    file_path: str
    file_size_bytes: int

    def to_payload(self) -> dict[str, Any]:
        return {"filePath": self.file_path, "fileSizeBytes": self.file_size_bytes}


@dataclass(frozen=True)
class FileListRequest:
    """
    Liste de fichiers d'une release, telle qu'envoyee a l'API.

    L'ordre des entrees est l'ordre de parcours, pas un tri.
    """

    release_name: str
    category: str
    entries: tuple[FileListEntry, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        """Serialise la requete au format JSON de l'API."""
        return {
            "releaseName": self.release_name,
            "category": self.category,
            "entries": [entry.to_payload() for entry in self.entries],
        }
