"""
Objets valeur pour l'identification des episodes d'un season pack.
"""

from dataclasses import dataclass
from enum import Enum


class PackLayout(Enum):
    """Disposition d'un fichier video dans un season pack.

    Valeurs:
        SHARED_DIRECTORY: Tous les episodes sont dans le repertoire du pack
        EPISODE_SUBDIRECTORY: Chaque episode a son propre sous-repertoire
    """

    SHARED_DIRECTORY = "shared_directory"
    EPISODE_SUBDIRECTORY = "episode_subdirectory"


class PackDetection(Enum):
    """Raison pour laquelle une release est traitee comme season pack."""

    NONE = "none"
    NAME_PATTERN = "name_pattern"
    FILE_COUNT = "file_count"

    @property
    def is_pack(self) -> bool:
        return self is not PackDetection.NONE


@dataclass(frozen=True)
class EpisodeIdentity:
    """
    Identite d'un episode extraite d'un nom de fichier ou de repertoire.

    Attributs:
        key: Cle normalisee ("E01", "E12") ou date ISO ("2024-03-15")
        release_name: Nom de release canonique de l'episode
        layout: Disposition utilisee pour l'extraction
        source_name_kept: True si le nom du fichier/repertoire a ete garde tel quel
                          (False quand le nom a ete synthetise depuis le pack)
    """

    key: str
    release_name: str
    layout: PackLayout
    source_name_kept: bool = True

    @classmethod
    def rejected(cls, layout: PackLayout) -> "EpisodeIdentity":
        """Identite vide : le candidat ne doit pas etre envoye."""
        return cls(key="", release_name="", layout=layout, source_name_kept=False)

    @property
    def is_valid(self) -> bool:
        return bool(self.release_name)

    @property
    def is_date_key(self) -> bool:
        """True pour une cle date ISO (episodes quotidiens)."""
        return not self.key.upper().startswith("E")
