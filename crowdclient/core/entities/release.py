"""
Entités release.

Entités représentant les fichiers vidéo d'un téléchargement et les épisodes
issus de la décomposition d'un season pack.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class VideoFile:
    """
    Identité d'un fichier vidéo candidat.

    Immuable une fois découvert par le scanner.

    Attributs :
        path : Chemin absolu du fichier
        directory : Répertoire contenant le fichier
        name : Nom de fichier avec extension
    """

    path: Path
    directory: Path
    name: str

    @classmethod
    def from_path(cls, path: Path) -> "VideoFile":
        """Construit un VideoFile à partir de son chemin."""
        return cls(path=path, directory=path.parent, name=path.name)

    @property
    def stem(self) -> str:
        """Nom de fichier sans extension."""
        return Path(self.name).stem


@dataclass(frozen=True)
class EpisodeUnit:
    """
    Un épisode issu de la décomposition d'un season pack.

    Créé une seule fois par fichier vidéo qualifié, consommé immédiatement
    par l'upload puis abandonné.

    Attributs :
        video_file : Fichier vidéo de l'épisode
        episode_key : Clé normalisée ("E01", "E12" ou "2024-03-15")
        release_name : Identité externe (clé d'upload, nom du dossier d'archive).
                       Vide = candidat rejeté, ne pas envoyer.
        nfo_path : NFO associé à l'épisode (spécifique ou général du pack)
    """

    video_file: VideoFile
    episode_key: str
    release_name: str
    nfo_path: Optional[Path] = None

    @property
    def is_processable(self) -> bool:
        """Un épisode sans nom de release ne doit pas être envoyé."""
        return bool(self.release_name)
