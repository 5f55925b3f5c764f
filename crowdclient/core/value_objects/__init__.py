"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- FileCategory : Categorie d'un fichier selon son extension
- PackLayout : Disposition d'un episode dans un season pack
- PackDetection : Raison de la detection d'un season pack
- EpisodeIdentity : Cle d'episode et nom de release canonique
- FileListEntry : Entree d'une liste de fichiers (chemin relatif + taille)
- FileListRequest : Liste de fichiers complete envoyee a l'API
- TorrentJob : Arguments transmis par qBittorrent
"""

from crowdclient.core.value_objects.episode import (
    EpisodeIdentity,
    PackDetection,
    PackLayout,
)
from crowdclient.core.value_objects.file_list import (
    FileCategory,
    FileListEntry,
    FileListRequest,
)
from crowdclient.core.value_objects.torrent import TorrentJob

__all__ = [
    "FileCategory",
    "PackLayout",
    "PackDetection",
    "EpisodeIdentity",
    "FileListEntry",
    "FileListRequest",
    "TorrentJob",
]
