"""
Objet valeur decrivant un torrent termine, tel que transmis par qBittorrent.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TorrentJob:
    """
    Arguments passes par qBittorrent a la fin d'un telechargement.

    Attributs:
        torrent_name: Nom du torrent (%N), utilise comme nom de release
        content_path: Chemin du contenu (%F), fichier ou repertoire
        category: Categorie qBittorrent (%L)
        info_hash: Info hash du torrent (%I)
    """

    torrent_name: str
    content_path: Path
    category: str = ""
    info_hash: str = ""

    def placeholders(self) -> dict[str, str]:
        """Valeurs des placeholders qBittorrent pour les commandes externes."""
        return {
            "%N": self.torrent_name,
            "%F": str(self.content_path),
            "%L": self.category,
            "%I": self.info_hash,
        }

    def environment(self) -> dict[str, str]:
        """Variables d'environnement QBT_* pour les commandes externes."""
        return {
            "QBT_TORRENT_NAME": self.torrent_name,
            "QBT_CONTENT_PATH": str(self.content_path),
            "QBT_CATEGORY": self.category,
            "QBT_INFO_HASH": self.info_hash,
        }
