"""
Implementation de l'extracteur MediaInfo avec pymediainfo.

Ce module fournit MediaInfoExtractor qui implemente IMediaInfoExtractor
pour generer le rapport MediaInfo JSON complet d'un fichier media.
Le rapport est envoye tel quel a CrowdNFO.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from pymediainfo import MediaInfo as PyMediaInfo

from crowdclient.core.ports.parser import IMediaInfoExtractor


class MediaInfoExtractor(IMediaInfoExtractor):
    """
    Extracteur MediaInfo utilisant pymediainfo (libmediainfo).

    La disponibilite de la bibliotheque est verifiee une seule fois.
    """

    def __init__(self, library_file: Optional[str] = None) -> None:
        """
        Args:
            library_file: Chemin explicite vers libmediainfo (optionnel)
        """
        self._library_file = library_file
        self._available: Optional[bool] = None

    @property
    def available(self) -> bool:
        if self._available is None:
            try:
                self._available = PyMediaInfo.can_parse(self._library_file)
            except Exception as e:
                logger.debug("libmediainfo introuvable", error=str(e))
                self._available = False
            if not self._available:
                logger.info("MediaInfo non disponible - certaines fonctionnalites seront limitees")
        return self._available

    def extract_json(self, file_path: Path) -> Optional[bytes]:
        """
        Genere le rapport MediaInfo JSON d'un fichier.

        Args:
            file_path: Chemin complet vers le fichier media

        Returns:
            JSON encode en UTF-8, ou None si MediaInfo est indisponible
            ou si l'extraction echoue
        """
        if not self.available or not file_path.exists():
            return None

        try:
            output = PyMediaInfo.parse(
                str(file_path),
                library_file=self._library_file,
                output="JSON",
            )
        except Exception as e:
            logger.warning(f"Echec de generation MediaInfo pour {file_path.name} : {e}")
            return None

        if not output:
            return None
        return output.encode("utf-8")
