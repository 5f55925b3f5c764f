"""
Interface port pour l'extraction des metadonnees techniques.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class IMediaInfoExtractor(ABC):
    """
    Interface pour la generation du rapport MediaInfo d'un fichier.

    Le rapport est envoye tel quel a CrowdNFO : l'extracteur ne l'interprete pas.
    """

    @property
    @abstractmethod
    def available(self) -> bool:
        """True si la bibliotheque MediaInfo est utilisable."""
        ...

    @abstractmethod
    def extract_json(self, file_path: Path) -> Optional[bytes]:
        """
        Genere le rapport MediaInfo JSON d'un fichier.

        Args:
            file_path: Chemin complet vers le fichier media

        Retourne:
            Le JSON encode en UTF-8, ou None si l'extraction echoue
        """
        ...
