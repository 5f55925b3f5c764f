"""
Interfaces ports pour le client API CrowdNFO.

Interface abstraite définissant l'envoi des fichiers d'une release
(MediaInfo, NFO) et de sa liste de fichiers.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from crowdclient.core.value_objects import FileListRequest


class UploadFileType(str, Enum):
    """Type de fichier attendu par l'endpoint /files."""

    MEDIAINFO = "MediaInfo"
    NFO = "NFO"


def upload_file_name(file_type: UploadFileType, release_name: str, original_file_name: str = "") -> str:
    """
    Nom du fichier envoyé (et archivé) pour un type donné.

    Un NFO garde son nom d'origine, un MediaInfo devient <release>.json.
    """
    if file_type == UploadFileType.NFO and original_file_name:
        return original_file_name
    return f"{release_name}.json"


class IReleaseUploader(ABC):
    """
    Interface pour l'envoi des données d'une release vers CrowdNFO.

    Chaque méthode lève UploadError en cas d'échec ; c'est à l'appelant
    de décider si l'échec est fatal.
    """

    @abstractmethod
    async def upload_file(
        self,
        release_name: str,
        file_type: UploadFileType,
        data: bytes,
        category: str = "",
        file_hash: str = "",
        original_file_name: str = "",
    ) -> None:
        """
        Envoie un fichier MediaInfo ou NFO pour une release.

        Args :
            release_name : Nom de la release (clé de l'URL)
            file_type : MediaInfo ou NFO
            data : Contenu du fichier
            category : Catégorie CrowdNFO (optionnelle)
            file_hash : SHA-256 du fichier média (optionnel)
            original_file_name : Nom d'origine du NFO

        Raises :
            UploadError : Si l'API refuse l'envoi
        """
        ...

    @abstractmethod
    async def upload_file_list(self, request: FileListRequest) -> None:
        """
        Envoie la liste de fichiers d'une release.

        Raises :
            UploadError : Si l'API refuse l'envoi
        """
        ...

    @property
    @abstractmethod
    def latest_version(self) -> Optional[str]:
        """Dernière version annoncée par l'API, si une mise à jour existe."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Ferme le client HTTP sous-jacent."""
        ...


class ITitleLookup(ABC):
    """
    Interface pour retrouver le titre d'origine d'une release renommée.

    UmlautAdaptarr remplace les umlauts des titres allemands ; l'upload
    doit se faire sous le nom publié d'origine.
    """

    @abstractmethod
    async def lookup_original_title(self, release_name: str) -> Optional[str]:
        """
        Retourne le titre d'origine, ou None si le nom n'a pas été modifié.

        Raises :
            TitleLookupError : Si le service est injoignable ou répond en erreur
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Ferme le client HTTP sous-jacent."""
        ...
