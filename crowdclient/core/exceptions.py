"""
Exceptions du domaine CrowdClient.

Hiérarchie :
- CrowdClientError : base de toutes les erreurs de l'application
  - ScanError : répertoire racine absent ou illisible (fatal pour le traitement)
  - ConfigurationError : configuration invalide ou incomplète
  - UploadError : échec d'un envoi vers l'API CrowdNFO
    - RateLimitError : l'API a répondu 429 Too Many Requests
  - TitleLookupError : la recherche du titre d'origine (UmlautAdaptarr) a échoué
"""

from pathlib import Path
from typing import Optional


class CrowdClientError(Exception):
    """Erreur de base de l'application."""


class ScanError(CrowdClientError):
    """
    Le répertoire racine d'un scan est absent ou illisible.

    Attributes:
        path: Répertoire qui n'a pas pu être parcouru
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Impossible de parcourir {path} : {reason}")


class ConfigurationError(CrowdClientError):
    """Configuration invalide (clé API absente, taille mal formée...)."""


class UploadError(CrowdClientError):
    """
    Echec d'un envoi vers l'API CrowdNFO.

    Attributes:
        status_code: Code HTTP retourné, ou None pour une erreur réseau
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(UploadError):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s", status_code=429)


class TitleLookupError(CrowdClientError):
    """UmlautAdaptarr injoignable ou réponse inexploitable."""
