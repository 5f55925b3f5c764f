"""
Client UmlautAdaptarr pour retrouver le titre d'origine d'une release.

UmlautAdaptarr reecrit les titres allemands (umlauts) avant que Sonarr/Radarr
ne les telechargent. L'endpoint /titlelookup donne le titre publie d'origine.

Usage:
    client = UmlautAdaptarrClient(base_url="http://localhost:5005")
    original = await client.lookup_original_title("Der.Baer.S01E01.German.1080p")
    await client.close()
"""

from typing import Optional

import httpx
from loguru import logger

from crowdclient.core.exceptions import TitleLookupError
from crowdclient.core.ports.api_clients import ITitleLookup

DEFAULT_UMLAUTADAPTARR_URL = "http://localhost:5005"


class UmlautAdaptarrClient(ITitleLookup):
    """
    Client API UmlautAdaptarr.

    Un 404 signifie que le titre n'a pas ete modifie. Toute autre reponse
    que 200, une erreur reseau ou un JSON invalide leve TitleLookupError.
    """

    def __init__(self, base_url: str = DEFAULT_UMLAUTADAPTARR_URL, timeout: float = 10.0) -> None:
        self._base_url = (base_url or DEFAULT_UMLAUTADAPTARR_URL).rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def lookup_original_title(self, release_name: str) -> Optional[str]:
        """
        Interroge /titlelookup?changedTitle=<release_name>.

        Returns:
            Le titre d'origine, ou None si le nom n'a pas ete modifie

        Raises:
            TitleLookupError: Service injoignable, statut inattendu ou reponse illisible
        """
        url = f"{self._base_url}/titlelookup"

        try:
            response = await self._get_client().get(url, params={"changedTitle": release_name})
        except httpx.HTTPError as e:
            raise TitleLookupError(
                f"Connexion a UmlautAdaptarr impossible ({self._base_url}) : {e}"
            ) from e

        if response.status_code == 404:
            logger.debug(f"Titre non modifie par UmlautAdaptarr : {release_name}")
            return None

        if response.status_code != 200:
            raise TitleLookupError(
                f"Erreur API UmlautAdaptarr (statut {response.status_code}) : {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TitleLookupError(f"Reponse UmlautAdaptarr illisible : {e}") from e

        original = data.get("originalTitle") if isinstance(data, dict) else None
        return original or None

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
