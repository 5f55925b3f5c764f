"""
Client CrowdNFO pour l'envoi des MediaInfo, NFO et listes de fichiers.

Implemente l'interface IReleaseUploader. Utilise le mecanisme de retry
pour gerer le rate limiting.

Usage:
    client = CrowdNFOClient(api_key="your_key", base_url="https://crowdnfo.net/api/releases")
    await client.upload_file("Show.S01E01.1080p", UploadFileType.NFO, data, original_file_name="x.nfo")
    await client.upload_file_list(request)
    await client.close()
"""

from typing import Optional

import httpx
from loguru import logger

from crowdclient import __version__
from crowdclient.adapters.api.retry import request_with_retry
from crowdclient.core.exceptions import UploadError
from crowdclient.core.ports.api_clients import IReleaseUploader, UploadFileType, upload_file_name
from crowdclient.core.value_objects import FileListRequest

# Corps de reponse au-dela duquel on ne journalise que la taille
_MAX_LOGGED_BODY = 1000


def get_clean_version(version: str = __version__) -> str:
    """
    Nettoie une version pour le User-Agent.

    Retire le prefixe "v", les suffixes -dev / -dirty et le suffixe
    git describe ("v1.0.0-1-g1234567" -> "1.0.0").
    """
    clean = version.removesuffix("-dev").removesuffix("-dirty")
    clean = clean.split("-")[0]
    clean = clean.removeprefix("v")

    if clean in ("", "dev", "unknown"):
        return "1.0.0"
    return clean


def get_user_agent(version: str = __version__) -> str:
    return f"crowdclient-qBittorrent/{get_clean_version(version)}"


class CrowdNFOClient(IReleaseUploader):
    """
    Client API CrowdNFO.

    Implemente IReleaseUploader avec:
    - Envoi multipart des fichiers MediaInfo et NFO (/{release}/files)
    - Envoi JSON des listes de fichiers (/{release}/filelists)
    - Retry automatique sur rate limiting (429)
    - Detection des headers de mise a jour du client

    Les informations de mise a jour sont conservees sur l'instance,
    jamais dans un etat global.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://crowdnfo.net/api/releases",
        verify_ssl: bool = True,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client CrowdNFO.

        Args:
            api_key: Cle API CrowdNFO (header X-Api-Key)
            base_url: URL de base de l'API releases
            verify_ssl: Verifier les certificats TLS
            timeout: Timeout des requetes en secondes
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._verify_ssl = verify_ssl
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._update_available = False
        self._latest_version: Optional[str] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={
                    "X-Api-Key": self._api_key,
                    "User-Agent": get_user_agent(),
                },
                verify=self._verify_ssl,
                timeout=self._timeout,
            )
        return self._client

    @property
    def update_available(self) -> bool:
        return self._update_available

    @property
    def latest_version(self) -> Optional[str]:
        """Derniere version annoncee par l'API (None si aucune annonce)."""
        if not self._update_available:
            return None
        return self._latest_version or ""

    def _check_update_headers(self, response: httpx.Response) -> None:
        """Releve les headers X-Client-Update-Available et X-Latest-Version."""
        available = response.headers.get("X-Client-Update-Available", "")
        if available.lower() in ("true", "1"):
            self._update_available = True

        latest = response.headers.get("X-Latest-Version")
        if latest:
            self._latest_version = latest

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
        Envoie un fichier MediaInfo ou NFO (multipart/form-data).

        Raises:
            UploadError: Si la reponse n'est pas 200/201 ou en cas d'erreur reseau
        """
        url = f"{self._base_url}/{release_name}/files"

        form: dict[str, str] = {"FileType": file_type.value}
        if original_file_name:
            form["OriginalFileName"] = original_file_name
        if category:
            form["Category"] = category
        if file_hash:
            form["FileHash"] = file_hash

        file_name = upload_file_name(file_type, release_name, original_file_name)
        files = {"File": (file_name, data, "application/octet-stream")}

        try:
            response = await request_with_retry(
                self._get_client(), "POST", url, data=form, files=files
            )
        except httpx.HTTPError as e:
            raise UploadError(f"Erreur reseau : {e}") from e

        self._check_update_headers(response)

        body = response.text
        if len(body) < _MAX_LOGGED_BODY:
            logger.debug(f"Reponse CrowdNFO ({response.status_code}) : {body}")
        else:
            logger.debug(f"Reponse CrowdNFO ({response.status_code}) : {len(body)} octets")

        if response.status_code not in (200, 201):
            raise UploadError(
                f"upload failed with status {response.status_code}: {body}",
                status_code=response.status_code,
            )

    async def upload_file_list(self, request: FileListRequest) -> None:
        """
        Envoie la liste de fichiers d'une release (JSON).

        Raises:
            UploadError: 401 (cle API invalide), 400 (message de l'API) ou autre statut
        """
        url = f"{self._base_url}/{request.release_name}/filelists"

        try:
            response = await request_with_retry(
                self._get_client(), "POST", url, json=request.to_payload()
            )
        except httpx.HTTPError as e:
            raise UploadError(f"Erreur reseau : {e}") from e

        self._check_update_headers(response)

        if response.status_code in (200, 201):
            return

        if response.status_code == 401:
            raise UploadError(
                "unauthorized: please check your API key", status_code=401
            )
        if response.status_code == 400:
            raise UploadError(response.text, status_code=400)
        raise UploadError(
            f"file list upload failed with status {response.status_code}: {response.text}",
            status_code=response.status_code,
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
