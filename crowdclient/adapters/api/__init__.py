"""
Clients API CrowdNFO et UmlautAdaptarr.

Ce module fournit l'adaptateur d'envoi vers CrowdNFO:
- CrowdNFOClient: envoi des MediaInfo, NFO et listes de fichiers
- UmlautAdaptarrClient: titre d'origine d'une release renommee

Infrastructure partagee:
- with_retry: Decorateur avec backoff exponentiel pour gerer le rate limiting
- request_with_retry: Requete httpx relancee sur 429

Les clients implementent IReleaseUploader et ITitleLookup definis dans core/ports/api_clients.py.
"""

from crowdclient.adapters.api.crowdnfo_client import CrowdNFOClient
from crowdclient.adapters.api.retry import request_with_retry, with_retry
from crowdclient.adapters.api.umlautadaptarr_client import UmlautAdaptarrClient

__all__ = [
    "CrowdNFOClient",
    "UmlautAdaptarrClient",
    "request_with_retry",
    "with_retry",
]
