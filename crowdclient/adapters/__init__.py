"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- api/ : Client API CrowdNFO (httpx + tenacity)
- parsing/ : Extraction MediaInfo (pymediainfo)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from crowdclient.adapters.file_system import FileSystemAdapter
from crowdclient.adapters.parsing.mediainfo_extractor import MediaInfoExtractor

__all__ = [
    "FileSystemAdapter",
    "MediaInfoExtractor",
]
