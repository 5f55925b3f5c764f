"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports système de fichiers :
- IFileSystem : Parcours et classification des fichiers d'un téléchargement

Ports d'extraction :
- IMediaInfoExtractor : Génération du JSON MediaInfo d'un fichier

Ports client API :
- IReleaseUploader : Envoi des fichiers et listes de fichiers vers CrowdNFO
- ITitleLookup : Titre d'origine d'une release renommée par UmlautAdaptarr
"""

from crowdclient.core.ports.api_clients import (
    IReleaseUploader,
    ITitleLookup,
    UploadFileType,
    upload_file_name,
)
from crowdclient.core.ports.file_system import IFileSystem
from crowdclient.core.ports.parser import IMediaInfoExtractor

__all__ = [
    # Système de fichiers
    "IFileSystem",
    # Extraction
    "IMediaInfoExtractor",
    # Client API
    "IReleaseUploader",
    "ITitleLookup",
    "UploadFileType",
    "upload_file_name",
]
