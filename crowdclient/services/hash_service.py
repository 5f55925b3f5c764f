"""
Service de calcul du hash SHA-256 des fichiers media.

CrowdNFO identifie un fichier par le SHA-256 de son contenu complet.
Pour les tres gros fichiers, le calcul peut etre limite par la
configuration max_hash_file_size :
    ""      : pas de limite, toujours calculer
    "0"     : ne jamais calculer
    "800MB" : limite en megaoctets
    "24GB"  : limite en gigaoctets
    "5.5"   : sans unite, interprete en gigaoctets
"""

import hashlib
from pathlib import Path

from loguru import logger

from crowdclient.core.exceptions import ConfigurationError

# Taille du chunk de lecture (10 MB)
HASH_CHUNK_SIZE = 10 * 1024 * 1024

_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


def calculate_sha256(file_path: Path, chunk_size: int = HASH_CHUNK_SIZE) -> str:
    """
    Calcule le SHA-256 du contenu complet d'un fichier.

    Raises :
        OSError : Si le fichier n'est pas lisible
    """
    hasher = hashlib.sha256()
    with open(file_path, "rb") as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)
    return hasher.hexdigest()


def parse_size_with_unit(size: str) -> int:
    """
    Convertit "24GB", "800MB" ou "5.5" (Go par defaut) en octets.

    Raises :
        ConfigurationError : Si le nombre est invalide
    """
    text = size.strip().upper()
    multiplier = _GB

    if text.endswith("MB"):
        text, multiplier = text[:-2], _MB
    elif text.endswith("GB"):
        text = text[:-2]

    try:
        value = float(text)
    except ValueError as e:
        raise ConfigurationError(f"Taille invalide : {size!r}") from e

    return int(value * multiplier)


def should_calculate_hash(file_path: Path, max_hash_file_size: str) -> bool:
    """
    Decide si le hash d'un fichier doit etre calcule.

    Une limite mal formee est ignoree (hash calcule).

    Raises :
        OSError : Si la taille du fichier ne peut pas etre lue
    """
    if max_hash_file_size == "":
        return True
    if max_hash_file_size == "0":
        return False

    try:
        max_bytes = parse_size_with_unit(max_hash_file_size)
    except ConfigurationError:
        logger.warning(f"Format max_hash_file_size invalide : {max_hash_file_size}, limite ignoree")
        return True

    file_size = file_path.stat().st_size
    if file_size > max_bytes:
        logger.info(
            f"Calcul du hash ignore ({file_size / _GB:.2f} GB > {max_bytes / _GB:.2f} GB)"
        )
        return False

    return True
