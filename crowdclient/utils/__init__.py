"""
Utilitaires et constantes pour CrowdClient.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from crowdclient.utils.constants import (
    AUDIO_EXTENSIONS,
    HASH_ONLY_EXTENSIONS,
    MEDIAINFO_EXTENSIONS,
    MIN_PACK_VIDEO_FILES,
    VALID_CATEGORIES,
    VIDEO_EXTENSIONS,
)

__all__ = [
    "AUDIO_EXTENSIONS",
    "HASH_ONLY_EXTENSIONS",
    "MEDIAINFO_EXTENSIONS",
    "MIN_PACK_VIDEO_FILES",
    "VALID_CATEGORIES",
    "VIDEO_EXTENSIONS",
]
