"""
Classification des releases dans les catégories CrowdNFO.

La catégorie qBittorrent est d'abord recherchée dans les correspondances
configurées, puis comparée aux noms de catégories CrowdNFO. À défaut, la
catégorie est devinée à partir du nom de la release.
"""

from typing import Mapping, Sequence

from loguru import logger

from crowdclient.utils.constants import CATEGORY_PATTERNS, VALID_CATEGORIES


def is_valid_category(category: str) -> bool:
    return category in VALID_CATEGORIES


def match_category_by_regex(release_name: str) -> str:
    """
    Devine la catégorie CrowdNFO à partir du nom de la release.

    Les motifs sont testés dans l'ordre de priorité (livres audio avant
    séries, séries avant films...).

    Returns:
        Catégorie trouvée, ou chaîne vide si aucun motif ne correspond
    """
    for pattern, category in CATEGORY_PATTERNS:
        if pattern.search(release_name):
            logger.info(f"Catégorie détectée par le nom -> '{category}'")
            return category

    logger.warning("Impossible de détecter la catégorie")
    return ""


def map_category(
    client_category: str,
    release_name: str,
    category_mappings: Mapping[str, Sequence[str]],
) -> str:
    """
    Traduit une catégorie qBittorrent en catégorie CrowdNFO.

    Args:
        client_category: Catégorie qBittorrent (%L)
        release_name: Nom de la release, utilisé en dernier recours
        category_mappings: Catégorie CrowdNFO -> catégories qBittorrent

    Returns:
        Catégorie CrowdNFO, ou chaîne vide si indéterminée
    """
    category = client_category.strip()

    if category in ("", "*"):
        return match_category_by_regex(release_name)

    for crowdnfo_category, client_categories in category_mappings.items():
        if not is_valid_category(crowdnfo_category):
            logger.warning(f"Catégorie CrowdNFO invalide dans la configuration : '{crowdnfo_category}'")
            continue
        if any(category.casefold() == c.casefold() for c in client_categories):
            logger.info(f"Catégorie associée via la configuration -> '{crowdnfo_category}'")
            return crowdnfo_category

    for valid_category in VALID_CATEGORIES:
        if category.casefold() == valid_category.casefold():
            logger.info(f"Catégorie associée via la table intégrée -> '{valid_category}'")
            return valid_category

    return match_category_by_regex(release_name)


def is_category_excluded(category: str, excluded_categories: Sequence[str]) -> bool:
    """Vérifie si la catégorie fait partie des catégories exclues (sans casse)."""
    return any(category.casefold() == excluded.casefold() for excluded in excluded_categories)
