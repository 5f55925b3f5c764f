"""
Fonctions utilitaires partagées dans le projet CrowdClient.

Ce module centralise les fonctions de comparaison de noms de release :
- normalize_name : forme canonique pour comparer deux préfixes
- is_completely_lowercase : détection des noms obfusqués / auto-générés
- matches_pack_prefix : un nom d'épisode appartient-il au pack ?
- extract_episode_number : clé Exx d'un nom de fichier
- generate_episode_release_name : nom d'épisode synthétisé depuis le pack
"""

from crowdclient.utils.constants import (
    COMPLETE_MARKER_PATTERN,
    EPISODE_NUMBER_PATTERN,
    EPISODE_PREFIX_PATTERN,
    PACK_PREFIX_PATTERN,
    SEASON_PATTERN,
)


def normalize_name(text: str) -> str:
    """Minuscules, sans points ni espaces."""
    return text.lower().replace(".", "").replace(" ", "")


def is_completely_lowercase(text: str) -> bool:
    """
    Vérifie qu'une chaîne ne contient aucune majuscule ASCII.

    Les chiffres, points et tirets sont ignorés. Une chaîne sans aucune
    lettre n'est pas considérée comme en minuscules.
    """
    has_letter = False
    for char in text:
        if "A" <= char <= "Z":
            return False
        if "a" <= char <= "z":
            has_letter = True
    return has_letter


def matches_pack_prefix(name: str, pack_name: str) -> bool:
    """
    Compare le préfixe d'un nom d'épisode avec celui du season pack.

    Le préfixe du pack est ce qui précède Sxx, celui de l'épisode ce qui
    précède SxxExx. Les deux sont normalisés avant comparaison.

    Args:
        name: Nom de fichier (sans extension) ou de répertoire de l'épisode
        pack_name: Nom du season pack

    Returns:
        False si l'un des deux noms n'a pas de préfixe exploitable.
    """
    pack_match = PACK_PREFIX_PATTERN.search(pack_name)
    if not pack_match:
        return False

    episode_match = EPISODE_PREFIX_PATTERN.search(name)
    if not episode_match:
        return False

    return normalize_name(pack_match.group(1)) == normalize_name(episode_match.group(1))


def extract_episode_number(name: str) -> str:
    """
    Extrait la clé d'épisode (E01, E02...) d'un nom de fichier.

    Accepte SxxExx ou Exx seul, insensible à la casse.

    Returns:
        Clé en majuscules, ou chaîne vide si aucun numéro d'épisode.
    """
    match = EPISODE_NUMBER_PATTERN.search(name)
    if not match:
        return ""
    episode = match.group(1) or match.group(2)
    return episode.upper()


def generate_episode_release_name(pack_name: str, episode_key: str) -> str:
    """
    Construit le nom de release d'un épisode à partir du nom du pack.

    Retire les marqueurs COMPLETE/iNCOMPLETE puis remplace Sxx par SxxExx.

    Ex: "Show.S01.COMPLETE.1080p" + "E05" -> "Show.S01E05..1080p"
    """
    clean_name = COMPLETE_MARKER_PATTERN.sub("", pack_name).strip()

    def _add_episode(match) -> str:
        season_digits = match.group(0)[1:]
        return f"S{season_digits}{episode_key}"

    return SEASON_PATTERN.sub(_add_episode, clean_name)
