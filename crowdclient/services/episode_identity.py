"""
Extraction de l'identite d'un episode dans un season pack.

Pour chaque fichier video, une liste ordonnee de strategies est essayee :
1. SeasonEpisodeMatcher : motif SxxExx, cle "Exx"
2. IsoDateMatcher : date ISO yyyy-mm-dd, cle = la date

La premiere strategie qui reconnait le nom l'emporte. Si aucune ne le
reconnait, le fichier n'est pas un episode et il est ecarte.

Le nom analyse est le nom du fichier (sans extension) en disposition
repertoire partage, le nom du repertoire parent sinon.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from loguru import logger

from crowdclient.core.entities.release import VideoFile
from crowdclient.core.value_objects import EpisodeIdentity, PackLayout
from crowdclient.services.layout import classify_layout
from crowdclient.utils.constants import ISO_DATE_PATTERN, SEASON_EPISODE_PATTERN
from crowdclient.utils.helpers import (
    generate_episode_release_name,
    is_completely_lowercase,
    matches_pack_prefix,
)


class EpisodeMatcher(ABC):
    """Strategie d'extraction : retourne None si le nom n'est pas reconnu."""

    @abstractmethod
    def match(
        self,
        subject: str,
        layout: PackLayout,
        pack_name: str,
    ) -> Optional[EpisodeIdentity]:
        """
        Tente d'extraire une identite d'episode.

        Args:
            subject: Nom de fichier sans extension ou nom de repertoire
            layout: Disposition du fichier dans le pack
            pack_name: Nom du season pack

        Returns:
            EpisodeIdentity (eventuellement rejetee), ou None si pas de correspondance
        """
        ...


class SeasonEpisodeMatcher(EpisodeMatcher):
    """
    Reconnait les noms contenant SxxExx.

    Repertoire partage : le nom du fichier est garde s'il partage le prefixe
    du pack et n'est pas entierement en minuscules. Sinon (nom raccourci,
    different, ou tout en minuscules) le nom est synthetise depuis le pack.

    Sous-repertoire : le nom du repertoire est garde, sauf s'il partage le
    prefixe du pack ET est entierement en minuscules, auquel cas l'episode
    est rejete (nom considere comme obfusque).
    """

    def match(
        self,
        subject: str,
        layout: PackLayout,
        pack_name: str,
    ) -> Optional[EpisodeIdentity]:
        found = SEASON_EPISODE_PATTERN.search(subject)
        if not found:
            return None

        key = f"E{found.group(2)}"

        if layout == PackLayout.SHARED_DIRECTORY:
            if matches_pack_prefix(subject, pack_name) and not is_completely_lowercase(subject):
                return EpisodeIdentity(key=key, release_name=subject, layout=layout)
            return EpisodeIdentity(
                key=key,
                release_name=generate_episode_release_name(pack_name, key),
                layout=layout,
                source_name_kept=False,
            )

        if matches_pack_prefix(subject, pack_name) and is_completely_lowercase(subject):
            logger.warning(f"Nom de release en minuscules rejete : {subject}")
            return EpisodeIdentity.rejected(layout)

        return EpisodeIdentity(key=key, release_name=subject, layout=layout)


class IsoDateMatcher(EpisodeMatcher):
    """Reconnait les episodes quotidiens dates (yyyy-mm-dd), nom garde tel quel."""

    def match(
        self,
        subject: str,
        layout: PackLayout,
        pack_name: str,
    ) -> Optional[EpisodeIdentity]:
        found = ISO_DATE_PATTERN.search(subject)
        if not found:
            return None
        return EpisodeIdentity(key=found.group(1), release_name=subject, layout=layout)


DEFAULT_MATCHERS: tuple[EpisodeMatcher, ...] = (
    SeasonEpisodeMatcher(),
    IsoDateMatcher(),
)


class EpisodeIdentityExtractor:
    """
    Applique les strategies d'extraction dans l'ordre.

    Sans etat : une meme instance peut servir pour tous les packs.
    """

    def __init__(self, matchers: Sequence[EpisodeMatcher] = DEFAULT_MATCHERS) -> None:
        self._matchers = tuple(matchers)

    def extract(self, video_file: VideoFile, pack_name: str) -> Optional[EpisodeIdentity]:
        """
        Extrait l'identite d'episode d'un fichier video.

        Args:
            video_file: Fichier video du pack
            pack_name: Nom du season pack

        Returns:
            - EpisodeIdentity valide si un motif est reconnu
            - EpisodeIdentity rejetee (release_name vide) si le nom est juge obfusque
            - None si aucun motif ne correspond
        """
        layout = classify_layout(video_file, pack_name)
        if layout == PackLayout.SHARED_DIRECTORY:
            subject = video_file.stem
        else:
            subject = video_file.directory.name

        for matcher in self._matchers:
            identity = matcher.match(subject, layout, pack_name)
            if identity is not None:
                return identity

        logger.info(f"Aucun motif d'episode reconnu, fichier ignore : {video_file.name}")
        return None
