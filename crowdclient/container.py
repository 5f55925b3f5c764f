"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.crowdnfo_client import CrowdNFOClient
from .adapters.api.umlautadaptarr_client import UmlautAdaptarrClient
from .adapters.file_system import FileSystemAdapter
from .adapters.parsing.mediainfo_extractor import MediaInfoExtractor
from .config import Settings
from .services.episode_identity import EpisodeIdentityExtractor
from .services.nfo_resolver import NfoResolver
from .services.release_processor import ReleaseProcessor
from .services.season_pack import SeasonPackDecomposer


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        decomposer = container.season_pack_decomposer()
        processor = container.release_processor()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    media_info_extractor = providers.Singleton(MediaInfoExtractor)

    # Client API - singleton pour conserver la connexion HTTP et l'annonce de mise a jour
    crowdnfo_client = providers.Singleton(
        CrowdNFOClient,
        api_key=config.provided.api_key,
        base_url=config.provided.base_url,
        verify_ssl=config.provided.verify_ssl,
        timeout=config.provided.request_timeout,
    )
    umlautadaptarr_client = providers.Singleton(
        UmlautAdaptarrClient,
        base_url=config.provided.umlautadaptarr_base_url,
    )

    # Moteur de decomposition
    episode_identity_extractor = providers.Singleton(EpisodeIdentityExtractor)
    nfo_resolver = providers.Factory(NfoResolver, file_system=file_system)
    season_pack_decomposer = providers.Factory(
        SeasonPackDecomposer,
        file_system=file_system,
        extractor=episode_identity_extractor,
        nfo_resolver=nfo_resolver,
    )

    # Services
    release_processor = providers.Factory(
        ReleaseProcessor,
        settings=config,
        file_system=file_system,
        uploader=crowdnfo_client,
        media_info_extractor=media_info_extractor,
        decomposer=season_pack_decomposer,
        title_lookup=umlautadaptarr_client,
    )
