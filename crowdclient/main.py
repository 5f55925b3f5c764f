"""
Point d'entrée CLI de crowdclient.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import inspect, process
from .config import Settings
from .container import Container
from .logging_config import configure_logging, console_level

app = typer.Typer(
    name="crowdclient",
    help="Post-traitement qBittorrent pour CrowdNFO",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """crowdclient - Envoi des NFO, MediaInfo et listes de fichiers vers CrowdNFO."""
    if quiet:
        state["quiet"] = True
    else:
        state["verbose"] = verbose

    settings = get_config()
    configure_logging(
        log_level=console_level(state["verbose"], state["quiet"], settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Monter les commandes depuis commands.py
app.command()(process)
app.command()(inspect)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration crowdclient")
    typer.echo(f"API CrowdNFO : {config.base_url}")
    typer.echo(f"Clé API : {'configurée' if config.api_enabled else 'non configurée'}")
    typer.echo(f"Vérification SSL : {'activée' if config.verify_ssl else 'désactivée'}")
    umlaut = config.umlautadaptarr_base_url if config.umlautadaptarr_enabled else "désactivé"
    typer.echo(f"UmlautAdaptarr : {umlaut}")
    typer.echo(f"MediaInfo : {'activé' if config.mediainfo_enabled else 'désactivé'}")
    typer.echo(f"Limite de hash : {config.max_hash_file_size or 'aucune'}")
    typer.echo(f"Archive : {config.archive_dir}")
    excluded = ", ".join(config.excluded_categories) or "aucune"
    typer.echo(f"Catégories exclues : {excluded}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"crowdclient v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    logger.debug("Démarrage de crowdclient", version=__version__)
    app()


if __name__ == "__main__":
    main()
