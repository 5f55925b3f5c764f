"""
Commandes CLI du post-traitement (process, inspect).

process est la commande appelée par qBittorrent en fin de téléchargement :
    crowdclient process "%N" "%F" "%L" "%I"
"""

import asyncio
from functools import wraps
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.table import Table

from crowdclient.adapters.cli.helpers import console, format_size, suppress_loguru
from crowdclient.container import Container
from crowdclient.core.exceptions import CrowdClientError
from crowdclient.core.value_objects import TorrentJob
from crowdclient.services.file_list import build_file_list
from crowdclient.services.layout import detect_season_pack
from crowdclient.services.post_processing import execute_post_processing
from crowdclient.services.season_pack import DecompositionResult


def with_container(func):
    """
    Decorateur qui injecte un container neuf en premier argument.

    Usage:
        @with_container
        async def my_command(container, ...):
            config = container.config()
    """

    @wraps(func)
    async def wrapper(*args, **kwargs):
        return await func(Container(), *args, **kwargs)

    return wrapper


def process(
    torrent_name: Annotated[str, typer.Argument(help="Nom du torrent (%N)")],
    content_path: Annotated[Path, typer.Argument(help="Chemin du contenu (%F)")],
    category: Annotated[str, typer.Argument(help="Catégorie qBittorrent (%L)")] = "",
    info_hash: Annotated[str, typer.Argument(help="Info hash (%I)")] = "",
) -> None:
    """Envoie vers CrowdNFO les informations d'un torrent terminé."""
    job = TorrentJob(
        torrent_name=torrent_name,
        content_path=content_path,
        category=category,
        info_hash=info_hash,
    )
    exit_code = asyncio.run(_process_async(job))
    if exit_code:
        raise typer.Exit(exit_code)


@with_container
async def _process_async(container, job: TorrentJob) -> int:
    """Implementation async de la commande process.

    Les commandes de post-traitement sont toujours lancées, même si
    l'envoi a échoué ou si la catégorie est exclue.
    """
    settings = container.config()
    client = container.crowdnfo_client()
    title_lookup = container.umlautadaptarr_client()
    exit_code = 0

    try:
        processor = container.release_processor()
        summary = await processor.process(job)
    except CrowdClientError as e:
        logger.error(f"Traitement CrowdNFO interrompu : {e}")
        exit_code = 1
    else:
        if summary.season_pack:
            logger.info(
                f"Season pack traité : {summary.successful_releases}/{len(summary.reports)} "
                f"épisodes envoyés, {summary.skipped_episodes} ignoré(s), "
                f"{summary.failed_episodes} en erreur"
            )
        elif not (summary.excluded or summary.title_lookup_failed):
            logger.info("Traitement CrowdNFO terminé")
    finally:
        await client.close()
        await title_lookup.close()

    latest = client.latest_version
    if latest is not None:
        logger.warning(f"Nouvelle version de crowdclient disponible : {latest or 'inconnue'}")

    execute_post_processing(
        settings.post_processing_global,
        settings.post_processing_categories,
        job,
    )
    return exit_code


def inspect(
    torrent_name: Annotated[str, typer.Argument(help="Nom du torrent ou du season pack")],
    content_path: Annotated[Path, typer.Argument(help="Chemin du contenu")],
    show_files: Annotated[
        bool,
        typer.Option("--files", "-f", help="Affiche la liste de fichiers de chaque épisode"),
    ] = False,
) -> None:
    """Affiche la décomposition d'un téléchargement sans rien envoyer."""
    container = Container()
    file_system = container.file_system()
    decomposer = container.season_pack_decomposer()

    try:
        with suppress_loguru():
            detection = detect_season_pack(torrent_name, content_path, file_system)
            result = None
            root_videos = 0
            if detection.is_pack:
                result = decomposer.decompose(content_path, torrent_name)
                if not result.single_release:
                    root_videos = file_system.count_video_files_in_directory(content_path)
    except CrowdClientError as e:
        console.print(f"[red]Erreur : {e}[/red]")
        raise typer.Exit(1)

    if result is None or result.single_release:
        try:
            _show_single_release(torrent_name, content_path, file_system)
        except CrowdClientError as e:
            console.print(f"[red]Erreur : {e}[/red]")
            raise typer.Exit(1)
        return

    console.print(f"[bold]Season pack ({detection.value}) :[/bold] {torrent_name}")
    console.print(f"Vidéos à la racine du pack : {root_videos}")
    console.print(_episodes_table(result))

    if show_files:
        for unit in result.episodes:
            console.print(f"\n[cyan]{unit.release_name}[/cyan]")
            try:
                entries = decomposer.file_list(unit, result)
            except (CrowdClientError, OSError) as e:
                console.print(f"  [red]Liste de fichiers impossible : {e}[/red]")
                continue
            for entry in entries:
                console.print(f"  {entry.file_path} [dim]({format_size(entry.file_size_bytes)})[/dim]")

    console.print(
        f"\n[bold]Total :[/bold] {len(result.episodes)} épisode(s), "
        f"{len(result.skipped)} ignoré(s), {len(result.failures)} en erreur"
    )
    for failure in result.failures:
        console.print(f"[red]{failure.video_file.name} : {failure.error}[/red]")


def _episodes_table(result: DecompositionResult) -> Table:
    """Cree la table Rich des episodes d'un pack."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Clé", style="cyan", no_wrap=True)
    table.add_column("Release")
    table.add_column("Vidéo", style="dim")
    table.add_column("NFO")

    for unit in result.episodes:
        table.add_row(
            unit.episode_key,
            unit.release_name,
            unit.video_file.name,
            unit.nfo_path.name if unit.nfo_path else "[yellow]-[/yellow]",
        )

    for video_file in result.skipped:
        table.add_row("[dim]-[/dim]", "[dim]ignoré[/dim]", video_file.name, "")

    return table


def _show_single_release(torrent_name: str, content_path: Path, file_system) -> None:
    """Affiche le fichier média, le NFO et le nombre de fichiers d'une release unique."""
    biggest = file_system.find_biggest_file(content_path) or file_system.find_first_audio_file(
        content_path
    )
    nfo = file_system.find_first_nfo(content_path)
    entries = build_file_list(content_path, file_system)

    console.print(f"[bold]Release unique :[/bold] {torrent_name}")
    console.print(f"Fichier média : {biggest.name if biggest else '-'}")
    console.print(f"NFO : {nfo.name if nfo else '-'}")
    console.print(f"Fichiers : {len(entries)}")
