"""
Execution des commandes de post-traitement configurees.

Apres chaque torrent (meme si sa categorie est exclue ou si l'envoi a
echoue), la commande globale puis la premiere commande de categorie
correspondante sont lancees. Les placeholders qBittorrent (%N, %F, %L, %I)
sont remplaces dans les arguments et les variables QBT_* sont ajoutees
a l'environnement.

Une commande en echec est journalisee, jamais propagee.
"""

import os
import subprocess
from pathlib import Path
from typing import Mapping, Optional

from loguru import logger

from crowdclient.config import PostProcessCommand
from crowdclient.core.value_objects import TorrentJob


def substitute_placeholders(argument: str, job: TorrentJob) -> str:
    for placeholder, value in job.placeholders().items():
        argument = argument.replace(placeholder, value)
    return argument


def run_post_process_command(
    label: str,
    command: PostProcessCommand,
    job: TorrentJob,
    cwd: Optional[Path] = None,
) -> bool:
    """
    Lance une commande de post-traitement.

    Args:
        label: Libelle pour les logs ("global", "categorie 'tv'")
        command: Commande configuree
        job: Torrent traite
        cwd: Repertoire de travail (defaut: repertoire courant)

    Returns:
        True si la commande s'est terminee avec le code 0
    """
    if not command.command:
        return False

    logger.info(f"Post-traitement {label} : {command.command}")

    args = [command.command] + [substitute_placeholders(arg, job) for arg in command.arguments]
    env = {**os.environ, **job.environment()}

    try:
        completed = subprocess.run(
            args,
            cwd=cwd,
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as e:
        logger.error(f"Commande de post-traitement introuvable : {e}")
        return False

    output = completed.stdout.strip() if completed.stdout else ""
    if completed.returncode != 0:
        logger.error(f"Commande de post-traitement en echec (code {completed.returncode})")
        if output:
            logger.error(f"   Sortie : {output}")
        return False

    logger.info("Commande de post-traitement terminee")
    if output:
        logger.info(f"   Sortie : {output}")
    return True


def execute_post_processing(
    global_command: PostProcessCommand,
    category_commands: Mapping[str, PostProcessCommand],
    job: TorrentJob,
    cwd: Optional[Path] = None,
) -> None:
    """
    Lance la commande globale puis la commande de la categorie du torrent.

    La categorie est cherchee telle quelle puis en minuscules ; seule la
    premiere commande active trouvee est lancee.
    """
    if global_command.enabled:
        run_post_process_command("global", global_command, job, cwd)

    for key in (job.category, job.category.lower()):
        command = category_commands.get(key)
        if command is not None and command.enabled:
            run_post_process_command(f"categorie '{key}'", command, job, cwd)
            return
