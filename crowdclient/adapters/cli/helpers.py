"""
Utilitaires partages pour les commandes CLI de crowdclient.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- format_size : taille lisible pour l'affichage
"""

from contextlib import contextmanager

from loguru import logger as loguru_logger
from rich.console import Console

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("crowdclient")
    try:
        yield
    finally:
        loguru_logger.enable("crowdclient")


def format_size(size_bytes: int) -> str:
    """Formate une taille en octets en chaîne lisible."""
    if size_bytes >= 1_073_741_824:
        return f"{size_bytes / 1_073_741_824:.1f} Go"
    if size_bytes >= 1_048_576:
        return f"{size_bytes / 1_048_576:.0f} Mo"
    return f"{size_bytes / 1024:.0f} Ko"
