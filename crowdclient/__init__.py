"""
CrowdClient - Post-traitement qBittorrent pour l'API CrowdNFO.

Ce package identifie le contenu d'un téléchargement terminé et envoie
les NFO, MediaInfo et listes de fichiers vers le catalogue CrowdNFO.
Les season packs sont décomposés en épisodes individuels.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- services/ : Couche application (décomposition, catégories, upload)
- adapters/ : Couche infrastructure (CLI, système de fichiers, client API)
"""

__version__ = "0.9.0"
