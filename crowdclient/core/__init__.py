"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Entités métier (VideoFile, EpisodeUnit)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (EpisodeIdentity, FileListEntry, ...)
"""
