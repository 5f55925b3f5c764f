"""
Adaptateurs de parsing pour CrowdClient.

Ce package contient les implementations concretes des interfaces d'extraction:
- MediaInfoExtractor: Genere le rapport MediaInfo JSON avec pymediainfo
"""
