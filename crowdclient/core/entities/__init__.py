"""
Business entities representing core domain concepts.

Exports:
- VideoFile: A candidate media file discovered by the path scanner
- EpisodeUnit: One decomposed episode of a season pack, ready for upload
"""

from crowdclient.core.entities.release import EpisodeUnit, VideoFile

__all__ = [
    "VideoFile",
    "EpisodeUnit",
]
