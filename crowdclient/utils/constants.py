"""
Constantes globales pour CrowdClient.

Ce module contient les tables statiques utilisees dans l'application:
- Extensions media (video et audio), audio seules, images disque, NFO
- Expressions regulieres de detection des season packs et des episodes
- Categories CrowdNFO valides et patterns de detection de categorie
"""

import re

# Extensions pour lesquelles un rapport MediaInfo est genere (video + audio)
MEDIAINFO_EXTENSIONS = frozenset({
    ".mkv", ".mp4", ".avi", ".mov", ".wmv", ".flv", ".mpeg", ".mpg", ".webm",
    ".m4v", ".divx", ".xvid",
    ".mp3", ".aac", ".flac", ".wav", ".ogg", ".opus", ".m4a", ".mka", ".wma",
    ".alac", ".dts", ".dtshd", ".ac3", ".eac3", ".ec3", ".m4b",
})

# Extensions audio (exclues des recherches de fichiers video)
AUDIO_EXTENSIONS = frozenset({
    ".mp3", ".aac", ".flac", ".wav", ".ogg", ".opus", ".m4a", ".mka", ".wma",
    ".alac", ".dts", ".dtshd", ".ac3", ".eac3", ".ec3", ".m4b",
})

VIDEO_EXTENSIONS = MEDIAINFO_EXTENSIONS - AUDIO_EXTENSIONS

# Images disque : hash uniquement, jamais de MediaInfo
HASH_ONLY_EXTENSIONS = frozenset({".iso", ".img"})

NFO_EXTENSION = ".nfo"

# Nombre de fichiers video a partir duquel une release est un season pack
MIN_PACK_VIDEO_FILES = 3

# Motifs de noms de release : chiffres et limites de mots ASCII uniquement (re.ASCII)

# Saison seule (S01) - un S01E05 designe un episode, pas un pack
SEASON_PATTERN = re.compile(r"\bS\d{2,4}\b", re.IGNORECASE | re.ASCII)
SINGLE_EPISODE_PATTERN = re.compile(r"\bS\d{2,4}E\d{2,4}\b", re.IGNORECASE | re.ASCII)
# Saisons numerotees par annee (S2024) - toujours un pack
YEAR_SEASON_PATTERN = re.compile(r"\bS(20\d{2})\b", re.IGNORECASE | re.ASCII)

SEASON_EPISODE_PATTERN = re.compile(r"S(\d{2,4})E(\d{2,4})", re.IGNORECASE | re.ASCII)
ISO_DATE_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})", re.ASCII)
# SxxExx ou Exx seul, pour rattacher les fichiers annexes a un episode
EPISODE_NUMBER_PATTERN = re.compile(r"S\d{2,4}(E\d{2,4})|(E\d{2,4})", re.IGNORECASE | re.ASCII)
# NFO specifique a un episode (nom deja en minuscules)
EPISODE_NFO_PATTERN = re.compile(r"s\d{2,4}e\d{2,4}", re.ASCII)

# Prefixe avant le marqueur de saison/episode
PACK_PREFIX_PATTERN = re.compile(r"^(.+?)\.?S\d{2,4}", re.IGNORECASE | re.ASCII)
EPISODE_PREFIX_PATTERN = re.compile(r"^(.+?)\.?S\d{2,4}E\d{2,4}", re.IGNORECASE | re.ASCII)

COMPLETE_MARKER_PATTERN = re.compile(r"\b(COMPLETE|iNCOMPLETE)\b", re.IGNORECASE | re.ASCII)

# Numero de piste 1 (1, 01, 001)
FIRST_TRACK_PATTERN = re.compile(r"\b0*1\b", re.ASCII)

# Categories acceptees par CrowdNFO
VALID_CATEGORIES = (
    "Movies",
    "TV",
    "Games",
    "Software",
    "Music",
    "Audiobooks",
    "Books",
    "Other",
)

# Detection de categorie par le nom de release, dans l'ordre de priorite
CATEGORY_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\b(audiobook|abook|abookde|hörbuch|hoerbuch|horbuch|m4b)\b", re.IGNORECASE), "Audiobooks"),
    (re.compile(r"\b(ebook|epaper|pdf|epub|mobi)\b", re.IGNORECASE), "Books"),
    (re.compile(
        r"\b((s\d{1,4}e\d{1,4})|(s\d{1,4})|(e\d{1,4})|season|staffel|episode|folge|(\d{4}-\d{2}-\d{2}))\b",
        re.IGNORECASE,
    ), "TV"),
    (re.compile(r"\b(elamigos|gog|xbox|xbox360|x360|ps\d|nintendo|nsw|amiga|atari|wii[u]?)\b", re.IGNORECASE), "Games"),
    (re.compile(r"\b(patch|crack|cracked|keygen|keymaker|keyfilemaker|x64|dvt|btcr|macos)\b", re.IGNORECASE), "Software"),
    (re.compile(
        r"\b((\d{3,4}[pi])|bluray|dvdrip|webrip|hdtv|bdrip|dvd|remux|mpeg[-]?2|vc[-]?1|avc|hevc|([xh][. ]?26[456]))\b",
        re.IGNORECASE,
    ), "Movies"),
    (re.compile(r"\b(mp3|flac|webflac|aac|wav|album|artist|discography|single|vinyl|cd|\d+bit|\d+khz)\b", re.IGNORECASE), "Music"),
)
