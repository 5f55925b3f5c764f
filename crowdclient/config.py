"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CROWDCLIENT_,
et peut optionnellement être fournie via un fichier .env.

La clé API CrowdNFO est obligatoire pour la commande process, mais pas pour inspect.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crowdclient.core.exceptions import ConfigurationError

# Trouver le fichier .env à la racine du projet (parent de crowdclient/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Valeur laissée dans un fichier de configuration jamais édité
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"

DEFAULT_CATEGORY_MAPPINGS: dict[str, list[str]] = {
    "Movies": ["movies", "movie", "radarr", "film"],
    "TV": ["tv", "television", "sonarr", "series", "shows", "serien", "anime"],
    "Games": ["games", "gaming", "pc-games"],
    "Software": ["software", "apps", "programs"],
    "Music": ["music", "audio", "mp3", "flac"],
    "Audiobooks": ["audiobooks", "hoerbuch", "abook"],
    "Books": ["books", "ebooks", "epub"],
    "Other": ["other", "misc"],
}


class PostProcessCommand(BaseModel):
    """Commande externe lancée après le traitement d'un torrent."""

    command: str = ""
    arguments: list[str] = Field(default_factory=list)
    enabled: bool = False


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CROWDCLIENT_.
    Exemple : CROWDCLIENT_LOG_LEVEL=DEBUG

    Les dictionnaires et listes se passent en JSON :
    CROWDCLIENT_EXCLUDED_CATEGORIES='["xxx", "private"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="CROWDCLIENT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API CrowdNFO
    api_key: Optional[str] = Field(default=None)
    base_url: str = Field(default="https://crowdnfo.net/api/releases")
    verify_ssl: bool = Field(default=True)
    request_timeout: float = Field(default=30.0, gt=0)

    # UmlautAdaptarr : titre d'origine des releases renommées
    umlautadaptarr_enabled: bool = Field(default=False)
    umlautadaptarr_base_url: str = Field(default="http://localhost:5005")

    # Traitement
    # "" = pas de limite, "0" = jamais de hash, sinon "5GB" / "800MB" / "5.5" (Go)
    max_hash_file_size: str = Field(default="")
    mediainfo_enabled: bool = Field(default=True)
    archive_dir: Path = Field(default=Path("archive"))

    # Catégories
    category_mappings: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_CATEGORY_MAPPINGS.items()}
    )
    excluded_categories: list[str] = Field(default_factory=list)

    # Post-traitement
    post_processing_global: PostProcessCommand = Field(default_factory=PostProcessCommand)
    post_processing_categories: dict[str, PostProcessCommand] = Field(default_factory=dict)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/crowdclient.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("archive_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("base_url", "umlautadaptarr_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Retire le slash final pour construire les URLs par concaténation."""
        return v.rstrip("/")

    @property
    def api_enabled(self) -> bool:
        """Vérifie si une vraie clé API est configurée."""
        return bool(self.api_key) and self.api_key != API_KEY_PLACEHOLDER

    def require_api_key(self) -> str:
        """
        Retourne la clé API ou lève une erreur si elle n'est pas configurée.

        Raises:
            ConfigurationError: Clé absente ou encore égale au placeholder
        """
        if not self.api_enabled:
            raise ConfigurationError(
                "Clé API CrowdNFO manquante : définir CROWDCLIENT_API_KEY"
            )
        return self.api_key  # type: ignore[return-value]
