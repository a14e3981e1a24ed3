"""Application settings using Pydantic Settings."""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def find_and_load_env_file():
    """Find and load .env file in current directory or parent directories."""
    current = Path.cwd().resolve()
    # Check current directory and up to 3 levels up
    for _ in range(4):
        env_path = current / ".env"
        if env_path.exists():
            # Load the .env file into environment variables
            load_dotenv(env_path, override=False)
            return str(env_path)
        parent = current.parent
        if parent == current:  # Reached root
            break
        current = parent
    return None


class Settings(BaseSettings):
    """Generator defaults, overridable per invocation from the CLI."""

    # Generator defaults
    migration: bool = True
    binary_id: bool = False

    # Project layout
    base_module: str = "app"
    project_root: Path = Path(".")
    tests_dir: Path = Path("tests/models")
    migrations_dir: Path = Path("migrations/versions")
    templates_dir: Optional[Path] = None  # Project overrides, searched before packaged templates

    # Logging Configuration
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="MODELGEN_",
        env_file=None,  # We load it manually with dotenv
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        """Initialize settings, loading .env first."""
        find_and_load_env_file()
        super().__init__(**kwargs)
        if self.log_file:
            self.log_file = Path(self.log_file)
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

    @property
    def models_dir(self) -> Path:
        """Directory holding the application's model modules."""
        return Path(*self.base_module.split(".")) / "models"

    @property
    def template_overrides_dir(self) -> Path:
        """Project directory searched for template overrides."""
        if self.templates_dir is not None:
            return Path(self.templates_dir)
        return self.project_root / "templates" / "model_gen"


# Settings instance for the CLI process
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
