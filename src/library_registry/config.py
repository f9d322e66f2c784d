"""Configuration management for the library registry.

Library capacities are plain constructor parameters; this module only
supplies defaults for them from the environment, so that applications can
size a library without hard-coding the numbers:
1. Capacities - how many books, patrons and concurrent loans a library holds
2. Logging - the level used by configure_logging
3. Validation - type-safe settings with Pydantic v2
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LibraryConfig(BaseSettings):
    """Library registry configuration.

    Every field can be overridden with a LIBRARY_REGISTRY_ prefixed
    environment variable or a .env file entry.
    """

    model_config = SettingsConfigDict(
        # Use LIBRARY_REGISTRY_ prefix for all env vars
        env_prefix="LIBRARY_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Capacities ===

    max_book_capacity: int = Field(
        default=100,
        description="Maximum number of books a library can hold",
        ge=0,
    )

    max_borrowed_books: int = Field(
        default=3,
        description="Maximum number of books a single patron may hold at once",
        ge=0,
    )

    max_patron_capacity: int = Field(
        default=50,
        description="Maximum number of patrons a library can register",
        ge=0,
    )

    # === Logging ===

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_development(self) -> bool:
        """Check if verbose logging is enabled."""
        return self.log_level == "DEBUG"

    @property
    def capacities(self) -> dict[str, int]:
        """Keyword arguments for the Library constructor."""
        return {
            "max_book_capacity": self.max_book_capacity,
            "max_borrowed_books": self.max_borrowed_books,
            "max_patron_capacity": self.max_patron_capacity,
        }


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: LibraryConfig | None = None


def get_config() -> LibraryConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = LibraryConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
