from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="FANCYFONTS_")

    app_name: str = "FancyFonts"
    debug: bool = False

    database_url: str = "sqlite+aiosqlite:///./fancyfonts.db"

    # Optional overrides for the bundled font/decorator tables
    fonts_path: str | None = None
    decorators_path: str | None = None

    default_text: str = "Preview Text"
    default_page_size: int = 25


settings = Settings()


# =============================================================================
# FILTER SENTINELS
# =============================================================================

# Style / font selection that matches everything
ALL = "all"

# Decorator id that wraps nothing (first entry of the decorator table)
NO_DECORATOR = "none"

# User id used by the CLI, which has a single local user
LOCAL_USER_ID = "local"
