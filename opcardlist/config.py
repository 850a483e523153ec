from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    # Per-region output lives in output_dir/<region>/
    output_dir: Path = Path("json")

    # Raw card list pages are cached here before parsing
    input_dir: Path = Path("input")

    # Seconds to wait after every card list fetch
    request_delay: float = 2.0
    request_timeout: float = 30.0

    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:122.0) Gecko/20100101 Firefox/122.0"
    )


settings = Settings()


# =============================================================================
# OUTPUT FILE NAMES
# =============================================================================

FULL_CARDS_FILENAME = "cards-full.json"
PUBLIC_CARDS_FILENAME = "cards.json"
FILTERS_FILENAME = "filters.json"
