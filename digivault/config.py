from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DIGIVAULT_")

    app_name: str = "DigiVault"
    debug: bool = False

    catalog_api_url: str = "https://digi-api.com/api/v1/digimon"

    # Seconds before a catalog request is abandoned
    catalog_timeout: float = 10.0

    # Coin balance granted to a freshly created profile
    starting_coins: int = 100


settings = Settings()


# =============================================================================
# GACHA COMPOSITION
# =============================================================================

# Page size requested for single-tier draws (Child, Ultimate, Perfect)
SINGLE_DRAW_PAGE_SIZE = 100

# Page size requested per bucket in the combined Champion draw
COMBINED_DRAW_PAGE_SIZE = 50

# Duplicate copies consumed by one evolution event
EVOLUTION_COST = 3
