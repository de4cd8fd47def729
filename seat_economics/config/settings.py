from pydantic_settings import BaseSettings

from seat_economics.pricing.constants import RETAIL_PRICE_SIX_MONTH, USERS_PER_TEAM


class Settings(BaseSettings):
    app_name: str = "Seat Economics API"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000"]

    # Commission calculator defaults
    default_tier_table: str = "six_month"
    retail_price: float = RETAIL_PRICE_SIX_MONTH
    users_per_team: int = USERS_PER_TEAM

    class Config:
        env_file = ".env"
