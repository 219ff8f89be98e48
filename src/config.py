from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Database
    database_url: str = "sqlite:///data/app.db"

    # NY Fed markets API (SOFR publisher)
    nyfed_base_url: str = "https://markets.newyorkfed.org/api"
    nyfed_timeout_seconds: float = 15.0

    # Accrual defaults
    default_lookback_days: int = 5
    default_day_count: str = "ACT_360"
    default_rate_index: str = "SOFR_DAILY_SIMPLE"
    carry_forward_rates: bool = True  # Weekends/holidays reuse last published rate
    max_range_days: int = 3660

    # Startup
    seed_demo_rates: bool = False

    # App
    cors_origins: list[str] = ["*"]
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
