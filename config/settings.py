from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Protocol fee: 100 bps = 1%. Both values are fixed per deployment.
    FEE_RATE_BPS: int = 100
    FEE_BASIS_POINTS: int = 10_000

    # Admin player id (two u64 words). ADMIN_PID='[123, 456]' in .env
    ADMIN_PID: tuple[int, int] = (1, 1)

    # Genesis market, created with the initial state
    GENESIS_MARKET_TITLE: str = "Will the launchpad list a new project this quarter?"
    GENESIS_MARKET_DESCRIPTION: str = ""
    GENESIS_YES_LIQUIDITY: int = 100_000
    GENESIS_NO_LIQUIDITY: int = 100_000
    GENESIS_MARKET_DURATION: int | None = None  # ticks; None = open until resolved

    # App
    APP_NAME: str = "Prediction Market & IDO Launchpad"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"


settings = Settings()
