from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_name: str = "BandRank"
    debug: bool = False
    api_key: str = "changeme"

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "bandrank"
    postgres_password: str = "bandrank"
    postgres_db: str = "bandrank"
    # Seconds; enforced by asyncpg on connect and per statement
    db_connect_timeout: float = 10.0
    db_command_timeout: float = 30.0

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def database_url_sync(self) -> str:
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # Rating engine
    default_rating: float = 1500.0
    pairing_pool_size: int = 200
    pairing_cooldown_days: int = 7
    skip_cooldown_hours: int = 6

    # Star display window
    display_min_rating: float = 1000.0
    display_max_rating: float = 1600.0

    model_config = {"env_prefix": "BANDRANK_", "env_file": ".env"}


settings = Settings()
