from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Primordial Ducks API"
    database_url: str = "sqlite+aiosqlite:///./ducks.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    log_level: str = "INFO"

    create_tables_on_startup: bool = True
    seed_sample_data: bool = True

    # Seeds the one process-wide generator: the sequence of /search-random
    # ducks is reproducible across restarts. None draws from OS entropy.
    random_seed: Optional[int] = None


settings = Settings()
