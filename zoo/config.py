from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_host: str = 'localhost'
    app_port: int = 8000
    db_url: str = 'postgresql://zoo_user:12345@db:5432/zoo_db'
    db_echo: bool = False

    secret_key: str
    access_token_expire_hours: int = 12
    access_token_alg: str = 'HS256'

    allowed_origins: str = '*'
    debug: bool = False

    model_config = SettingsConfigDict(env_file='.env', extra='allow')

    @property
    def allowed_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(',')]


@lru_cache()
def get_settings():
    return Settings()
