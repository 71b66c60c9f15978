from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):

    host: str = "0.0.0.0"
    port: int = 3000

    data_file: str = "data/Database.xlsx"
    load_on_startup: bool = True
    reset_on_load: bool = True

    database_path: str = "database.sqlite"
    database_url: Optional[str] = None

    api_title: str = "Airport Lookup API"
    api_version: str = "1.0.0"
    api_description: str = (
        "Lookup of airports by IATA code with their city and country"
    )

    log_level: str = "INFO"

    @property
    def db_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.database_path}"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
