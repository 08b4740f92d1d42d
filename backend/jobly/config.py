from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / ".jobly"
    # Overrides the SQLite file under data_dir, e.g. postgresql+psycopg://...
    database_url: str | None = None
    # argon2 hash of the admin bearer token; admin routes answer 401 while unset.
    admin_token_hash: str | None = None
    api_prefix: str = ""
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3001

    @property
    def db_path(self) -> Path:
        return self.data_dir / "jobly.sqlite"

    @property
    def sqlalchemy_url(self) -> str:
        return self.database_url or f"sqlite:///{self.db_path}"

    model_config = {"env_prefix": "JOBLY_"}


settings = Settings()
