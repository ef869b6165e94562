# tenant_service/settings.py
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Annotated, Any, List, Optional
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# This settings.py file is at <project>/tenant_service/settings.py
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DOTENV_PATH = PROJECT_ROOT / ".env"

if DOTENV_PATH.exists():
    logger.debug(f"SETTINGS.PY: .env file found at: {DOTENV_PATH}")
else:
    logger.debug(
        f"SETTINGS.PY: .env file not found at: {DOTENV_PATH}. "
        "Will rely on OS env vars or defaults."
    )


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = "Tenant Service"
    debug_mode: bool = False
    storage_backend: str = Field(
        default="cassandra",
        description="Tenant storage backend: 'cassandra' or 'sqlite'."
    )

    # Cassandra configuration
    cassandra_contact_points: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["127.0.0.1"],
        description="Comma-separated hosts (or a JSON list) of the Cassandra cluster."
    )
    cassandra_port: int = 9042
    cassandra_keyspace: str = "tenant_service"
    cassandra_username: Optional[str] = None
    cassandra_password: Optional[str] = None

    # SQLite configuration
    sqlite_db_path: str = "./tenant_service_data.sqlite3"

    admin_api_key: Optional[str] = Field(
        default=None,
        description="API Key for accessing admin routes."
    )

    @field_validator("cassandra_contact_points", mode="before")
    @classmethod
    def split_contact_points(cls, value: Any) -> Any:
        """Accept `host1,host2` as well as a JSON list from the environment."""
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [host.strip() for host in value.split(",") if host.strip()]

    model_config = SettingsConfigDict(
        env_file=DOTENV_PATH if DOTENV_PATH.exists() else None,
        extra="ignore",
        env_file_encoding='utf-8'
    )


settings = Settings()

logger.debug(
    f"SETTINGS.PY: storage_backend: '{settings.storage_backend}', "
    f"cassandra_keyspace: '{settings.cassandra_keyspace}', "
    f"admin_api_key: {'********' if settings.admin_api_key else 'None'}"
)
