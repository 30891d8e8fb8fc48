from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="TurningJane Catalog", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=3000, validation_alias="API_PORT")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:3001",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:3001",
        ],
        validation_alias="CORS_ORIGINS",
    )

    # Catalog database
    database_url: str = Field(
        default="sqlite:///" + str(Path(__file__).resolve().parents[1] / "catalog.db"),
        validation_alias="DATABASE_URL",
    )
    database_pool_size: int = Field(default=5, validation_alias="DATABASE_POOL_SIZE")
    database_pool_recycle: int = Field(
        default=300,
        validation_alias="DATABASE_POOL_RECYCLE",
        description="Seconds before a pooled connection is recycled.",
    )

    # Blob Storage
    blob_backend: Literal["supabase", "fsspec"] = Field(
        default="fsspec",
        validation_alias="BLOB_BACKEND",
    )
    storage_bucket: str = Field(default="media", validation_alias="SUPABASE_STORAGE_BUCKET")
    blob_upload_timeout: float = Field(
        default=30.0,
        validation_alias="BLOB_UPLOAD_TIMEOUT",
        description="Seconds before an upload to the object store is abandoned.",
    )
    blob_delete_timeout: float = Field(
        default=10.0,
        validation_alias="BLOB_DELETE_TIMEOUT",
        description="Seconds before a delete on the object store is abandoned.",
    )

    # Supabase (when blob_backend is "supabase")
    supabase_url: str = Field(default="http://localhost:54321", validation_alias="SUPABASE_URL")
    supabase_key: str | None = Field(default=None, validation_alias="SUPABASE_KEY")

    # fsspec (when blob_backend is "fsspec")
    blob_base_url: str = Field(
        default="file://" + str(Path(__file__).resolve().parents[1] / "blobs"),
        validation_alias="BLOB_BASE_URL",
    )
    blob_public_base_url: str = Field(
        default="http://127.0.0.1:3000/media",
        validation_alias="BLOB_PUBLIC_BASE_URL",
        description="Prefix of the public references handed out for locally stored blobs.",
    )
    blob_storage_options: dict = {}


# Global settings instance
settings = Settings()
