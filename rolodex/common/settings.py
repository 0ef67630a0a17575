# rolodex/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rolodex.common.strings.text import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:8000"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    # Header added to every response by the global header middleware
    global_header_key: str = "Some-Key"
    global_header_value: str = "Some-Value"

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "rolodex"
    user: str = "rolodex"
    password: str = "rolodex"
    # "public" keeps tables unqualified (required for SQLite)
    schema_name: str = "public"
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class AuthConfig(BaseModel):
    enabled: bool = True
    cookie_name: str = "Auth-Key"
    cookie_value: str = "A100"

    @field_validator("enabled", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)


class ExportConfig(BaseModel):
    csv_filename: str = "persons.csv"
    excel_filename: str = "persons.xlsx"
    pdf_filename: str = "persons.pdf"
    excel_sheet_name: str = "PersonsSheet"
    # full|without_country
    excel_column_set: str = "full"
    pdf_margin_pt: float = Field(20.0, ge=0)
    country_sheet_name: str = "Countries"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "rolodex"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Listing defaults --------
    default_sort_by: str = "person_name"
    default_sort_order: str = "ASC"

    # Optional single URL for the whole app (if set, it wins over db.*)
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    auth: AuthConfig = AuthConfig()
    export: ExportConfig = ExportConfig()

    # -------- Alembic / migrations --------
    alembic_version_table_schema: Optional[str] = None

    # -------- Seed data --------
    seed_dir: Path = Path(__file__).resolve().parent.parent / "database" / "seed_data"

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = False
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("use_testcontainers", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @computed_field  # type: ignore[misc]
    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.database_url_override or self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> Optional[str]:
        s = self.db.schema_name
        return s if s and s.lower() != "public" else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from rolodex.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
