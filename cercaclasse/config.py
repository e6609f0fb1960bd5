"""Settings loaded from the environment (prefix ``CERCACLASSE_``) or ``.env``."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CERCACLASSE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Record source: local path or http(s) URL
    data_source: str = "data/classi_basilicata_con_istituto.csv"
    csv_delimiter: str = ","
    quoted_fields: bool = False
    fetch_timeout: int = 30

    # Result caps per mode
    code_result_limit: int = 20
    ranked_result_limit: int = 10

    log_level: str = "INFO"

    # API
    api_title: str = "Cerca la tua classe"
    api_version: str = "0.1.0"
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("csv_delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("csv_delimiter must be a single character")
        return v

    @field_validator("fetch_timeout", "code_result_limit", "ranked_result_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


settings = Settings()
