"""Library settings loaded from environment with validation."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
HashAlgorithm = Literal["blake2b", "md5"]

# Hex length of the 128-bit digest appended to hashed names
HASH_HEX_LENGTH = 32


class Settings(BaseSettings):
    """Naming and logging settings from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Logging
    log_level: LogLevel = Field(default="INFO")

    # Name derivation
    name_max_length: int = Field(
        default=63,
        ge=16,
        le=253,
        description="Maximum length of a derived resource name (DNS label = 63)",
    )
    name_hash_prefix: str = Field(
        default="seldon",
        min_length=1,
        max_length=64,
        description="Prefix joined with '-' to the digest when a name is too long",
    )
    name_hash_algorithm: HashAlgorithm = Field(
        default="blake2b",
        description=(
            "128-bit digest used for over-long names. "
            "md5 reproduces names created by the legacy Go operator."
        ),
    )
    explainer_name_suffix: str = Field(
        default="-explainer",
        description="Suffix appended to <deployment>-<predictor> for explainer deployments",
    )
    svc_orch_name_suffix: str = Field(
        default="-svc-orch",
        description="Suffix appended to <deployment>-<predictor> for the service orchestrator",
    )
    custom_svc_name_annotation: str = Field(
        default="seldon.io/svc-name",
        min_length=1,
        description="Predictor annotation whose value overrides the predictor key",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        u = (v or "INFO").upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u

    @field_validator("name_hash_algorithm", mode="before")
    @classmethod
    def normalize_hash_algorithm(cls, v: str) -> str:
        return (v or "blake2b").strip().lower()

    @model_validator(mode="after")
    def check_hashed_name_fits(self) -> "Settings":
        hashed_length = len(self.name_hash_prefix) + 1 + HASH_HEX_LENGTH
        if hashed_length > self.name_max_length:
            raise ValueError(
                f"name_hash_prefix too long: hashed names would be {hashed_length} chars "
                f"(name_max_length={self.name_max_length})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
