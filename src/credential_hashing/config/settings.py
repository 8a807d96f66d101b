"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from credential_hashing.infrastructure.security.password_hasher import (
    ScryptParameters,
    ScryptPasswordHasher,
)

PositiveInt = Annotated[int, Field(gt=0)]


class Settings(BaseSettings):
    """Environment-driven credential hashing settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    scrypt_cost: PositiveInt = Field(default=16_384, validation_alias="SCRYPT_COST")
    scrypt_block_size: PositiveInt = Field(default=8, validation_alias="SCRYPT_BLOCK_SIZE")
    scrypt_parallelism: PositiveInt = Field(default=1, validation_alias="SCRYPT_PARALLELISM")
    scrypt_maxmem_bytes: PositiveInt = Field(
        default=64 * 1024 * 1024,
        le=2**31 - 1,
        validation_alias="SCRYPT_MAXMEM_BYTES",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("scrypt_cost")
    @classmethod
    def _cost_is_power_of_two(cls, value: int) -> int:
        if value < 2 or value & (value - 1):
            raise ValueError("SCRYPT_COST must be a power of two greater than 1")
        return value

    @model_validator(mode="after")
    def _maxmem_covers_work_factors(self) -> "Settings":
        self.scrypt_parameters()
        return self

    def scrypt_parameters(self) -> ScryptParameters:
        """Return work factors as the value object consumed by the hasher."""

        return ScryptParameters(
            n=self.scrypt_cost,
            r=self.scrypt_block_size,
            p=self.scrypt_parallelism,
            maxmem=self.scrypt_maxmem_bytes,
        )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()


def build_password_hasher(settings: Settings) -> ScryptPasswordHasher:
    """Build a scrypt hasher using the configured work factors."""

    return ScryptPasswordHasher(parameters=settings.scrypt_parameters())


@lru_cache(maxsize=1)
def load_password_hasher() -> ScryptPasswordHasher:
    """Return the process-wide hasher built from cached settings."""

    return build_password_hasher(load_settings())
