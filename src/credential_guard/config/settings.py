"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from credential_guard.domain.auth.password_policy import MIN_PASSWORD_LENGTH

NonEmptyStr = Annotated[str, Field(min_length=1)]
PasswordLength = Annotated[int, Field(ge=MIN_PASSWORD_LENGTH)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    generated_password_length: PasswordLength = Field(
        default=16,
        validation_alias="GENERATED_PASSWORD_LENGTH",
    )
    require_strong_passwords: bool = Field(
        default=True,
        validation_alias="REQUIRE_STRONG_PASSWORDS",
    )
    credential_password_file: NonEmptyStr | None = Field(
        default=None,
        validation_alias="CREDENTIAL_PASSWORD_FILE",
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
