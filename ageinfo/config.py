"""Runtime configuration for the ageinfo package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

``MODEL_ARN`` is only needed by ``ageinfo.agent.create_agent``; the pure
calculation and formatting functions work without it.

Usage::

    from ageinfo.config import settings

    print(settings.default_locale)
"""

import zoneinfo

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    model_arn: str | None = Field(
        default=None,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN.",
    )
    default_locale: str = Field(
        default="en",
        alias="DEFAULT_LOCALE",
        description="Locale used when no supported locale can be detected.",
    )
    supported_locales: list[str] = Field(
        default_factory=lambda: ["en", "id"],
        alias="SUPPORTED_LOCALES",
        description="Locale tags the site is translated into.",
    )
    timezone: str = Field(
        default="UTC",
        alias="AGEINFO_TIMEZONE",
        description="IANA zone in which calendar fields are decomposed.",
    )

    @field_validator("default_locale")
    @classmethod
    def _lowercase_default(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("supported_locales")
    @classmethod
    def _lowercase_supported(cls, value: list[str]) -> list[str]:
        locales = [tag.strip().lower() for tag in value if tag.strip()]
        if not locales:
            raise ValueError("SUPPORTED_LOCALES must list at least one locale.")
        return locales

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            zoneinfo.ZoneInfo(value)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown time zone: {value!r}.") from exc
        return value

    @model_validator(mode="after")
    def _default_is_supported(self) -> "Settings":
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"DEFAULT_LOCALE {self.default_locale!r} is not one of "
                f"SUPPORTED_LOCALES {self.supported_locales}."
            )
        return self

    @property
    def tzinfo(self) -> zoneinfo.ZoneInfo:
        return zoneinfo.ZoneInfo(self.timezone)


settings = Settings()
