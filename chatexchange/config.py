# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings, frozen=True):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    CHATEXCHANGE_PROMPT_DIR: Path | None = Field(
        default=None,
        description="Directory searched for prompt templates by name",
    )
    CHATEXCHANGE_PROMPT_SUFFIX: str = Field(
        default=".jinja2",
        description="File suffix appended to template names on lookup",
    )
    CHATEXCHANGE_LOG_PAYLOADS: bool = Field(
        default=False,
        description="Log full request payloads at debug level",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None

    @field_validator("CHATEXCHANGE_PROMPT_DIR", mode="before")
    def _validate_prompt_dir(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("CHATEXCHANGE_PROMPT_SUFFIX")
    def _validate_prompt_suffix(cls, v: str) -> str:
        v = v.strip()
        if v and not v.startswith("."):
            v = "." + v
        return v


# Create a singleton instance
settings = AppSettings()
# Store the instance in the class variable for singleton pattern
AppSettings._instance = settings
