"""Configuration for the Notion exporter."""

from __future__ import annotations

from typing import Optional

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    The ``token_v2`` cookie is deliberately not part of the settings; it is
    handed to :class:`~notion_exporter.exporter.NotionExporter` directly.
    """

    base_url: AnyHttpUrl = Field(default="https://www.notion.so/api/v3/")
    time_zone: str = Field(default="Europe/Zurich")
    locale: str = Field(default="en")
    poll_interval: float = Field(default=0.05, gt=0)
    # None keeps polling until the task reaches a terminal state.
    poll_timeout: Optional[float] = Field(default=None, gt=0)
    request_timeout: float = Field(default=60.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="NOTION_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["Settings"]
