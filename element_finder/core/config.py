"""Centralized configuration management using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ELEMENT_FINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ElementFinder", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_to_file: bool = Field(default=False, description="Write logs to the logs directory")

    # Documents
    default_document_type: Literal["html", "xml"] = Field(
        default="html", description="Document type used when none is given"
    )
    empty_document_html: str = Field(
        default='<html data-document-is-empty=""></html>',
        description="Markup used for sub-documents built from blank content",
    )
    xml_wrapper_tag: str = Field(
        default="root", description="Root tag wrapped around XML fragments"
    )

    # Parser
    huge_tree: bool = Field(default=False, description="Disable libxml2 security limits")
    strip_cdata: bool = Field(default=True, description="Merge CDATA sections into text")

    @field_validator("xml_wrapper_tag")
    @classmethod
    def validate_wrapper_tag(cls, v: str) -> str:
        """Ensure wrapper tag is a usable element name."""
        if not v or not v.replace("-", "").replace("_", "").isalnum():
            raise ValueError("xml_wrapper_tag must be a simple element name")
        return v

    @property
    def logs_dir(self) -> Path:
        """Get logs directory path."""
        path = Path("./logs")
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
