"""Configuration schemas."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_DESTINATIONS = ["stderr", "file", "both"]
VALID_RENDERERS = ["console", "json"]
VALID_OUTPUT_FORMATS = ["text", "json", "yaml", "table"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stderr", description="Where log records go")
    file_path: Optional[str] = Field(None, description="Log file when destination uses a file")
    max_size_mb: int = Field(10, ge=1, description="Rotate the log file at this size")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")
    renderer: str = Field("console", description="structlog renderer")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {VALID_LOG_LEVELS}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        destination = v.lower()
        if destination not in VALID_LOG_DESTINATIONS:
            raise ValueError(
                f"Invalid log destination '{v}'. Must be one of: {VALID_LOG_DESTINATIONS}"
            )
        return destination

    @field_validator("renderer")
    @classmethod
    def validate_renderer(cls, v: str) -> str:
        """Validate renderer."""
        if v not in VALID_RENDERERS:
            raise ValueError(f"Invalid renderer '{v}'. Must be one of: {VALID_RENDERERS}")
        return v

    @model_validator(mode="after")
    def validate_file_path(self) -> "LoggingConfig":
        """File destinations need a file to write to."""
        if self.destination in ("file", "both") and not self.file_path:
            raise ValueError(f"Log destination '{self.destination}' requires file_path")
        return self


class CatalogConfig(BaseModel):
    """Catalog presentation configuration."""

    default_format: str = Field("text", description="Default CLI output format")
    default_variant: str = Field("canonical", description="Variant run when none is given")
    show_banner: bool = Field(True, description="Print a banner before each demo in run-all")

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate output format."""
        if v not in VALID_OUTPUT_FORMATS:
            raise ValueError(f"Invalid format '{v}'. Must be one of: {VALID_OUTPUT_FORMATS}")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
