"""Application configuration models using Pydantic."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class UIConfig(BaseModel):
    """User interface settings."""
    # None = ask with the language picker
    language: Optional[Literal["en", "ko", "ja"]] = None


class StoreConfig(BaseModel):
    """Where the graphics record is read from and written to."""
    backend: Literal["auto", "registry", "directory", "memory"] = "auto"
    directory: Optional[Path] = None  # Root for the directory backend


class LoggingConfig(BaseModel):
    """Logging settings."""
    show_logs: bool = False
    file: Optional[Path] = None


class AppConfig(BaseModel):
    """Root configuration model."""
    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields in config file

    ui: UIConfig = Field(default_factory=UIConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
