"""Application settings."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from shadlint.models import Severity
from shadlint.sources import DEFAULT_EXTENSIONS


class Settings(BaseModel):
  """Application configuration."""

  model_config = ConfigDict(use_enum_values=False, extra="forbid")

  rules_file: Path | None = None
  format: str = "text"
  fail_on: Severity = Severity.CRITICAL
  enable: list[str] = Field(default_factory=list)
  disable: list[str] = Field(default_factory=list)
  extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
