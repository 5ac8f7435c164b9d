"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    vault_root: Path = Field(
        default=Path(),
        description="Root directory of the notes vault to scan",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    rescan_delay: float = Field(
        default=0.5,
        ge=0,
        description="Seconds to wait after an edit before rescanning",
    )

    model_config = {
        "env_prefix": "VAULTBOARD_",
    }
