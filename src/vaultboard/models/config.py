"""Configuration models for .vaultboard.yml."""

from pydantic import BaseModel, Field, field_validator

from .enums import GroupKind

DEFAULT_EXCLUDE_GLOBS = ["Archive/**", ".obsidian/**", "Templates/**", ".trash/**"]
DEFAULT_RIPGREP_PATHS = ["/opt/homebrew/bin/rg", "/usr/local/bin/rg", "rg"]


class GroupLimits(BaseModel):
    """Maximum number of tasks shown per display group."""

    overdue: int = Field(default=15, ge=0)
    today: int = Field(default=15, ge=0)
    this_week: int = Field(default=10, ge=0)
    other: int = Field(default=10, ge=0)
    done: int = Field(default=10, ge=0)

    def for_kind(self, kind: GroupKind) -> int:
        """Get the limit for a group kind."""
        return getattr(self, kind.value)


class VaultboardConfig(BaseModel):
    """Root configuration from .vaultboard.yml."""

    version: int = 1
    limits: GroupLimits = Field(default_factory=GroupLimits)
    exclude_globs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_GLOBS))
    ripgrep_paths: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RIPGREP_PATHS),
        min_length=1,
        description="Candidate ripgrep executables, tried in order",
    )
    recency_window_days: float = Field(
        default=7,
        ge=1,
        description="Lookback window for the file recency score",
    )

    @field_validator("exclude_globs")
    @classmethod
    def validate_exclude_globs(cls, v: list[str]) -> list[str]:
        """Reject blank globs, which would exclude nothing or everything."""
        for glob in v:
            if not glob.strip():
                raise ValueError("Exclude globs cannot be empty")
        return v

    @field_validator("ripgrep_paths")
    @classmethod
    def validate_ripgrep_paths(cls, v: list[str]) -> list[str]:
        """Validate executable candidates are non-empty strings."""
        for candidate in v:
            if not candidate.strip():
                raise ValueError("Ripgrep path cannot be empty")
        return v

    @classmethod
    def default(cls) -> "VaultboardConfig":
        """Return default configuration."""
        return cls()
