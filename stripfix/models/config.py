"""Run configuration model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from stripfix.models.prefix import AutoDetectPrefix, PrefixMode, SuppliedPrefix


DEFAULT_SOURCE_DIRECTORY = Path(".")


class StripConfig(BaseModel):
    """Settings for a single stripfix run, as gathered from the command line."""

    model_config = ConfigDict(frozen=True)

    files: list[Path] | None = Field(
        default=None,
        description="Explicit files to operate on; when set the source directory is not scanned",
    )
    source_directory: Path | None = Field(
        default=None,
        description="Directory whose immediate entries are candidates",
    )
    prefix: str | None = Field(default=None, description="Prefix to strip; detected when omitted")
    replacement: str | None = Field(default=None, description="Text substituted for the prefix")
    include_directories: bool = False
    skip_confirmation: bool = False
    dry_run: bool = False

    @model_validator(mode="after")
    def _check_exclusive_sources(self) -> "StripConfig":
        if self.files and self.source_directory is not None:
            raise ValueError("Cannot specify both FILES and --source-directory")
        return self

    @property
    def directory(self) -> Path:
        """Directory to scan, falling back to the current directory."""
        return self.source_directory if self.source_directory is not None else DEFAULT_SOURCE_DIRECTORY

    @property
    def prefix_mode(self) -> PrefixMode:
        if self.prefix is None:
            return AutoDetectPrefix()
        return SuppliedPrefix(value=self.prefix)
