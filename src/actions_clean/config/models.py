"""Configuration models."""

from pathlib import Path
from typing import Any, Self

from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from actions_clean.config.exceptions import InvalidConfigurationError, MissingConfigurationError
from actions_clean.models import TargetRoot

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "off"})


class CleanupConfig(BaseSettings):
    """Configuration for a single cleanup run.

    Values are read from the process environment using the variable names a
    GitHub Actions runner provides. Field names are used everywhere else.
    """

    # Target roots
    workspace: Path | None = Field(
        default=None,
        validation_alias="GITHUB_WORKSPACE",
        description="Workspace root, required",
    )
    home: Path | None = Field(
        default=None,
        validation_alias="HOME",
        description="Home root, optional",
    )

    # Action inputs
    cleanup_home: bool = Field(
        default=True,
        validation_alias="INPUT_CLEANUP_HOME",
        description="Remove the contents of the home directory",
    )
    cleanup_workspace: bool = Field(
        default=True,
        validation_alias="INPUT_CLEANUP_WORKSPACE",
        description="Remove the contents of the workspace directory",
    )
    dry_run: bool = Field(
        default=False,
        validation_alias="INPUT_DRY_RUN",
        description="Only report what would be removed",
    )

    # Runner settings
    debug: bool = Field(
        default=False,
        validation_alias="RUNNER_DEBUG",
        description="Enable debug logging",
    )

    model_config = SettingsConfigDict(
        env_file=None,
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, env_file: str | Path | None = None, **kwargs: Any) -> None:
        """Initialize configuration.

        Args:
            env_file: Optional path to an env file read after the environment
            **kwargs: Explicit configuration values, keyed by variable name

        Raises:
            InvalidConfigurationError: If env_file is specified but does not exist
        """
        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise InvalidConfigurationError(f"Environment file not found: {env_file}")
            kwargs["_env_file"] = env_path

        super().__init__(**kwargs)

    @field_validator("workspace", "home", mode="before")
    @classmethod
    def parse_root(cls, v: str | Path | None) -> Path | None:
        """Parse a root directory path.

        An empty value is treated as unset. Relative paths are kept as given;
        the orchestrator skips them with a warning.
        """
        if v is None:
            return None
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
        return Path(v)

    @field_validator("cleanup_home", "cleanup_workspace", "dry_run", mode="before")
    @classmethod
    def parse_flag(cls, v: str | bool | int | None, info: ValidationInfo) -> bool:
        """Parse a boolean flag the way action inputs are written.

        An empty value falls back to the field default.

        Raises:
            InvalidConfigurationError: If the value is not a recognised boolean
        """
        default = cls.model_fields[info.field_name].default
        if v is None:
            return default
        if isinstance(v, bool):
            return v
        if isinstance(v, int):
            return v != 0
        normalized = str(v).strip().lower()
        if not normalized:
            return default
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False
        raise InvalidConfigurationError(f"Invalid boolean for {info.field_name}: {v!r}")

    @field_validator("debug", mode="before")
    @classmethod
    def parse_debug(cls, v: str | bool | int | None) -> bool:
        """Parse RUNNER_DEBUG, which only enables debug logging.

        Any value other than a recognised true value turns debug off.
        """
        if isinstance(v, bool):
            return v
        if v is None:
            return False
        return str(v).strip().lower() in TRUE_VALUES

    @model_validator(mode="after")
    def validate_workspace(self) -> Self:
        """Ensure the workspace root is known.

        Raises:
            MissingConfigurationError: If GITHUB_WORKSPACE is absent
        """
        if self.workspace is None:
            raise MissingConfigurationError("GITHUB_WORKSPACE is not set")
        return self

    def target_roots(self) -> list[TargetRoot]:
        """Build the target roots in processing order.

        Returns:
            Home root followed by workspace root
        """
        return [
            TargetRoot(label="home", path=self.home, enabled=self.cleanup_home),
            TargetRoot(label="workspace", path=self.workspace, enabled=self.cleanup_workspace),
        ]
