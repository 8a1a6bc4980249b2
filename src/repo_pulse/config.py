"""Configuration loading and management for repo-pulse.

Configuration sources are merged in priority order:
    1. Defaults (defined in PulseConfig)
    2. Global config (~/.repo-pulse.toml)
    3. Project config (./repo-pulse.toml)
    4. Explicit config file
    5. Environment variables (REPO_PULSE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(git_max_commits=500)
    >>> config.git_max_commits
    500
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, RepoPulseError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "REPO_PULSE_"


@dataclass(frozen=True)
class PulseConfig:
    """Settings for history extraction and the outer surfaces.

    Attributes:
        Git integration:
            git_max_commits: Maximum commits to read from git log (0 = unlimited)
            git_timeout_seconds: Timeout for a single git subprocess
            include_merges: Count merge commits (git log without --no-merges)
            all_refs: Read history of every ref (git log --all), not just HEAD

        Output control:
            verbosity: Logging verbosity level

        Server:
            server_host: Interface for ``repo-pulse serve``
            server_port: Port for ``repo-pulse serve``
    """

    # Git integration
    git_max_commits: int = 0
    git_timeout_seconds: int = 60
    include_merges: bool = False
    all_refs: bool = True

    # Output control
    verbosity: Verbosity = "normal"

    # Server
    server_host: str = "127.0.0.1"
    server_port: int = 8765

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.git_max_commits < 0:
            raise ValueError("git_max_commits must be non-negative")
        if self.git_timeout_seconds < 1:
            raise ValueError("git_timeout_seconds must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet, normal, verbose")
        if not 0 < self.server_port < 65536:
            raise ValueError("server_port must be between 1 and 65535")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> PulseConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated PulseConfig instance

    Raises:
        RepoPulseError: If a config file is missing or unreadable
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".repo-pulse.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise RepoPulseError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "repo-pulse.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise RepoPulseError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise RepoPulseError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise RepoPulseError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return PulseConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise RepoPulseError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise InvalidConfigError("config", merged, str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from REPO_PULSE_* environment variables.

    Supported environment variables:
        REPO_PULSE_GIT_MAX_COMMITS: int
        REPO_PULSE_GIT_TIMEOUT_SECONDS: int
        REPO_PULSE_INCLUDE_MERGES: bool (true/false/1/0)
        REPO_PULSE_ALL_REFS: bool
        REPO_PULSE_VERBOSITY: quiet/normal/verbose
        REPO_PULSE_SERVER_HOST: str
        REPO_PULSE_SERVER_PORT: int
    """
    type_hints = get_type_hints(PulseConfig)

    result: dict[str, Any] = {}

    for field_name in PulseConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Bool: accept true/false/1/0/yes/no
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return the ``[repo-pulse]`` table (or the whole file)."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data.get("repo-pulse", data)
