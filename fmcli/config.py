"""Configuration management for fmcli with multi-source loading."""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, validator


class LogLevel(str, Enum):
    """Available logging levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class FileManagerConfig(BaseModel):
    """Main configuration class with validation and multi-source loading."""

    # Interaction
    prompt: str = Field(default="> ", description="Input prompt")
    show_cwd_after_command: bool = Field(
        default=False, description="Print the current directory after every command"
    )
    start_directory: Optional[Path] = Field(
        default=None, description="Directory the session starts in"
    )

    # File operations
    chunk_size: int = Field(
        default=64 * 1024, description="Read block size for streamed operations"
    )
    compression_quality: int = Field(
        default=11, description="Brotli compression quality (0-11)"
    )

    # Output Configuration
    rich_output: bool = Field(default=True, description="Enable rich text formatting")
    show_debug: bool = Field(default=False, description="Show debug information")
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Logging level")

    @validator("start_directory", pre=True)
    def expand_start_directory(cls, v):
        """Expand ``~`` in the configured start directory."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    @validator("chunk_size")
    def validate_chunk_size(cls, v):
        if v <= 0:
            raise ValueError("chunk_size must be positive")
        return v

    @validator("compression_quality")
    def validate_compression_quality(cls, v):
        if not 0 <= v <= 11:
            raise ValueError("compression_quality must be between 0 and 11")
        return v

    @validator("log_level", pre=True)
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v


class ConfigurationError(Exception):
    """Configuration-related errors."""

    pass


def get_config_paths() -> List[Path]:
    """Get configuration file paths in priority order."""
    paths = []

    # User config directory
    paths.append(Path.home() / ".fmcli" / "config.toml")

    # System config directory
    if os.name == "posix":
        paths.append(Path("/etc/fmcli/config.toml"))
    elif os.name == "nt":
        paths.append(
            Path(os.environ.get("ProgramData", "C:/ProgramData"))
            / "fmcli"
            / "config.toml"
        )

    return paths


def load_config_file(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a TOML file.

    Missing or unreadable files are treated as empty so the defaults apply.
    """
    try:
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                return toml.load(f)
    except (OSError, toml.TomlDecodeError):
        pass
    return {}


_BOOLEAN_STRINGS = {
    "true": True,
    "1": True,
    "yes": True,
    "on": True,
    "false": False,
    "0": False,
    "no": False,
    "off": False,
}


def load_environment_variables() -> Dict[str, Any]:
    """Load configuration from FMCLI_* environment variables.

    Values are coerced by the type of the matching config field, so text
    settings such as the prompt are never turned into booleans or numbers.
    """
    config = {}
    prefix = "FMCLI_"

    for key, value in os.environ.items():
        if key.startswith(prefix):
            config_key = key[len(prefix) :].lower()
            field = FileManagerConfig.model_fields.get(config_key)
            annotation = field.annotation if field is not None else None

            if annotation is bool and value.lower() in _BOOLEAN_STRINGS:
                config[config_key] = _BOOLEAN_STRINGS[value.lower()]
            elif annotation is int:
                try:
                    config[config_key] = int(value)
                except ValueError:
                    config[config_key] = value
            else:
                config[config_key] = value

    return config


def load_configuration(
    config_file: Optional[str] = None,
    debug: bool = False,
    start_directory: Optional[str] = None,
) -> FileManagerConfig:
    """Load configuration from multiple sources with priority handling.

    Priority order (highest to lowest):
    1. Function parameters (debug, start_directory)
    2. Environment variables (FMCLI_*)
    3. Explicit config file (config_file)
    4. User config file (~/.fmcli/config.toml)
    5. System config file (/etc/fmcli/config.toml)
    6. Default values
    """
    merged_config: Dict[str, Any] = {}

    config_paths = get_config_paths()
    if config_file:
        config_paths.insert(0, Path(config_file))

    for path in reversed(config_paths):  # Reverse to maintain priority
        merged_config.update(load_config_file(path))

    merged_config.update(load_environment_variables())

    if debug:
        merged_config["show_debug"] = True
        merged_config["log_level"] = LogLevel.DEBUG

    if start_directory:
        merged_config["start_directory"] = start_directory

    try:
        return FileManagerConfig(**merged_config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
