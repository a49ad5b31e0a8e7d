"""Runtime configuration model for schemafs.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_LOG_LEVEL,
    FALSY_ENV_VALUES,
    SCHEMA_SOURCE_DIR,
    SUPPORTED_LOG_LEVELS,
    TRUTHY_ENV_VALUES,
)
from core.errors import SchemaFsConfigError


@dataclass(frozen=True)
class SchemaFsConfig:
    """Validated runtime configuration.

    Attributes:
        use_local: Serve loose files from disk instead of the compiled table.
        local_root: Directory that ``local_source_path`` values resolve against.
        mount_name: Prefix exposed as the filesystem root; empty for none.
        table_path: Optional external table file replacing the compiled one.
        log_level: Minimum structured log level.
    """

    use_local: bool
    local_root: Path
    mount_name: str
    table_path: Path | None
    log_level: str

    @classmethod
    def from_env(cls) -> "SchemaFsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SchemaFsConfigError: If environment values are invalid.
        """
        use_local = _parse_bool("SCHEMAFS_USE_LOCAL", os.getenv("SCHEMAFS_USE_LOCAL", "false"))
        table_value = os.getenv("SCHEMAFS_TABLE_PATH")
        table_path = Path(table_value).expanduser().resolve() if table_value else None
        default_root = table_path.parent if table_path else SCHEMA_SOURCE_DIR
        local_root_value = os.getenv("SCHEMAFS_LOCAL_ROOT", str(default_root))
        log_level = _parse_log_level(os.getenv("SCHEMAFS_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            use_local=use_local,
            local_root=Path(local_root_value).expanduser().resolve(),
            mount_name=os.getenv("SCHEMAFS_MOUNT", ""),
            table_path=table_path,
            log_level=log_level,
        )


def _parse_bool(variable: str, raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        variable: Environment variable name, for error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed flag.

    Raises:
        SchemaFsConfigError: If the value is not a recognized boolean.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUTHY_ENV_VALUES:
        return True
    if normalized in FALSY_ENV_VALUES:
        return False
    raise SchemaFsConfigError(
        f"Invalid {variable} value: expected one of "
        f"{TRUTHY_ENV_VALUES + FALSY_ENV_VALUES}, got '{raw_value}'. "
        f"Set {variable} to a boolean value."
    )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Lower-case level name.

    Raises:
        SchemaFsConfigError: If the level is unknown.
    """
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise SchemaFsConfigError(
            f"Invalid SCHEMAFS_LOG_LEVEL value: expected one of {SUPPORTED_LOG_LEVELS}, "
            f"got '{raw_value}'. Set SCHEMAFS_LOG_LEVEL to a supported level."
        )
    return normalized
