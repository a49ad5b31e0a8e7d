"""Core constants used across schemafs modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

ROOT_PATH = "/"
PATH_SEPARATOR = "/"
ROOT_LOCAL_SOURCE_PATH = "."
TABLE_ASSETS_KEY = "assets"
TABLE_DIRECTORIES_KEY = "directories"
SUPPORTED_TABLE_EXTENSIONS = (".json", ".yaml", ".yml")
YAML_TABLE_EXTENSIONS = (".yaml", ".yml")
DEFAULT_TEXT_ENCODING = "utf-8"
DEFAULT_READDIR_COUNT = 0
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
TRUTHY_ENV_VALUES = ("1", "true", "yes", "on")
FALSY_ENV_VALUES = ("0", "false", "no", "off", "")
GZIP_FIXED_MTIME = 0
SCHEMA_SOURCE_DIR = Path(__file__).resolve().parent.parent / "schema" / "json"
