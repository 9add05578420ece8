# src/knowledge_inbox/config.py
"""Configuration loading utilities for Knowledge Inbox.

This module provides configuration loading that can be used by:
- CLI commands
- The HTTP server
- External applications using Knowledge Inbox as a library

It handles:
- Finding and loading inbox.yaml config files
- Loading .env files for API keys
- Building Settings objects from multiple sources
- Creating Inbox instances from configuration
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import pydantic
import yaml

if TYPE_CHECKING:
    from knowledge_inbox.inbox import Inbox
    from knowledge_inbox.settings import Settings

from knowledge_inbox.configuration.storage.local import VectorIndexKind

logger = logging.getLogger(__name__)

# Default paths and models
DEFAULT_DATA_DIR = "./inbox_data"
DEFAULT_LLM_MODEL = "openai/gpt-4o-mini"
CONFIG_FILES = ["inbox.yaml", "inbox.yml", ".inboxrc"]
ENV_FILE = ".env"

STORAGE_KINDS = ("local", "memory")
VECTOR_INDEX_KINDS = ("exact", "approximate")


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from .env file if it exists.

    Existing environment variables are never overridden.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("'\"")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# Valid configuration keys for validation
VALID_ROOT_KEYS = {
    "llm_model",
    "embedding_model",
    "api_base",
    "data_dir",
    "storage",
    "vector_index",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "profile",
    "chunk_size",
    "chunk_overlap",
    "chars_per_token",
    "max_content_length",
    "max_chunks_per_item",
    "embedding_mode",
    "embedding_dimensions",
    "default_k",
    "system_prompt",
    "synthesis_temperature",
    "synthesis_max_tokens",
    "keyword_confidence_scale",
    "max_text_length",
    "max_question_length",
    "max_top_k",
    "max_fetch_bytes",
    "fetch_timeout",
    "num_retries",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _optional(value: str) -> str | None:
    """Treat empty strings and "none" as unset."""
    if value == "" or value.lower() == "none":
        return None
    return value


INT_ENV_SETTINGS = {
    "INBOX_CHUNK_SIZE": "chunk_size",
    "INBOX_CHUNK_OVERLAP": "chunk_overlap",
    "INBOX_MAX_CONTENT_LENGTH": "max_content_length",
    "INBOX_MAX_CHUNKS_PER_ITEM": "max_chunks_per_item",
    "INBOX_EMBEDDING_DIMENSIONS": "embedding_dimensions",
    "INBOX_DEFAULT_K": "default_k",
    "INBOX_NUM_RETRIES": "num_retries",
}


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from INBOX_* environment variables.

    Returns only values that are explicitly set, so YAML settings apply
    unless overridden by env vars.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    for env_key, settings_key in INT_ENV_SETTINGS.items():
        if (val := _safe_int(os.environ.get(env_key))) is not None:
            result[settings_key] = val
    if (val := _safe_float(os.environ.get("INBOX_SYNTHESIS_TEMPERATURE"))) is not None:
        result["synthesis_temperature"] = val
    if "INBOX_EMBEDDING_MODE" in os.environ:
        result["embedding_mode"] = os.environ["INBOX_EMBEDDING_MODE"].lower()
    if "INBOX_SYSTEM_PROMPT" in os.environ:
        result["system_prompt"] = os.environ["INBOX_SYSTEM_PROMPT"] or None
    if "INBOX_PROFILE" in os.environ:
        result["profile"] = os.environ["INBOX_PROFILE"]

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the known keys of the YAML 'settings:' section."""
    yaml_settings = config.get("settings", {}) or {}
    return {key: value for key, value in yaml_settings.items() if key in VALID_SETTINGS_KEYS}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Chunking profile, when one is named
    4. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance

    Raises:
        ValueError: If a value is invalid or the profile is unknown
    """
    from knowledge_inbox.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    merged = {**yaml_settings, **env_settings}

    profile = merged.pop("profile", None)
    if profile:
        return Settings.with_profile(profile, **merged)
    return Settings(**merged)


@dataclass
class InboxConfig:
    """Configuration for creating an Inbox instance."""

    llm_model: str | None
    embedding_model: str | None
    data_dir: str
    settings: Settings
    storage: str = "local"
    vector_index: VectorIndexKind = "exact"
    api_key: str | None = None
    api_base: str | None = None


def _root_value(config: dict[str, Any], key: str, default: Any = None) -> Any:
    """Env var INBOX_<KEY> overrides the YAML root key."""
    env_key = f"INBOX_{key.upper()}"
    if env_key in os.environ:
        return _optional(os.environ[env_key])
    return config.get(key, default)


def get_inbox_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> InboxConfig | ConfigError:
    """Get configuration for creating an Inbox instance.

    This extracts configuration without creating the instance, allowing
    the caller to handle errors and missing values appropriately.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        InboxConfig with all settings, or ConfigError if invalid
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return ConfigError(
            message=f"Config file not found: {config_path}",
            suggestion="Check the --config path",
        )
    except yaml.YAMLError as e:
        return ConfigError(message=f"Invalid YAML in config file: {e}")

    try:
        settings = build_settings(config)
    except (pydantic.ValidationError, ValueError) as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Check the 'settings:' section of inbox.yaml and INBOX_* variables",
        )

    storage = _root_value(config, "storage", "local")
    if storage not in STORAGE_KINDS:
        return ConfigError(
            message=f"Unknown storage '{storage}'",
            suggestion=f"Supported storage: {', '.join(STORAGE_KINDS)}",
        )

    vector_index = _root_value(config, "vector_index", "exact")
    if vector_index not in VECTOR_INDEX_KINDS:
        return ConfigError(
            message=f"Unknown vector index '{vector_index}'",
            suggestion=f"Supported indexes: {', '.join(VECTOR_INDEX_KINDS)}",
        )

    return InboxConfig(
        llm_model=_root_value(config, "llm_model", DEFAULT_LLM_MODEL),
        embedding_model=_root_value(config, "embedding_model"),
        data_dir=data_dir or _root_value(config, "data_dir") or DEFAULT_DATA_DIR,
        settings=settings,
        storage=storage,
        vector_index=cast(VectorIndexKind, vector_index),
        api_key=os.environ.get("INBOX_API_KEY") or None,
        api_base=_root_value(config, "api_base"),
    )


def create_inbox(config: InboxConfig) -> Inbox:
    """Create an Inbox instance from configuration.

    Args:
        config: Configuration for the Inbox instance

    Returns:
        Configured Inbox instance
    """
    from knowledge_inbox.configuration import LiteLLMProvider, LocalStorage, MemoryStorage
    from knowledge_inbox.inbox import Inbox

    storage: LocalStorage | MemoryStorage
    if config.storage == "memory":
        storage = MemoryStorage(vector_index=config.vector_index)
    else:
        storage = LocalStorage(config.data_dir, vector_index=config.vector_index)

    return Inbox(
        provider=LiteLLMProvider(
            llm=config.llm_model,
            embedding=config.embedding_model,
            api_key=config.api_key,
            api_base=config.api_base,
        ),
        storage=storage,
        settings=config.settings,
    )


def get_inbox(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> Inbox | ConfigError:
    """Create an Inbox instance based on configuration.

    Convenience wrapper around get_inbox_config and create_inbox.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        Configured Inbox instance, or ConfigError if configuration is invalid
    """
    config = get_inbox_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_inbox(config)
