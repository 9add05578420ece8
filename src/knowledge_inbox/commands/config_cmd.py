# src/knowledge_inbox/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

from pathlib import Path

from knowledge_inbox.commands.base import ConfigResult, SettingInfo
from knowledge_inbox.config import (
    ConfigError,
    build_settings,
    find_config_file,
    get_inbox_config,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
)

# Settings shown by the config command, in display order
DISPLAYED_SETTINGS = [
    "embedding_mode",
    "embedding_dimensions",
    "chunk_size",
    "chunk_overlap",
    "max_content_length",
    "max_chunks_per_item",
    "default_k",
    "synthesis_temperature",
    "synthesis_max_tokens",
    "num_retries",
]


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    if "profile" in env_settings or "profile" in yaml_settings:
        return "profile/default"
    return "default"


def config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    inbox_config = get_inbox_config(data_dir, config_path)
    if isinstance(inbox_config, ConfigError):
        return ConfigResult(success=False, error=inbox_config.message)

    file_config = load_config(config_path)
    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(file_config)
    settings = build_settings(file_config, env_settings)

    found_config_path = Path(config_path) if config_path else find_config_file()

    result = ConfigResult(
        success=True,
        llm_model=inbox_config.llm_model,
        embedding_model=inbox_config.embedding_model,
        data_dir=inbox_config.data_dir,
        storage=inbox_config.storage,
        vector_index=inbox_config.vector_index,
        config_path=str(found_config_path) if found_config_path else None,
    )

    for key in DISPLAYED_SETTINGS:
        value = getattr(settings, key)
        result.settings.append(
            SettingInfo(
                name=key,
                value="unlimited" if value is None else str(value),
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
