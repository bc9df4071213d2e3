"""Request file configuration for wall calculations.

Usage:
    from videowall.application.config import load_config, config_to_input

    config = load_config(Path("lobby-wall.json"))
    calculation_input = config_to_input(config)
"""

from videowall.application.config.adapter import config_to_input
from videowall.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from videowall.application.config.schema import (
    DEFAULT_LLM_MODEL,
    DEFAULT_OLLAMA_URL,
    SUPPORTED_VERSIONS,
    LlmConfig,
    WallRequestConfiguration,
)

__all__ = [
    "ConfigError",
    "DEFAULT_LLM_MODEL",
    "DEFAULT_OLLAMA_URL",
    "LlmConfig",
    "SUPPORTED_VERSIONS",
    "WallRequestConfiguration",
    "config_to_input",
    "load_config",
    "load_config_from_dict",
]
