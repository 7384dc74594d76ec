"""Scaffolding settings"""

from .config import CommandsConfig, LoggingConfig, ScaffoldConfig
from .loader import load_config, resolve_env_variables

__all__ = [
    "CommandsConfig",
    "LoggingConfig",
    "ScaffoldConfig",
    "load_config",
    "resolve_env_variables",
]
