"""Configuration module: layered delivery settings."""

from .paths import get_project_config_path, get_user_config_path
from .settings import DEFAULT_HIDDEN_KEY, DeliverySettings, load_settings

__all__ = [
    "DEFAULT_HIDDEN_KEY",
    "DeliverySettings",
    "load_settings",
    "get_project_config_path",
    "get_user_config_path",
]
