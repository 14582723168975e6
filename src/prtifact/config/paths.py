"""Config path resolution for the two-tier config system."""

from pathlib import Path
from typing import Optional

CONFIG_DIR_NAME = ".prtifact"
CONFIG_FILE_NAME = "config.yaml"


def get_user_config_path() -> Path:
    """Get user config path: ~/.prtifact/config.yaml"""
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .prtifact/config.yaml in the working directory, if present."""
    project_config = Path.cwd() / CONFIG_DIR_NAME / CONFIG_FILE_NAME
    if project_config.exists():
        return project_config
    return None
