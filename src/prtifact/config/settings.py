"""Delivery settings: defaults, YAML files, environment and CLI overrides."""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from ..destinations.github_strategies import CommentMode
from ..destinations.web_comment import parse_comment_mode
from ..github.client import DEFAULT_API_URL, DEFAULT_TIMEOUT
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .paths import get_project_config_path, get_user_config_path

logger = get_logger("config.settings")

DEFAULT_HIDDEN_KEY = "<!-- prtifact-report -->"

# Environment variable -> settings field
ENV_VARS = {
    "GITHUB_TOKEN": "token",
    "GITHUB_RUN_ID": "workflow_run_id",
    "GITHUB_API_URL": "api_url",
    "PRTIFACT_ISSUE": "issue",
    "PRTIFACT_COMMENT_MODE": "comment_mode",
    "PRTIFACT_HIDDEN_KEY": "hidden_key",
    "PRTIFACT_SEPARATOR": "separator",
}


class DeliverySettings(BaseModel):
    """Everything needed to wire a delivery run."""

    owner: Optional[str] = Field(default=None, description="Repository owner")
    repo: Optional[str] = Field(default=None, description="Repository name")
    issue: Optional[int] = Field(default=None, gt=0, description="Issue or pull request number")
    workflow_run_id: Optional[int] = Field(default=None, gt=0, description="Run whose artifacts are reported")
    token: Optional[str] = Field(default=None, description="GitHub token")
    comment_mode: CommentMode = Field(default=CommentMode.CREATE_OR_UPDATE)
    hidden_key: str = Field(default=DEFAULT_HIDDEN_KEY, description="Marker identifying this tool's comment")
    separator: str = Field(default="\n", description="Inserted between old and new text in append modes")
    api_url: str = Field(default=DEFAULT_API_URL)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_workers: Optional[int] = Field(default=None, gt=0)
    console: bool = Field(default=True, description="Also print the report to the console")

    class Config:
        extra = "forbid"

    @field_validator("comment_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, CommentMode):
            return parse_comment_mode(value)
        return value

    @property
    def has_comment_target(self) -> bool:
        """True when owner, repo and issue are all known."""
        return bool(self.owner and self.repo and self.issue)

    @property
    def missing_comment_target(self) -> List[str]:
        """Names of the target parts still unset when only some of them are given."""
        parts = {"repository": self.owner and self.repo, "issue": self.issue}
        missing = [name for name, value in parts.items() if not value]
        return missing if len(missing) < len(parts) else []


def _read_yaml(path: Path, required: bool) -> Dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    logger.debug(f"Loaded config layer from {path}")
    return data


def _event_issue(event_path: Optional[str]) -> Optional[int]:
    """Pull request or issue number from the GitHub Actions event payload, if any."""
    if not event_path:
        return None
    path = Path(event_path)
    if not path.is_file():
        logger.debug(f"Event payload not found: {path}")
        return None
    try:
        with open(path, 'r', encoding='utf-8') as f:
            event = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in event payload {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading event payload {path}: {e}")
    if not isinstance(event, dict):
        return None
    for key in ("pull_request", "issue"):
        section = event.get(key)
        if isinstance(section, dict) and section.get("number"):
            return section["number"]
    return event.get("number") or None


def _env_layer(environ: Dict[str, str]) -> Dict[str, Any]:
    layer: Dict[str, Any] = {}
    repository = environ.get("GITHUB_REPOSITORY", "")
    if "/" in repository:
        layer["owner"], layer["repo"] = repository.split("/", 1)
    # PRTIFACT_ISSUE, read below, takes precedence
    event_issue = _event_issue(environ.get("GITHUB_EVENT_PATH"))
    if event_issue is not None:
        layer["issue"] = event_issue
    for var, key in ENV_VARS.items():
        value = environ.get(var)
        if value:
            layer[key] = value
    return layer


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_settings(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Dict[str, str]] = None
) -> DeliverySettings:
    """
    Build settings from every configuration layer.

    Precedence, lowest first: defaults, user config (~/.prtifact/config.yaml),
    project config (.prtifact/config.yaml), ``config_path``, environment
    (including the issue number of the GITHUB_EVENT_PATH payload),
    ``overrides`` (None values are skipped).

    Args:
        config_path: Optional explicit YAML file; must exist when given
        overrides: Values from the command line
        environ: Environment mapping (default: os.environ)

    Raises:
        ConfigError: If a file cannot be read or the merged values are invalid
    """
    merged: Dict[str, Any] = {}
    _deep_merge(merged, _read_yaml(get_user_config_path(), required=False))

    project_path = get_project_config_path()
    if project_path is not None:
        _deep_merge(merged, _read_yaml(project_path, required=False))

    if config_path is not None:
        _deep_merge(merged, _read_yaml(Path(config_path), required=True))

    _deep_merge(merged, _env_layer(dict(os.environ if environ is None else environ)))
    _deep_merge(merged, {k: v for k, v in (overrides or {}).items() if v is not None})

    try:
        return DeliverySettings(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid prtifact configuration: {e}") from e
