"""Configuration loading from YAML and environment.

Only ambient settings are configurable (API access and logging). The
repository, branch, page size and ranking size of the reports are fixed
constants below. Never put real tokens in config files committed to the
repo: use GITHUB_TOKEN, or GITHUB_TOKEN_FILE for Docker secrets.
"""

import os
import re
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REPOSITORY = "llvm/llvm-project"
TARGET_BRANCH = "main"
PAGE_SIZE = 100
TOP_N = 10

# Whole-value reference: ${VAR} or $VAR
_ENV_REF_RE = re.compile(r"^\$(?:\{\s*(\w+)\s*\}|(\w+))$")


class GitHubConfig(BaseSettings):
    """GitHub API settings (env: GITHUB_TOKEN, GITHUB_TOKEN_FILE,
    GITHUB_API_URL)."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; anonymous when unset")
    token_file: str | None = Field(default=None, description="File holding the token (Docker secret)")
    api_url: str = Field(default="https://api.github.com", description="API base URL")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Token from config/env, else from token_file; an unexpanded
        $VAR reference counts as unset."""
        token = self.github.token
        if token and not _ENV_REF_RE.match(token):
            return token.strip()
        if self.github.token_file:
            return Path(self.github.token_file).read_text().strip()
        return None


def _expand_env(value: Any, env: Mapping[str, str]) -> Any:
    """Replace whole-value $VAR references in strings and nested dicts.

    Unknown variables are left as written.
    """
    if isinstance(value, dict):
        return {k: _expand_env(v, env) for k, v in value.items()}
    if isinstance(value, str):
        match = _ENV_REF_RE.match(value.strip())
        if match:
            return env.get(match.group(1) or match.group(2), value)
    return value


def load_config(config_path: Path | None = None, env: Mapping[str, str] | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file is not an error: defaults and env apply. Values set in
    the file win over env.
    """
    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _expand_env(raw, os.environ if env is None else env)

    return AppConfig(
        github=GitHubConfig(**(raw.get("github") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
