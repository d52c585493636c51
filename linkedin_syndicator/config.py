"""Configuration loader for linkedin-syndicator.

Loads a YAML config file with environment variable overrides.
All env vars use the LINKEDIN_ prefix.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from linkedin_syndicator.client import DEFAULT_API_VERSION
from linkedin_syndicator.content import DEFAULT_CHARACTER_LIMIT

ENV_PREFIX = "LINKEDIN_"


@dataclass
class SyndicatorConfig:
    """Options for the LinkedIn syndicator."""
    access_token: str = ""
    character_limit: int = DEFAULT_CHARACTER_LIMIT
    checked: bool = False
    posts_api_version: str = DEFAULT_API_VERSION
    author_name: str = ""
    author_profile_url: str = ""
    live_mode: bool = False


def load_config(path: Path | None = None) -> SyndicatorConfig:
    """Load config from YAML file with env var overrides.

    Env vars override YAML values. Mapping:
      LINKEDIN_ACCESS_TOKEN → linkedin.access_token
      LINKEDIN_CHARACTER_LIMIT → linkedin.character_limit
      LINKEDIN_POSTS_API_VERSION → linkedin.posts_api_version
      LINKEDIN_AUTHOR_NAME → linkedin.author_name
      LINKEDIN_AUTHOR_PROFILE_URL → linkedin.author_profile_url
      LINKEDIN_CHECKED → linkedin.checked
      LINKEDIN_LIVE_MODE → live_mode
    """
    raw: dict[str, Any] = {}
    if path and path.exists():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raw = {}

    linkedin = raw.get("linkedin") or {}

    return SyndicatorConfig(
        access_token=_env_or("ACCESS_TOKEN", linkedin.get("access_token", "")),
        character_limit=_env_int(
            "CHARACTER_LIMIT",
            linkedin.get("character_limit", DEFAULT_CHARACTER_LIMIT),
        ),
        checked=_env_bool("CHECKED", linkedin.get("checked", False)),
        posts_api_version=str(_env_or(
            "POSTS_API_VERSION",
            linkedin.get("posts_api_version", DEFAULT_API_VERSION),
        )),
        author_name=_env_or("AUTHOR_NAME", linkedin.get("author_name", "")),
        author_profile_url=_env_or(
            "AUTHOR_PROFILE_URL",
            linkedin.get("author_profile_url", ""),
        ),
        live_mode=_env_bool("LIVE_MODE", raw.get("live_mode", False)),
    )


def _env_or(suffix: str, default: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}{suffix}", default)


def _env_bool(suffix: str, default: bool) -> bool:
    val = os.environ.get(f"{ENV_PREFIX}{suffix}")
    if val is None:
        return bool(default)
    return val.lower() in ("true", "1", "yes")


def _env_int(suffix: str, default: int) -> int:
    val = os.environ.get(f"{ENV_PREFIX}{suffix}", default)
    try:
        limit = int(val)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{ENV_PREFIX}{suffix} must be an integer, got {val!r}") from exc
    if limit <= 0:
        raise ValueError(f"{ENV_PREFIX}{suffix} must be positive, got {limit}")
    return limit
