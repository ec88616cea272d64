"""Configuration.

Precedence: command-line flags > config file > defaults. The config file
is JSON with camelCase keys (snake_case accepted too):

    {
      "country": "US",
      "types": ["Scripted", "Reality"],
      "minAirtime": "18:00",
      "showNameFilter": ["Days of Our Lives"],
      "slack": {"token": "xoxb-...", "channelId": "C123"}
    }

Lookup order for the file: explicit path, $WHATSONTV_CONFIG, then
./config.json. SLACK_TOKEN and SLACK_CHANNEL override the file's Slack
settings.
"""

import json
import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from whatsontv.core.errors import ConfigError
from whatsontv.core.types import FetchSource, ShowOptions
from whatsontv.providers.tvmaze.normalizer import DEFAULT_STREAMING_BRANDS, streaming_brands_for
from whatsontv.utilities.time import get_today_date, is_valid_time

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WHATSONTV_CONFIG"
DEFAULT_CONFIG_FILE = "config.json"

DEFAULT_COUNTRY = "US"
DEFAULT_MIN_AIRTIME = "18:00"
DEFAULT_NOTIFICATION_TIME = "09:00"


def to_string_list(value: Any, split: bool = True) -> list[str]:
    """Flatten a string, comma-separated string, or iterable of them.

    'a, b' -> ['a', 'b']; ['a,b', 'c'] -> ['a', 'b', 'c']; None -> [].
    Entries are trimmed and empty entries dropped. With split=False commas
    are kept (show names may contain them).
    """
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",") if split else [value]
        return [part.strip() for part in parts if part.strip()]
    if isinstance(value, Iterable):
        result = []
        for item in value:
            result.extend(to_string_list(item, split) if isinstance(item, str) else [str(item)])
        return result
    return [str(value)]


def coerce_fetch_source(value: Any) -> FetchSource:
    """'network' | 'web' | 'all' (any case) -> FetchSource; default ALL."""
    if isinstance(value, FetchSource):
        return value
    if not value:
        return FetchSource.ALL
    try:
        return FetchSource(str(value).strip().lower())
    except ValueError:
        logger.warning("[CONFIG] Unknown fetch source '%s', using 'all'", value)
        return FetchSource.ALL


def _default_streaming_brands() -> dict[str, list[str]]:
    return {country: list(brands) for country, brands in DEFAULT_STREAMING_BRANDS.items()}


# =============================================================================
# PYDANTIC MODELS
# =============================================================================


class SlackSettings(BaseModel):
    """Slack credentials and message defaults."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    token: str = ""
    channel_id: str = Field(default="", alias="channelId")
    username: str = "WhatsOnTV"
    icon_emoji: str | None = Field(default=None, alias="iconEmoji")
    date_format: str | None = Field(default=None, alias="dateFormat")

    @property
    def is_complete(self) -> bool:
        return bool(self.token and self.channel_id)


class AppConfig(BaseModel):
    """Contents of the config file, with defaults."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    country: str = DEFAULT_COUNTRY
    timezone: str | None = None
    types: list[str] = Field(default_factory=list)
    networks: list[str] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    min_airtime: str = Field(default=DEFAULT_MIN_AIRTIME, alias="minAirtime")
    notification_time: str = Field(default=DEFAULT_NOTIFICATION_TIME, alias="notificationTime")
    show_name_filter: list[str] = Field(default_factory=list, alias="showNameFilter")
    fetch_source: FetchSource = Field(default=FetchSource.ALL, alias="fetchSource")
    streaming_brands: dict[str, list[str]] = Field(
        default_factory=_default_streaming_brands, alias="streamingBrands"
    )
    slack: SlackSettings | None = None

    @field_validator("types", "networks", "genres", "languages", mode="before")
    @classmethod
    def _split_lists(cls, value: Any) -> list[str]:
        return to_string_list(value)

    @field_validator("show_name_filter", mode="before")
    @classmethod
    def _name_list(cls, value: Any) -> list[str]:
        return to_string_list(value, split=False)

    @field_validator("min_airtime", "notification_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        if value and not is_valid_time(value):
            raise ValueError(f"'{value}' is not a time of day (expected HH:MM)")
        return value

    @field_validator("fetch_source", mode="before")
    @classmethod
    def _check_fetch_source(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


# =============================================================================
# LOADING
# =============================================================================


def _resolve_config_path(path: str | os.PathLike | None) -> Path | None:
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    default = Path.cwd() / DEFAULT_CONFIG_FILE
    return default if default.is_file() else None


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    updates = {}
    token = os.environ.get("SLACK_TOKEN")
    channel = os.environ.get("SLACK_CHANNEL")
    if token:
        updates["token"] = token
    if channel:
        updates["channel_id"] = channel
    if not updates:
        return config

    slack = (config.slack or SlackSettings()).model_copy(update=updates)
    return config.model_copy(update={"slack": slack})


def load_config(path: str | os.PathLike | None = None) -> AppConfig:
    """Load and validate the config file.

    Args:
        path: Explicit config file path. Falls back to $WHATSONTV_CONFIG,
            then ./config.json, then built-in defaults.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or invalid
    """
    config_path = _resolve_config_path(path)

    if config_path is None:
        logger.debug("[CONFIG] No config file found, using defaults")
        return _apply_env_overrides(AppConfig())

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {config_path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    try:
        config = AppConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    logger.debug("[CONFIG] Loaded %s", config_path)
    return _apply_env_overrides(config)


# =============================================================================
# MERGING
# =============================================================================


def _arg(cli_args: Any, name: str) -> Any:
    if cli_args is None:
        return None
    if isinstance(cli_args, Mapping):
        return cli_args.get(name)
    return getattr(cli_args, name, None)


def _prefer_cli_list(cli_value: Any, config_value: Any, split: bool = True) -> tuple[str, ...]:
    cli_list = to_string_list(cli_value, split)
    return tuple(cli_list if cli_list else to_string_list(config_value, split))


def merge_show_options(cli_args: Any, app_config: AppConfig | None = None) -> ShowOptions:
    """Combine command-line arguments with the config file.

    A non-empty CLI list replaces the config list entirely; scalars use
    the CLI value when given. The date defaults to today in the configured
    timezone.

    Args:
        cli_args: argparse Namespace or mapping with CLI values
        app_config: Loaded config (defaults if None)
    """
    config = app_config or AppConfig()

    country = _arg(cli_args, "country") or config.country or DEFAULT_COUNTRY
    timezone = _arg(cli_args, "timezone") or config.timezone
    min_airtime = _arg(cli_args, "min_airtime")
    if min_airtime is None:
        min_airtime = config.min_airtime

    fetch = _arg(cli_args, "fetch")
    fetch_source = coerce_fetch_source(fetch) if fetch else config.fetch_source

    return ShowOptions(
        date=_arg(cli_args, "date") or get_today_date(timezone),
        country=country,
        types=_prefer_cli_list(_arg(cli_args, "types"), config.types),
        networks=_prefer_cli_list(_arg(cli_args, "networks"), config.networks),
        genres=_prefer_cli_list(_arg(cli_args, "genres"), config.genres),
        languages=_prefer_cli_list(_arg(cli_args, "languages"), config.languages),
        min_airtime=min_airtime,
        exclude_show_names=_prefer_cli_list(
            _arg(cli_args, "exclude_show"), config.show_name_filter, split=False
        ),
        fetch_source=fetch_source,
        timezone=timezone,
        streaming_brands=streaming_brands_for(country, config.streaming_brands),
    )
