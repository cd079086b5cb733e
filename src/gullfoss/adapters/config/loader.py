"""Configuration loader with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from gullfoss import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """``get_config`` as callers see it: cached, and resettable between tests."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject profile names lib_layered_config would not accept.

    Raises:
        ValueError: If the name is empty, too long, contains path separators
            or other invalid characters.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Loaded once per (profile, start_dir) for the lifetime of the CLI process.
@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration with the bundled defaults.

    Precedence: defaults → app → host → user → dotenv → env. With a
    profile, every layer is read from its ``profile/<name>/`` subdirectory.

    Args:
        profile: Optional profile name, validated before loading.
        start_dir: Directory that seeds ``.env`` discovery. Defaults to the
            current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("greeting", default={}).get("language")
        'french'
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached configurations so the next call re-reads every layer."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible once the loader is cast to a Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
