"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Only the first ``=`` separates path from value, so values may contain
    ``=`` themselves.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or any path
            component is empty.

    Examples:
        >>> parse_override("greeting.language=english")
        ConfigOverride(section='greeting', key_path=('language',), value='english')

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, key = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(key.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, falling back to the string itself.

    Examples:
        >>> coerce_value("42"), coerce_value("true"), coerce_value("null")
        (42, True, None)
        >>> coerce_value("english")
        'english'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _merge_into(target: dict[str, object], override: ConfigOverride) -> None:
    node = cast("dict[str, object]", target.setdefault(override.section, {}))
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"Cannot set {part!r}.*: already assigned a {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged in.

    Returns the original object untouched when there is nothing to apply.

    Raises:
        ValueError: If any override is malformed or two overrides collide.

    Examples:
        >>> cfg = Config({"greeting": {"language": "french"}}, {})
        >>> apply_overrides(cfg, ("greeting.language=english",))["greeting"]["language"]
        'english'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    merged: dict[str, object] = {}
    for raw in raw_overrides:
        _merge_into(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
