"""``--set`` override parsing and merging stories."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from gullfoss.adapters.config.overrides import ConfigOverride, apply_overrides, coerce_value, parse_override


@pytest.mark.os_agnostic
def test_parse_override_splits_section_key_and_value() -> None:
    """SECTION.KEY=VALUE yields a ConfigOverride."""
    assert parse_override("greeting.language=english") == ConfigOverride(
        section="greeting", key_path=("language",), value="english"
    )


@pytest.mark.os_agnostic
def test_parse_override_keeps_equals_signs_in_value() -> None:
    """Only the first '=' separates key from value."""
    assert parse_override("s.k=a=b").value == "a=b"


@pytest.mark.os_agnostic
def test_parse_override_supports_nested_keys() -> None:
    """Dotted keys become a key path."""
    assert parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path == ("payload_limits", "max_chars")


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("greeting.language", "must contain '='"),
        ("language=english", "at least one dot"),
        (".language=english", "section name is empty"),
        ("greeting..language=english", "empty component"),
        ("greeting.=english", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    """Malformed overrides raise ValueError with a specific reason."""
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("42", 42), ("3.5", 3.5), ("null", None), ('["a"]', ["a"]), ("french", "french"), ("", "")],
)
def test_coerce_value_decodes_json_or_keeps_string(raw: str, expected: Any) -> None:
    """JSON literals are decoded, anything else stays a string."""
    assert coerce_value(raw) == expected


@pytest.mark.os_agnostic
def test_apply_overrides_merges_into_existing_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """An override replaces one key and leaves siblings alone."""
    config = config_factory({"greeting": {"language": "french", "other": 1}})

    result = apply_overrides(config, ("greeting.language=english",))

    assert result["greeting"] == {"language": "english", "other": 1}


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_object(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    """No overrides means no copy."""
    config = config_factory({})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_colliding_paths(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A scalar cannot later be treated as a table."""
    with pytest.raises(ValueError, match="already assigned"):
        apply_overrides(config_factory({}), ("s.a=1", "s.a.b=2"))
