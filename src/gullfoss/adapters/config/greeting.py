"""Parse the ``[greeting]`` configuration section into a typed model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from gullfoss.domain.enums import Language
from gullfoss.domain.errors import ConfigurationError


class GreetingConfig(BaseModel):
    """Validated ``[greeting]`` settings.

    Language names are matched case-insensitively and surrounding
    whitespace is ignored.

    Example:
        >>> GreetingConfig().language
        <Language.FRENCH: 'french'>
        >>> GreetingConfig.model_validate({"language": " English "}).language
        <Language.ENGLISH: 'english'>
    """

    language: Language = Language.FRENCH

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("language", mode="before")
    @classmethod
    def _normalise_language(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, Language):
            return value.strip().lower()
        return value


def load_greeting_config_from_dict(config_dict: Mapping[str, Any]) -> GreetingConfig:
    """Build :class:`GreetingConfig` from the full configuration mapping.

    Args:
        config_dict: Result of ``Config.as_dict()``; only the ``greeting``
            section is read.

    Returns:
        Parsed settings, defaults applied for missing keys.

    Raises:
        ConfigurationError: If the section holds an unsupported language or
            is not a table.

    Example:
        >>> load_greeting_config_from_dict({"greeting": {"language": "english"}}).language
        <Language.ENGLISH: 'english'>
        >>> load_greeting_config_from_dict({}).language
        <Language.FRENCH: 'french'>
    """
    raw = config_dict.get("greeting") or {}
    try:
        return GreetingConfig.model_validate(raw)
    except ValidationError as exc:
        choices = ", ".join(lang.value for lang in Language)
        raise ConfigurationError(f"Invalid [greeting] configuration (language must be one of: {choices}): {exc}") from exc


__all__ = [
    "GreetingConfig",
    "load_greeting_config_from_dict",
]
