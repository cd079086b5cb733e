"""Type-safe domain enums for greeting languages and output formats."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Languages the translator can greet in.

    Closed set: adding a member requires a matching greeting template in
    :mod:`gullfoss.domain.translator`, which refuses to import otherwise.
    Inherits from str so configuration values and Click choices map
    directly onto members.

    Attributes:
        ENGLISH: Greet with ``Hello``.
        FRENCH: Greet with ``Bonjour``.

    Example:
        >>> Language.FRENCH.value
        'french'
        >>> Language("english") is Language.ENGLISH
        True
    """

    ENGLISH = "english"
    FRENCH = "french"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Language",
    "OutputFormat",
]
