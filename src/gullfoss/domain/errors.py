"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[greeting]`` section holds a value the domain cannot
    use. Caught at the CLI boundary and mapped to ``EX_CONFIG``.

    Example:
        >>> err = ConfigurationError("Unknown language 'german'")
        >>> str(err)
        "Unknown language 'german'"
    """


class InvalidArgumentError(ValueError):
    """A domain operation received an argument outside its contract.

    Inherits from ValueError so generic ``except ValueError`` handlers
    still see it.

    Example:
        >>> err = InvalidArgumentError("person_name must be a string, got NoneType")
        >>> isinstance(err, ValueError)
        True
    """


class UnknownLanguageError(InvalidArgumentError):
    """The translator was asked for a language it has no template for.

    Example:
        >>> err = UnknownLanguageError("Unsupported language: 'german'")
        >>> isinstance(err, InvalidArgumentError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "UnknownLanguageError",
]
