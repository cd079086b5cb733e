"""Message provider rendering greetings in a selected language.

Contents:
    * :data:`GREETING_TEMPLATES` - total ``Language`` -> template table.
    * :class:`MessageProvider` - renders greetings, re-exposes the copyright.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from .copyright import DEFAULT_COPYRIGHT_PROVIDER, CopyrightProvider
from .enums import Language
from .errors import InvalidArgumentError, UnknownLanguageError

#: One ``%s`` placeholder per template. The space before ``!`` is part of the output.
GREETING_TEMPLATES: Final[Mapping[Language, str]] = MappingProxyType(
    {
        Language.ENGLISH: "Hello %s !",
        Language.FRENCH: "Bonjour %s !",
    }
)

_missing = set(Language) - set(GREETING_TEMPLATES)
if _missing:
    raise RuntimeError(f"No greeting template for: {sorted(lang.name for lang in _missing)}")
del _missing


def _default_copyright_provider() -> CopyrightProvider:
    return DEFAULT_COPYRIGHT_PROVIDER


def greeting_template(language: Language) -> str:
    """Return the greeting template for ``language``.

    Args:
        language: A :class:`Language` member.

    Returns:
        Template string with a single ``%s`` placeholder.

    Raises:
        UnknownLanguageError: If ``language`` is not a :class:`Language` member.
            Plain strings are rejected even when they equal a member's value.

    Example:
        >>> greeting_template(Language.ENGLISH)
        'Hello %s !'
    """
    if not isinstance(language, Language):
        raise UnknownLanguageError(f"Unsupported language: {language!r}")
    return GREETING_TEMPLATES[language]


@dataclass(frozen=True, slots=True)
class MessageProvider:
    """Render greetings and re-expose the copyright notice.

    Attributes:
        copyright_provider: Source of :meth:`get_copyright`.

    Example:
        >>> provider = MessageProvider()
        >>> provider.say_hello_to("John", Language.FRENCH)
        'Bonjour John !'
        >>> provider.say_hello_to("", Language.FRENCH)
        'Bonjour  !'
    """

    copyright_provider: CopyrightProvider = field(default_factory=_default_copyright_provider)

    def say_hello_to(self, person_name: str, language: Language) -> str:
        """Greet ``person_name`` in ``language``.

        The name is substituted as-is: empty or unusual strings are not
        special-cased.

        Args:
            person_name: Any string, including the empty string.
            language: A :class:`Language` member.

        Returns:
            The rendered greeting.

        Raises:
            InvalidArgumentError: If ``person_name`` is not a string.
            UnknownLanguageError: If ``language`` is not a :class:`Language` member.
        """
        if not isinstance(person_name, str):
            raise InvalidArgumentError(f"person_name must be a string, got {type(person_name).__name__}")
        return greeting_template(language) % person_name

    def get_copyright(self) -> str:
        """Return the injected provider's copyright notice verbatim."""
        return self.copyright_provider.get_copyright()


__all__ = [
    "GREETING_TEMPLATES",
    "MessageProvider",
    "greeting_template",
]
