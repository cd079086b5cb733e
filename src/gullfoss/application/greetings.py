"""Greeting report use case composing the person and message providers."""

from __future__ import annotations

from typing import Final

from ..domain.enums import Language
from .ports import Greeter, PersonSource

PERSON_PROVIDER_LABEL: Final[str] = "Copyright of person-provider : "
TRANSLATOR_LABEL: Final[str] = "Copyright of translator : "


def build_greetings(persons: PersonSource, messages: Greeter, language: Language) -> list[str]:
    """Greet every provided name in ``language``, preserving order.

    Example:
        >>> from gullfoss.domain import MessageProvider, PersonProvider
        >>> build_greetings(PersonProvider(), MessageProvider(), Language.ENGLISH)[:2]
        ['Hello John !', 'Hello Jane !']
    """
    return [messages.say_hello_to(name, language) for name in persons.get_names()]


def build_report(persons: PersonSource, messages: Greeter, language: Language) -> list[str]:
    """Return the greetings followed by both labelled copyright lines.

    Collaborator failures propagate unchanged.

    Example:
        >>> from gullfoss.domain import MessageProvider, PersonProvider
        >>> lines = build_report(PersonProvider(), MessageProvider(), Language.FRENCH)
        >>> len(lines)
        6
        >>> lines[-1].startswith("Copyright of translator : Apache")
        True
    """
    lines = build_greetings(persons, messages, language)
    lines.append(PERSON_PROVIDER_LABEL + persons.get_copyright())
    lines.append(TRANSLATOR_LABEL + messages.get_copyright())
    return lines


__all__ = [
    "PERSON_PROVIDER_LABEL",
    "TRANSLATOR_LABEL",
    "build_greetings",
    "build_report",
]
