"""In-memory provider doubles for testing.

Contents:
    * :class:`StubPersonProvider` - Configurable names, optional failure.
    * :class:`GreeterSpy` - Records every greeting request.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.copyright import COPYRIGHT_NOTICE
from ...domain.enums import Language
from ...domain.persons import REFERENCE_NAMES
from ...domain.translator import MessageProvider


def _reference_names() -> list[str]:
    return list(REFERENCE_NAMES)


def _empty_call_list() -> list[tuple[str, Language]]:
    return []


@dataclass
class StubPersonProvider:
    """Person source returning configured names.

    Attributes:
        names: Names returned by :meth:`get_names`.
        copyright: Notice returned by :meth:`get_copyright`.
        raise_exception: When set, :meth:`get_names` raises it.

    Example:
        >>> StubPersonProvider(names=["Ada"]).get_names()
        ['Ada']
    """

    names: list[str] = field(default_factory=_reference_names)
    copyright: str = COPYRIGHT_NOTICE
    raise_exception: Exception | None = None

    def get_names(self) -> list[str]:
        if self.raise_exception is not None:
            raise self.raise_exception
        return list(self.names)

    def get_copyright(self) -> str:
        return self.copyright


@dataclass
class GreeterSpy:
    """Greeter that records each call and delegates to :class:`MessageProvider`.

    Each test should build its own spy to avoid cross-test pollution.

    Example:
        >>> spy = GreeterSpy()
        >>> spy.say_hello_to("Ada", Language.ENGLISH)
        'Hello Ada !'
        >>> spy.calls
        [('Ada', <Language.ENGLISH: 'english'>)]
    """

    calls: list[tuple[str, Language]] = field(default_factory=_empty_call_list)
    delegate: MessageProvider = field(default_factory=MessageProvider)

    def clear(self) -> None:
        """Reset captured calls for the next test."""
        self.calls.clear()

    def say_hello_to(self, person_name: str, language: Language) -> str:
        self.calls.append((person_name, language))
        return self.delegate.say_hello_to(person_name, language)

    def get_copyright(self) -> str:
        return self.delegate.get_copyright()


__all__ = [
    "GreeterSpy",
    "StubPersonProvider",
]
