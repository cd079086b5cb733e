"""Person provider supplying the fixed list of people to greet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .copyright import DEFAULT_COPYRIGHT_PROVIDER, CopyrightProvider

REFERENCE_NAMES: Final[tuple[str, ...]] = ("John", "Jane", "Olivier", "Olivia")


def _default_copyright_provider() -> CopyrightProvider:
    return DEFAULT_COPYRIGHT_PROVIDER


@dataclass(frozen=True, slots=True)
class PersonProvider:
    """Provide the ordered list of names and re-expose the copyright notice.

    Attributes:
        copyright_provider: Source of :meth:`get_copyright`. Defaults to the
            package-wide shared instance.

    Example:
        >>> PersonProvider().get_names()
        ['John', 'Jane', 'Olivier', 'Olivia']
    """

    copyright_provider: CopyrightProvider = field(default_factory=_default_copyright_provider)

    def get_names(self) -> list[str]:
        """Return a fresh list of the reference names, in order.

        Callers may mutate the returned list; later calls are unaffected.
        """
        return list(REFERENCE_NAMES)

    def get_copyright(self) -> str:
        """Return the injected provider's copyright notice verbatim."""
        return self.copyright_provider.get_copyright()


__all__ = [
    "REFERENCE_NAMES",
    "PersonProvider",
]
