"""Copyright notice shared by every provider in the package."""

from __future__ import annotations

from typing import Final

COPYRIGHT_NOTICE: Final[str] = "Apache License, Version 2.0 - Copyright (c) gofannon.io"


class CopyrightProvider:
    """Expose the package-wide copyright notice.

    Stateless; one instance can be shared by any number of providers.

    Example:
        >>> CopyrightProvider().get_copyright().startswith("Apache")
        True
    """

    __slots__ = ()

    def get_copyright(self) -> str:
        """Return :data:`COPYRIGHT_NOTICE`."""
        return COPYRIGHT_NOTICE


#: Instance injected into providers that are built without an explicit one.
DEFAULT_COPYRIGHT_PROVIDER: Final[CopyrightProvider] = CopyrightProvider()


__all__ = [
    "COPYRIGHT_NOTICE",
    "DEFAULT_COPYRIGHT_PROVIDER",
    "CopyrightProvider",
]
