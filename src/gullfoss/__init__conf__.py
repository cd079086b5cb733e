"""Static package metadata surfaced to CLI commands and documentation.

Kept in sync with ``pyproject.toml`` so the CLI can report its identity
without importing ``importlib.metadata`` at startup.

Contents:
    * Identity constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config to locate
      platform-specific configuration directories.
    * :func:`print_info` - render the metadata block for ``gullfoss info``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "gullfoss"
title: Final[str] = "Greet a fixed list of people in a selectable language"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/gofannon-io/gullfoss"
author: Final[str] = "gofannon"
author_email: Final[str] = "gofannon@example.org"
shell_command: Final[str] = "gullfoss"

#: Vendor directory name on macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "gofannon"
#: Application directory name on macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "Gullfoss"
#: XDG slug and environment variable prefix.
LAYEREDCONF_SLUG: Final[str] = "gullfoss"


def print_info() -> None:
    """Print the package metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for gullfoss:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
