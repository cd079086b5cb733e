"""CLI command implementations.

Contents:
    * Greeting commands from :mod:`.greet`
    * Config command from :mod:`.config`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .config import cli_config
from .greet import cli_copyright, cli_greet, cli_hello, cli_names
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_copyright",
    "cli_greet",
    "cli_hello",
    "cli_info",
    "cli_names",
]
