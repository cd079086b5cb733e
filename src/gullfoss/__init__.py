"""Public package surface exposing the providers, greeting use case and configuration.

Imports are routed through the architectural layers:
- Domain exports: providers, ``Language`` and error types
- Application exports: greeting report use case
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greetings import build_greetings, build_report

# Composition exports (wired adapters)
from .composition import build_production, get_config

# Domain exports
from .domain import (
    COPYRIGHT_NOTICE,
    CopyrightProvider,
    InvalidArgumentError,
    Language,
    MessageProvider,
    PersonProvider,
    UnknownLanguageError,
)

__all__ = [
    "COPYRIGHT_NOTICE",
    "CopyrightProvider",
    "InvalidArgumentError",
    "Language",
    "MessageProvider",
    "PersonProvider",
    "UnknownLanguageError",
    "build_greetings",
    "build_production",
    "build_report",
    "get_config",
    "print_info",
]
