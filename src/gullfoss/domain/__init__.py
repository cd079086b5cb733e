"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.copyright` - Shared copyright notice and its provider
    * :mod:`.persons` - Person provider (fixed list of names)
    * :mod:`.translator` - Message provider (per-language greetings)
    * :mod:`.enums` - Domain enumerations (Language, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .copyright import COPYRIGHT_NOTICE, DEFAULT_COPYRIGHT_PROVIDER, CopyrightProvider
from .enums import Language, OutputFormat
from .errors import ConfigurationError, InvalidArgumentError, UnknownLanguageError
from .persons import REFERENCE_NAMES, PersonProvider
from .translator import GREETING_TEMPLATES, MessageProvider, greeting_template

__all__ = [
    # Providers
    "COPYRIGHT_NOTICE",
    "DEFAULT_COPYRIGHT_PROVIDER",
    "CopyrightProvider",
    "GREETING_TEMPLATES",
    "MessageProvider",
    "REFERENCE_NAMES",
    "PersonProvider",
    "greeting_template",
    # Enums
    "Language",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidArgumentError",
    "UnknownLanguageError",
]
