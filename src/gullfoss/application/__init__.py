"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for adapters and providers
    * :mod:`.greetings` - Greeting report use case
"""

from __future__ import annotations

from .greetings import PERSON_PROVIDER_LABEL, TRANSLATOR_LABEL, build_greetings, build_report
from .ports import (
    DisplayConfig,
    GetConfig,
    Greeter,
    InitLogging,
    LoadGreetingConfigFromDict,
    PersonSource,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "Greeter",
    "InitLogging",
    "LoadGreetingConfigFromDict",
    "PERSON_PROVIDER_LABEL",
    "PersonSource",
    "TRANSLATOR_LABEL",
    "build_greetings",
    "build_report",
]
