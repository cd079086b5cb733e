"""Ports: the Protocols adapters and providers satisfy.

Callable protocols define a ``__call__`` method whose signature matches the
corresponding adapter function. Provider protocols describe the methods the
greeting use case needs from the person and message providers. Existing
functions and classes satisfy these protocols via structural subtyping
(PEP 544).

System Role:
    Sits between domain and adapters. At runtime this module imports only
    from ``gullfoss.domain``; ``Config`` and ``GreetingConfig`` appear in
    annotations alone and are imported under ``TYPE_CHECKING``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import Language, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.greeting import GreetingConfig


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadGreetingConfigFromDict(Protocol):
    """Load GreetingConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreetingConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class PersonSource(Protocol):
    """Supply the ordered names to greet and a copyright notice."""

    def get_names(self) -> list[str]: ...

    def get_copyright(self) -> str: ...


class Greeter(Protocol):
    """Render a greeting for one name and expose a copyright notice."""

    def say_hello_to(self, person_name: str, language: Language) -> str: ...

    def get_copyright(self) -> str: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "Greeter",
    "InitLogging",
    "LoadGreetingConfigFromDict",
    "PersonSource",
]
