"""Centralized lib_log_rich initialization for every entry point.

The console script, ``python -m gullfoss`` and the test-suite all reach
logging through :func:`init_logging`, so the runtime is configured the same
way regardless of how the CLI was started.

Contents:
    * :class:`LoggingConfigModel` - ``[lib_log_rich]`` section model.
    * :func:`init_logging` - idempotent runtime initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from gullfoss import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` configuration section.

    Unknown keys are kept and forwarded to ``RuntimeConfig`` untouched.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="DEBUG").model_dump(exclude_none=True)["console_level"]
        'DEBUG'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto ``RuntimeConfig``.

    ``service`` falls back to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Loads ``.env`` files so ``LOG_*`` variables take effect, builds the
    runtime from ``config`` and bridges stdlib ``logging`` so domain and
    adapter modules can keep using ``logging.getLogger(__name__)``.
    Later calls return immediately.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
