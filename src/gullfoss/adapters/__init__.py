"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - rich-click CLI
    * :mod:`.config` - Configuration loading, display and overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory doubles for tests
"""

from __future__ import annotations

__all__: list[str] = []
