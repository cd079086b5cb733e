"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"
PACKAGE_DIR = PROJECT_ROOT / "src" / "gullfoss"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    tool = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    return cast(dict[str, Any], tool["hatch"]["build"]["targets"]["wheel"])


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info outputs name and version."""
    from gullfoss import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "gullfoss" in captured
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_matches_pyproject() -> None:
    """Static metadata stays in sync with pyproject.toml."""
    from gullfoss import __init__conf__

    project = cast(dict[str, Any], _load_pyproject()["project"])

    assert __init__conf__.name == project["name"]
    assert __init__conf__.version == project["version"]
    assert project["scripts"][__init__conf__.shell_command] == "gullfoss.entry:main"


@pytest.mark.os_agnostic
def test_py_typed_marker_exists_and_ships_in_wheel() -> None:
    """PEP 561 marker exists and is listed in wheel includes."""
    assert (PACKAGE_DIR / "py.typed").is_file()
    assert any("py.typed" in entry for entry in _wheel_table().get("include", []))


@pytest.mark.os_agnostic
def test_default_config_ships_in_wheel() -> None:
    """defaultconfig.toml is listed in wheel includes."""
    assert any(entry.endswith("defaultconfig.toml") for entry in _wheel_table().get("include", []))


@pytest.mark.os_agnostic
def test_coverage_measures_the_installed_package() -> None:
    """pytest --cov reports on gullfoss, and pytest-cov is in the dev extra."""
    pyproject = _load_pyproject()
    coverage = cast(dict[str, Any], pyproject["tool"]["coverage"])
    dev_requirements = cast(list[str], pyproject["project"]["optional-dependencies"]["dev"])

    assert coverage["run"]["source"] == ["gullfoss"]
    assert coverage["run"]["branch"] is True
    assert any(requirement.startswith("pytest-cov") for requirement in dev_requirements)
