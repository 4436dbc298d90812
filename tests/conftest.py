# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import pytest

from helpgrid.core.types import flag


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # point HELPGRID_HOME at an isolated temp directory
    fake_home = tmp_path / "helpgrid_home"
    fake_home.mkdir()
    monkeypatch.setenv("HELPGRID_HOME", str(fake_home))

    # ! reset global settings_manager state so it re-reads from the isolated location
    from helpgrid.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager._explicit_path = None

    # ! reset output manager to NullOutputManager for test isolation
    from helpgrid.core.output import reset_output_manager

    reset_output_manager()

    # ! reset shared CLI console
    from helpgrid.cli.console import reset_console

    reset_console()

    return fake_home


@pytest.fixture
def cli_flags():
    # flag set w/ aliases, defaults, multiple & both required forms
    return {
        "cwd": flag("Set current working directory for relative paths.", alias="c"),
        "ignoreConfigs": flag(
            "(CSV) Ignore configuration files to add new created files if any.",
            alias="i",
            default="node_modules,dist",
        ),
        "dry": flag("Prevents changes to be written to disk.", alias="d", type="boolean"),
        "verbose": flag("Outputs extra information.", alias="v", type="boolean", default=True),
        "linkSameDir": flag("Move files near original one for iCloudDrive.", type="boolean"),
        "colors": flag("Favorite colors.", alias="o", multiple=True, required=True),
        "size": flag("Size.", alias="s", type="number", required=lambda: True),
    }


@pytest.fixture
def help_spec_file(tmp_path):
    # JSON help spec on disk in the camelCase shape used by spec files
    import json

    spec = {
        "command": "not-sync",
        "description": "Disable file synchronization.",
        "args": {"path*": "Path to disable synchronization for."},
        "flags": {
            "cwd": {"alias": "c", "type": "string", "desc": "Working directory."},
            "size": {"type": "number", "default": 3, "isRequired": True, "desc": "Size."},
        },
        "groups": {"cwd": {"title": "General"}},
        "examples": ["not-sync node_modules"],
        "lineLength": 120,
    }
    path = tmp_path / "help.json"
    path.write_text(json.dumps(spec), encoding="utf-8")
    return path
