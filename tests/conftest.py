"""Pytest configuration and shared fixtures."""

import argparse
import os

import pytest

from tfsage.lib.output import SilentNotifier, set_color_enabled


@pytest.fixture(autouse=True)
def disable_color():
    """Keep notices free of ANSI codes so output can be asserted on."""
    set_color_enabled(False)
    yield
    set_color_enabled(None)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point XDG settings lookup at an empty directory and drop TFSAGE_* vars."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".xdg"))
    for key in list(os.environ):
        if key.startswith("TFSAGE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def project_dir(tmp_path):
    """Create a project tree with dev and staging configurations.

    Layout::

        env/
          configs/dev/
          configs/staging/
          main.tpl          "Environment: {{CONFIG_NAME}}"

    Returns
    -------
    Path
        Path to the project directory.
    """
    root = tmp_path / "env"
    (root / "configs" / "dev").mkdir(parents=True)
    (root / "configs" / "staging").mkdir(parents=True)
    (root / "main.tpl").write_text("Environment: {{CONFIG_NAME}}")
    return root


@pytest.fixture
def silent():
    """Notifier that prints nothing."""
    return SilentNotifier()


@pytest.fixture
def mock_config():
    """Standard test settings.

    Returns
    -------
    dict
        Settings dictionary as produced by ConfigLoader.load().
    """
    return {
        "terraform": {"binary": "terraform"},
        "template": {"name": "main.tpl"},
        "_meta": {"config_sources": []},
    }


@pytest.fixture
def make_ctx(mock_config):
    """Factory building a command context from argument values.

    Returns
    -------
    Callable[..., dict]
        Function taking keyword arguments for the parsed namespace plus
        ``dry_run``.
    """

    def _make_ctx(dry_run: bool = False, **arg_values) -> dict:
        defaults = {
            "directory": ".",
            "target": None,
            "template": None,
            "out": None,
            "cleanup": False,
            "capture_output": False,
            "extra": [],
        }
        defaults.update(arg_values)
        return {
            "config": mock_config,
            "verbose": False,
            "quiet": False,
            "dry_run": dry_run,
            "notifier": SilentNotifier(),
            "args": argparse.Namespace(**defaults),
        }

    return _make_ctx

