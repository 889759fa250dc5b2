"""Global pytest configuration.

This file provides fixtures shared by the whole test suite.
"""

from pathlib import Path

import pytest


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Directory the config writers render into."""
    directory = tmp_path / "conf"
    directory.mkdir()
    return directory
