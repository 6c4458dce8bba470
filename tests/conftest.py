"""Shared test fixtures for the debug tools tests."""
import shutil
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from debug_tools.utils.visualization import create_figure

CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"


@pytest.fixture
def config_dir(tmp_path):
    """Copy of the shipped configs in a scratch directory."""
    target = tmp_path / "configs"
    shutil.copytree(CONFIG_DIR, target)
    return target


@pytest.fixture
def display():
    """(fig, ax) pair for a 256x256 display, closed after the test."""
    fig, ax = create_figure((256, 256), scale=1)
    yield fig, ax
    plt.close(fig)
