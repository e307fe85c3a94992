from __future__ import annotations

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from sideaxes import reset_sideaxes_defaults  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_state():
    yield
    plt.close("all")
    reset_sideaxes_defaults()


@pytest.fixture
def fig():
    return plt.figure(figsize=(8.0, 6.0), dpi=100)


@pytest.fixture
def parent(fig):
    ax = fig.add_axes([0.1, 0.1, 0.8, 0.8])
    ax.set_xlim(0, 10)
    ax.set_ylim(0, 10)
    return ax
