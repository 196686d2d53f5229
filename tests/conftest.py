from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rich.console import Console  # noqa: E402

from tests.fixtures.fake_installer import RecordingInstaller  # noqa: E402
from tsforge.reporter import Reporter  # noqa: E402


@pytest.fixture()
def installer() -> RecordingInstaller:
    return RecordingInstaller()


@pytest.fixture()
def reporter() -> Reporter:
    """Reporter writing to an in-memory console so output can be asserted."""

    return Reporter(Console(file=io.StringIO(), width=120, force_terminal=False))
