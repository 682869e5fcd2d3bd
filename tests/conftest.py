import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))


@pytest.fixture(scope="session")
def project_root() -> Path:
    return ROOT


@pytest.fixture()
def sample_axes():
    return [
        ("Speed", 3),
        ("Accuracy", 4),
        ("Creativity", 3),
        ("Persistence", 4),
        ("Teamwork", 3),
    ]
