from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the repo root (containing `typed_env/`) is importable when pytest
# picks `tests/` as the rootdir (e.g., single-file runs).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def environ() -> dict[str, str]:
    """A detached environment mapping; tests never touch os.environ through it."""

    return {
        "APP_DEBUG": " TRUE ",
        "APP_NAME": "  demo  ",
        "APP_PORT": "8080",
        "APP_RATIO": "2.5e-1",
        "APP_HOSTS": "a.example, b.example ,c.example",
        "APP_WEIGHTS": "1;2.5;-3",
        "APP_BROKEN_PORT": "eighty",
        "APP_PROXY": "NULL",
        "APP_EMPTY": "",
    }
