import json
import os
import sys

import pytest

# Ensure the project root is on sys.path so `ramayana` imports without installing
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from ramayana.core.sample import SAMPLE_JSON  # noqa: E402


@pytest.fixture
def sample_payload() -> dict:
    """The embedded sample as a plain dict, safe to mutate."""
    return json.loads(SAMPLE_JSON)


@pytest.fixture
def bundled_bytes() -> bytes:
    """The data file shipped in ramayana/data/."""
    with open(os.path.join(PROJECT_ROOT, "ramayana", "data", "ramayana_data.json"), "rb") as f:
        return f.read()


@pytest.fixture
def bundle_dir(tmp_path, bundled_bytes):
    (tmp_path / "ramayana_data.json").write_bytes(bundled_bytes)
    return tmp_path
