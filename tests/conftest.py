"""Root test configuration: isolate every test from local config and env"""

import pytest

from gemtext2md.config import ENV_PREFIX, Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run from a clean tmp directory with no GEMTEXT2MD_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)
