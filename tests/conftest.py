import pytest

from parbench import config


@pytest.fixture(autouse=True)
def _log_dir(tmp_path, monkeypatch):
    # Keep the JSON-lines event log out of the working directory.
    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path / "logs"))
