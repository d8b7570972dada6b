from __future__ import annotations

from pathlib import Path

import pytest

from mostle.utils import logging_config
from mostle.utils.logging_config import LogFiles, Logger, get_trace_id, set_trace_id


@pytest.fixture()
def log_dir(tmp_path: Path, monkeypatch):
    Logger.close()
    monkeypatch.setenv("MOSTLE_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("MOSTLE_LOG_LEVEL", "INFO")
    yield tmp_path
    Logger.close()


def test_log_files_from_yaml():
    assert LogFiles.API == "api/api.log"
    assert LogFiles.SEED == "seed/seed.log"
    assert LogFiles.get("unknown") == "unknown/unknown.log"
    with pytest.raises(AttributeError):
        LogFiles.NOT_CONFIGURED


def test_logger_writes_with_trace_id(log_dir: Path):
    tid = set_trace_id("req-test")
    Logger.info("served", file=LogFiles.API)
    Logger.debug("hidden", file=LogFiles.API)

    content = (log_dir / "api" / "api.log").read_text(encoding="utf-8")
    assert tid == get_trace_id() == "req-test"
    assert "[INFO] [req-test] test_logging_config.py" in content
    assert "served" in content
    assert "hidden" not in content
    logging_config.clear_trace_id()
