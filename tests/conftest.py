from __future__ import annotations

import pytest

from intseq.config import reset_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    # Each test sees the default environment unless it sets variables itself.
    monkeypatch.delenv("INTSEQ_CHECK_INT32", raising=False)
    monkeypatch.delenv("INTSEQ_LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()
