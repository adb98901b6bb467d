# [TESTER] v1

from __future__ import annotations

import logging

import pytest

from intseq.config import KernelConfig, configure_logging, get_config, reset_config, set_config
from intseq.core.errors import ElementRangeError
from intseq.core.search import contains


def test_defaults_without_environment() -> None:
    cfg = get_config()
    assert cfg == KernelConfig()
    assert cfg.check_int32 is True
    assert cfg.log_level == "WARNING"


@pytest.mark.parametrize("raw,expected", [("0", False), ("off", False), ("YES", True), (" true ", True)])
def test_check_int32_from_environment(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("INTSEQ_CHECK_INT32", raw)
    reset_config()
    assert get_config().check_int32 is expected


def test_unrecognised_values_fall_back_with_warning(monkeypatch, caplog) -> None:
    monkeypatch.setenv("INTSEQ_CHECK_INT32", "maybe")
    monkeypatch.setenv("INTSEQ_LOG_LEVEL", "loud")
    reset_config()
    with caplog.at_level(logging.WARNING, logger="intseq.config"):
        cfg = get_config()
    assert cfg == KernelConfig()
    assert "INTSEQ_CHECK_INT32" in caplog.text
    assert "INTSEQ_LOG_LEVEL" in caplog.text
    assert "'loud'" in caplog.text


def test_environment_is_cached_until_reset(monkeypatch) -> None:
    assert get_config().check_int32 is True
    monkeypatch.setenv("INTSEQ_CHECK_INT32", "0")
    assert get_config().check_int32 is True
    reset_config()
    assert get_config().check_int32 is False


def test_override_controls_range_check() -> None:
    with pytest.raises(ElementRangeError):
        contains([1], 2**31)
    set_config(KernelConfig(check_int32=False))
    assert contains([2**40], 2**40) is True
    reset_config()
    with pytest.raises(ElementRangeError):
        contains([1], 2**31)


def test_config_validation() -> None:
    with pytest.raises(ValueError, match="log_level"):
        KernelConfig(log_level="chatty")
    with pytest.raises(TypeError):
        KernelConfig(check_int32=1)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="log_level"):
        KernelConfig(log_level=5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        set_config({"check_int32": False})  # type: ignore[arg-type]


def test_configure_logging_is_idempotent() -> None:
    root = logging.getLogger("intseq")
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_propagate = root.propagate
    try:
        configure_logging(KernelConfig(log_level="DEBUG"))
        configure_logging(KernelConfig(log_level="info"))
        ours = [h for h in root.handlers if getattr(h, "_intseq_handler", False)]
        assert len(ours) == 1
        assert root.level == logging.INFO
        assert root.propagate is False
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        root.propagate = saved_propagate
