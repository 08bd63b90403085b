import logging

from tracestyler.logging_config import PACKAGE_LOGGER, get_log_directory, setup_logging


def test_setup_creates_log_files(tmp_path, clean_logging):
    log_dir = setup_logging(log_dir=tmp_path / "logs", console_level=logging.CRITICAL)
    assert log_dir == tmp_path / "logs"

    logging.getLogger("tracestyler.core.scheme").error("scheme failure")
    for handler in logging.getLogger(PACKAGE_LOGGER).handlers + logging.getLogger().handlers:
        handler.flush()

    app_log = (log_dir / "tracestyler.log").read_text(encoding="utf-8")
    error_log = (log_dir / "errors.log").read_text(encoding="utf-8")
    assert "logging initialized" in app_log
    assert "scheme failure" in app_log
    assert "scheme failure" in error_log
    assert "logging initialized" not in error_log


def test_setup_twice_does_not_duplicate_handlers(tmp_path, clean_logging):
    setup_logging(log_dir=tmp_path, console_level=logging.CRITICAL)
    setup_logging(log_dir=tmp_path, console_level=logging.CRITICAL)
    assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 2
    marked = [h for h in logging.getLogger().handlers if getattr(h, "_tracestyler_handler", False)]
    assert len(marked) == 1


def test_platform_log_directory(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert get_log_directory("TraceStyler") == tmp_path / "TraceStyler" / "logs"
