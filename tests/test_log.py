import logging

from jobgenius import log


def test_client_loggers_stay_at_warning_or_above(monkeypatch):
    for logger in [logging.getLogger()] + [logging.getLogger(n) for n in log._QUIET_LOGGERS]:
        monkeypatch.setattr(logger, "level", logger.level)
    for level, expected in (("DEBUG", logging.WARNING), ("ERROR", logging.ERROR)):
        monkeypatch.setenv("LOG_LEVEL", level)
        log._configure()
        assert logging.getLogger("httpx").level == expected
        assert logging.getLogger("openai").level == expected


def test_log_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("JOBGENIUS_LOG_DIR", str(tmp_path))
    assert log._log_dir() == tmp_path
    monkeypatch.delenv("JOBGENIUS_LOG_DIR")
    assert log._log_dir().name == "logs"
