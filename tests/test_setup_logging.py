import logging

from spacedash.setup_logging import setup_logging

def test_setup_logging_uses_given_level_and_format(monkeypatch):
    root = logging.getLogger()
    old_level = root.level
    monkeypatch.setattr(root, "handlers", [])
    try:
        setup_logging("debug", "%(levelname)s|%(message)s")
        (handler,) = root.handlers
        assert root.level == logging.DEBUG
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
        assert handler.format(record) == "INFO|hello"
    finally:
        root.setLevel(old_level)

def test_setup_logging_does_not_double_add(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    setup_logging("debug")
    assert root.handlers == [existing]
