"""Test logging setup."""
import logging

from pricing.observability import get_logger, setup_logging


def test_get_logger_uses_package_namespace():
    assert get_logger("pricing.engine.rules").name == "pricing.engine.rules"
    assert get_logger("stores.electronics.router").name == "pricing.stores.electronics.router"


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "checkout.log"
    setup_logging("DEBUG", str(log_file), force=True)
    try:
        get_logger("test").debug("scanned atv")
        for handler in logging.getLogger("pricing").handlers:
            handler.flush()
        assert "scanned atv" in log_file.read_text()
        assert logging.getLogger("pricing").level == logging.DEBUG
    finally:
        root = logging.getLogger("pricing")
        for handler in list(root.handlers):
            handler.close()
            root.removeHandler(handler)
        setup_logging("INFO", force=True)


def test_forced_setup_replaces_handlers():
    setup_logging("INFO", force=True)
    setup_logging("WARNING", force=True)
    root = logging.getLogger("pricing")
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    setup_logging("INFO", force=True)


def test_setup_ignored_once_configured():
    setup_logging("INFO", force=True)
    setup_logging("DEBUG")
    assert logging.getLogger("pricing").level == logging.INFO
