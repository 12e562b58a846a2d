import logging

import pytest

import vecn
from vecn.logging_config import PACKAGE_LOGGER, get_logger, setup_logging

@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = logger.handlers[:], logger.level
    yield logger
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)

def installed(logger):
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]

def test_import_attaches_null_handler():
    logger = logging.getLogger(PACKAGE_LOGGER)
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert logger.propagate

def test_setup_logging_leaves_root_alone(package_logger):
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    setup_logging(logging.DEBUG)
    assert root.handlers == handlers
    assert root.level == level
    assert package_logger.level == logging.DEBUG

def test_setup_logging_installs_console_handler(package_logger):
    setup_logging(logging.DEBUG)
    handlers = installed(package_logger)
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)

def test_setup_logging_replaces_only_its_own_handlers(package_logger):
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    assert foreign in package_logger.handlers
    assert len([h for h in installed(package_logger) if type(h) is logging.StreamHandler]) == 1
    package_logger.removeHandler(foreign)

def test_setup_logging_with_file(package_logger, tmp_path):
    log_file = tmp_path / "vecn.log"
    setup_logging(logging.INFO, str(log_file))
    get_logger("vecn.test").info("hello")
    for handler in package_logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
    assert "vecn.test" in log_file.read_text()

def test_setup_logging_default_level(package_logger):
    setup_logging()
    assert package_logger.level == logging.getLevelName("WARNING")

def test_get_logger():
    logger = get_logger("vecn.sample")
    assert logger.name == "vecn.sample"
    assert logger.level == logging.NOTSET

def test_get_logger_nests_under_package():
    assert get_logger("sample").name == "vecn.sample"
    assert get_logger("vecn").name == "vecn"

def test_logging_exported():
    assert vecn.setup_logging is setup_logging
    assert vecn.get_logger is get_logger
