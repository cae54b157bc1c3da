from __future__ import annotations

import io
import logging
import sys

import pytest

from jitadvisor.logging_utils import LOG_FORMAT, PACKAGE_LOGGER, level_for_verbosity, setup_logging


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    saved = list(root.handlers)
    level = root.level
    package_level = logging.getLogger(PACKAGE_LOGGER).level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()
    for handler in saved:
        root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)


def test_console_handler_level_and_format(clean_root):
    setup_logging(console_level=logging.INFO)
    console = [h for h in clean_root.handlers if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)]
    assert len(console) == 1
    assert console[0].level == logging.INFO
    assert console[0].formatter._fmt == LOG_FORMAT
    assert clean_root.level == logging.DEBUG


def test_file_handler_is_reused(clean_root, tmp_path):
    log_file = tmp_path / "nested" / "run.log"
    setup_logging(file_path=log_file)
    setup_logging(file_path=log_file, file_level=logging.INFO, replace_existing=False)
    file_handlers = [h for h in clean_root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.INFO
    logging.getLogger("jitadvisor.test").warning("walker finished")
    file_handlers[0].flush()
    assert "WARNING - jitadvisor.test - walker finished" in log_file.read_text(encoding="utf-8")


def test_replace_existing_drops_old_handlers(clean_root, tmp_path):
    setup_logging(file_path=tmp_path / "a.log")
    setup_logging(console_level=logging.ERROR)
    assert not any(isinstance(h, logging.FileHandler) for h in clean_root.handlers)


def test_console_defaults_to_stderr_so_reports_own_stdout(clean_root):
    setup_logging()
    console = [h for h in clean_root.handlers if not isinstance(h, logging.FileHandler)]
    assert console[0].stream is sys.stderr


def test_custom_stream_and_package_level(clean_root):
    buffer = io.StringIO()
    setup_logging(console_level=logging.DEBUG, stream=buffer, package_level=logging.INFO)
    logging.getLogger("jitadvisor.journal").debug("hidden detail")
    logging.getLogger("jitadvisor.journal").info("Loaded 3 compilation tasks")
    logging.getLogger("thirdparty").debug("other library detail")
    output = buffer.getvalue()
    assert "Loaded 3 compilation tasks" in output
    assert "hidden detail" not in output
    assert "other library detail" in output
    setup_logging(stream=buffer)
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.NOTSET


@pytest.mark.parametrize("verbosity, expected", [(0, logging.WARNING), (None, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG), (-1, logging.WARNING)])
def test_level_for_verbosity(verbosity, expected):
    assert level_for_verbosity(verbosity) == expected
