import io
import logging

import pytest

from site_export.logger import LOGGER_NAME, configure, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure(level="INFO")


def test_child_loggers_reach_configured_stream():
    stream = io.StringIO()
    configure(level="DEBUG", stream=stream, log_format="%(name)s %(levelname)s %(message)s")

    get_logger("crawler").debug("Writing %s for %s", "/index.html", "/")

    assert stream.getvalue() == "SiteExport.crawler DEBUG Writing /index.html for /\n"


def test_level_filters_records():
    stream = io.StringIO()
    configure(level="WARNING", stream=stream, log_format="%(message)s")

    get_logger("queue").info("hidden")
    get_logger("queue").warning("shown")

    assert stream.getvalue() == "shown\n"
    assert logging.getLogger("aiohttp.client").level == logging.WARNING


def test_reconfigure_keeps_foreign_handlers(tmp_path):
    lg = logging.getLogger(LOGGER_NAME)
    foreign = logging.NullHandler()
    lg.addHandler(foreign)
    try:
        configure(level="INFO", log_file=tmp_path / "export.log")
        configure(level="INFO", stream=io.StringIO())

        assert foreign in lg.handlers
        # one console handler left; the file handler was replaced as well
        assert len(lg.handlers) == 2
        assert not lg.propagate
    finally:
        lg.removeHandler(foreign)


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "export.log"
    configure(level="INFO", log_file=log_file, stream=io.StringIO(), log_format="%(message)s")

    get_logger().info("Exported %d page(s)", 3)
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()

    assert log_file.read_text(encoding="utf-8") == "Exported 3 page(s)\n"
