import io
import logging

from smartsleep.log import LOGGER_NAME, ConsoleHandler, configure_logging, get_logger


def test_get_logger_namespaces_under_package():
    assert get_logger().name == LOGGER_NAME
    assert get_logger("durations").name == "smartsleep.durations"
    assert get_logger("smartsleep.sleeping").name == "smartsleep.sleeping"


def test_configure_logging_does_not_stack_handlers():
    stream = io.StringIO()
    logger = configure_logging(logging.INFO, stream=stream)
    again = configure_logging(logging.DEBUG)
    assert logger is again
    handlers = [h for h in logger.handlers if isinstance(h, ConsoleHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG


def test_console_handler_format():
    stream = io.StringIO()
    configure_logging(logging.INFO, stream=stream)
    get_logger("test").warning("careful")
    line = stream.getvalue().strip()
    assert line.startswith("[")
    assert line.endswith("WARNING> careful")


def test_configure_logging_respects_level():
    stream = io.StringIO()
    configure_logging(logging.WARNING, stream=stream)
    get_logger("test").debug("hidden")
    assert stream.getvalue() == ""
