import logging
import os
from contextlib import contextmanager

LOGGER_NAME = "bootstrap_form"
LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ErrorHandler:
    def __init__(self, name=LOGGER_NAME, log_to_console=True, log_to_file=None, log_level=logging.WARNING):
        """
        :param name: logger name, helpers log below ``bootstrap_form``
        :param log_to_console: whether to log to the terminal
        :param log_to_file: filepath string to enable file logging
        :param log_level: default log level (e.g., logging.DEBUG)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level)

        if log_to_console and not self._has_handler(logging.StreamHandler):
            self._attach(logging.StreamHandler())
        if log_to_file and not self._has_handler(logging.FileHandler, log_to_file):
            self._attach(logging.FileHandler(log_to_file))

    def _attach(self, handler):
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(handler)

    def _has_handler(self, handler_type, filename=None):
        for handler in self.logger.handlers:
            if not isinstance(handler, handler_type):
                continue
            if handler_type is logging.FileHandler:
                if handler.baseFilename == os.path.abspath(filename):
                    return True
                continue
            # FileHandler subclasses StreamHandler; only a real console handler counts here
            if isinstance(handler, logging.FileHandler):
                continue
            return True
        return False

    @contextmanager
    def handle_errors(self, exception_map, fallback=None, log_level=logging.ERROR):
        """
        Log exceptions listed in ``exception_map`` (type -> message).

        Without a fallback the exception is raised again after logging; with one,
        ``fallback(message, exception)`` is called instead.
        """
        try:
            yield
        except tuple(exception_map.keys()) as e:
            message = exception_map.get(type(e))
            if message is None:
                message = next(
                    (text for kind, text in exception_map.items() if isinstance(e, kind)),
                    "An error occurred.",
                )
            self.logger.log(log_level, f"{message} | Exception: {type(e).__name__}: {e}")
            if fallback:
                fallback(message, e)
            else:
                raise
