import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class Log:
    """Centralized logging for the API, the analyzer and the client."""

    _logger: logging.Logger = logging.getLogger("vani")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level on the vani logger and the server loggers, attach stdout."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            cls._logger.addHandler(handler)
        for name in _SERVER_LOGGERS:
            logging.getLogger(name).setLevel(level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
