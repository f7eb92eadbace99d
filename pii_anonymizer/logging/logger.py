import logging
import sys
from typing import TextIO


class Log:
    """Process-wide facade over the ``pii_anonymizer`` logger.

    Messages are plain preformatted strings. Callers never pass original
    PII values here, only counts, stage names and error summaries.
    """

    _logger: logging.Logger = logging.getLogger("pii_anonymizer")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler (stdout by default).

        Calling it again only changes the level.
        """
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)
