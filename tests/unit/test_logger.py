import io
import logging

from pii_anonymizer.logging.logger import Log


class TestLog:
    def test_configure_writes_to_given_stream(self) -> None:
        logger = logging.getLogger("pii_anonymizer")
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        logger.handlers.clear()
        stream = io.StringIO()
        try:
            Log.configure("debug", stream=stream)
            Log.info("Anonymized: 2 entities in 1ms")
        finally:
            logger.handlers[:] = saved_handlers
            logger.setLevel(saved_level)
        assert "[INFO] Anonymized: 2 entities in 1ms" in stream.getvalue()

    def test_configure_is_idempotent(self) -> None:
        logger = logging.getLogger("pii_anonymizer")
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        logger.handlers.clear()
        try:
            Log.configure("INFO", stream=io.StringIO())
            Log.configure("INFO", stream=io.StringIO())
            assert len(logger.handlers) == 1
        finally:
            logger.handlers[:] = saved_handlers
            logger.setLevel(saved_level)

    def test_reconfigure_changes_level_only(self) -> None:
        logger = logging.getLogger("pii_anonymizer")
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        logger.handlers.clear()
        first = io.StringIO()
        try:
            Log.configure("INFO", stream=first)
            Log.configure("WARNING", stream=io.StringIO())
            Log.info("hidden")
            Log.warning("Rejected anonymization request: bad config")
        finally:
            logger.handlers[:] = saved_handlers
            logger.setLevel(saved_level)
        output = first.getvalue()
        assert "hidden" not in output
        assert "[WARNING] Rejected anonymization request: bad config" in output
