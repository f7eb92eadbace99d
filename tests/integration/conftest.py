import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from pii_anonymizer.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory with no anonymizer env overrides."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)


@pytest.fixture()
def quiet_logger() -> Generator[None, None, None]:
    logger = logging.getLogger("pii_anonymizer")
    handler = logging.NullHandler()
    logger.addHandler(handler)
    yield
    logger.removeHandler(handler)
