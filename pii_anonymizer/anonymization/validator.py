"""Preconditions on anonymization input and request payloads."""

from typing import Any

from pii_anonymizer.anonymization.exceptions import AnonymizationValidationError
from pii_anonymizer.anonymization.models import (
    FLAG_PREFIX,
    AnonymizationConfig,
    AnonymizationRequest,
)
from pii_anonymizer.logging.logger import Log

MIN_TEXT_LENGTH = 10


def validate_text(text: Any, min_length: int = MIN_TEXT_LENGTH) -> str:
    """Return *text* unchanged if it may be anonymized.

    Raises:
        AnonymizationValidationError: if text is missing, not a string,
            or shorter than *min_length* once trimmed.
    """
    if not text or not isinstance(text, str):
        raise AnonymizationValidationError("'text' is required and must be a string")
    if len(text.strip()) < min_length:
        raise AnonymizationValidationError(
            f"'text' must contain at least {min_length} characters"
        )
    return text


def build_request(
    data: Any,
    defaults: AnonymizationConfig | None = None,
) -> AnonymizationRequest:
    """Validate a decoded request body and build an AnonymizationRequest.

    Only the shape is checked here; the length precondition belongs to
    the anonymizer, which knows its configured minimum.

    Raises:
        AnonymizationValidationError: on any validation failure.
    """
    if not isinstance(data, dict):
        raise AnonymizationValidationError("Request body must be an object")
    text = data.get("text")
    if not text or not isinstance(text, str):
        raise AnonymizationValidationError("'text' is required and must be a string")
    config = _build_config(data.get("config"), defaults or AnonymizationConfig())
    return AnonymizationRequest(text=text, config=config)


def _build_config(raw: Any, defaults: AnonymizationConfig) -> AnonymizationConfig:
    if raw is None:
        return defaults
    if not isinstance(raw, dict):
        raise AnonymizationValidationError("'config' must be an object")
    known = set(AnonymizationConfig.flag_names())
    overrides: dict[str, bool] = {}
    for key, value in raw.items():
        flag = str(key).removeprefix(FLAG_PREFIX)
        if flag not in known:
            Log.debug(f"Ignoring unknown config flag '{key}'")
            continue
        if value is None:
            continue
        if not isinstance(value, bool):
            raise AnonymizationValidationError(f"'config.{key}' must be a boolean")
        overrides[flag] = value
    return defaults.with_overrides(overrides)
