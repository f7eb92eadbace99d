"""Request boundary: decoded/raw request body in, (status, body) out.

Transport concerns (HTTP server, CORS) stay with the caller; this module
only maps the core's outcomes onto response shapes.
"""

import json
from dataclasses import dataclass
from typing import Any

from pii_anonymizer.anonymization.base import BaseAnonymizer
from pii_anonymizer.anonymization.exceptions import (
    AnonymizationError,
    AnonymizationValidationError,
)
from pii_anonymizer.anonymization.models import AnonymizationConfig
from pii_anonymizer.anonymization.serializer import ResultSerializer
from pii_anonymizer.anonymization.validator import build_request
from pii_anonymizer.logging.logger import Log

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: dict[str, Any]

    @property
    def ok(self) -> bool:
        return self.status_code < HTTP_BAD_REQUEST


class AnonymizationHandler:
    """Validate a request, anonymize it, and shape the response."""

    def __init__(
        self,
        anonymizer: BaseAnonymizer,
        default_config: AnonymizationConfig | None = None,
        serializer: ResultSerializer | None = None,
    ) -> None:
        self._anonymizer = anonymizer
        self._default_config = default_config or AnonymizationConfig()
        self._serializer = serializer or ResultSerializer()

    def handle_json(self, raw: str | bytes) -> HandlerResponse:
        """Decode a JSON request body and handle it."""
        try:
            data = json.loads(raw)
        except ValueError as exc:
            return self._validation_failure(
                AnonymizationValidationError(f"Invalid JSON body: {exc}"), ""
            )
        return self.handle(data)

    def handle(self, data: Any) -> HandlerResponse:
        """Handle a decoded request body ``{"text": ..., "config": {...}}``."""
        try:
            request = build_request(data, defaults=self._default_config)
            result = self._anonymizer.anonymize(request.text, request.config)
        except AnonymizationValidationError as exc:
            return self._validation_failure(exc, self._echo_text(data))
        except AnonymizationError as exc:
            Log.error(f"Anonymization request failed: {exc}")
            return HandlerResponse(HTTP_INTERNAL_SERVER_ERROR, {"error": str(exc)})
        return HandlerResponse(HTTP_OK, self._serializer.serialize(result))

    def _validation_failure(
        self,
        exc: AnonymizationValidationError,
        text: str,
    ) -> HandlerResponse:
        Log.warning(f"Rejected anonymization request: {exc}")
        return HandlerResponse(
            HTTP_BAD_REQUEST,
            self._serializer.empty(text, error=str(exc)),
        )

    @staticmethod
    def _echo_text(data: Any) -> str:
        if isinstance(data, dict) and isinstance(data.get("text"), str):
            return data["text"]
        return ""
