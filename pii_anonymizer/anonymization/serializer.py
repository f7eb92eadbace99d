from typing import Any

from pii_anonymizer.anonymization.models import AnonymizationResult, EntityMapping


class ResultSerializer:
    """Converts anonymization results to JSON-serializable dicts."""

    def serialize(self, result: AnonymizationResult) -> dict[str, Any]:
        """Flatten an AnonymizationResult into the response shape.

        Returns:
            Dict with 'anonymized_text', 'mappings' and 'stats' keys.
        """
        return {
            "anonymized_text": result.anonymized_text,
            "mappings": [self._mapping_to_dict(m) for m in result.mappings],
            "stats": {
                "entities_found": result.stats.entities_found,
                "processing_time_ms": result.stats.processing_time_ms,
                "entity_breakdown": dict(result.stats.entity_breakdown),
            },
        }

    def empty(self, text: str, error: str | None = None) -> dict[str, Any]:
        """Well-formed result shape with no entities, echoing *text*."""
        body = self.serialize(AnonymizationResult(anonymized_text=text))
        if error is not None:
            body = {"error": error, **body}
        return body

    def _mapping_to_dict(self, mapping: EntityMapping) -> dict[str, Any]:
        data: dict[str, Any] = {
            "original": mapping.original,
            "token": mapping.token,
            "type": mapping.type,
        }
        if mapping.position is not None:
            data["position"] = {"start": mapping.position.start, "end": mapping.position.end}
        return data
