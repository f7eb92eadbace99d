"""Deterministic, rule-based PII anonymizer.

Processing flow:
1. Check preconditions (non-empty string, minimum trimmed length).
2. Run the enabled detection passes in order over the running text:
   email, URL (always), card number, national ID, phone, address,
   person names. Each accepted match is swapped for a ``[TYPE_N]``
   token from a request-scoped MappingStore. Text outside replaced
   spans is returned exactly as given, Unicode form included.
3. Aggregate mappings and per-type counts into an AnonymizationResult.
"""

from __future__ import annotations

import time

from pii_anonymizer.anonymization.base import BaseAnonymizer
from pii_anonymizer.anonymization.exceptions import AnonymizationError
from pii_anonymizer.anonymization.mapping_store import MappingStore
from pii_anonymizer.anonymization.models import (
    AnonymizationConfig,
    AnonymizationResult,
    AnonymizationStats,
)
from pii_anonymizer.anonymization.stages import DETECTION_STAGES, DetectionStage
from pii_anonymizer.anonymization.validator import MIN_TEXT_LENGTH, validate_text
from pii_anonymizer.logging.logger import Log


class Anonymizer(BaseAnonymizer):
    """Stateless between calls: all mutable state lives in a per-call MappingStore."""

    def __init__(
        self,
        min_text_length: int = MIN_TEXT_LENGTH,
        stages: tuple[DetectionStage, ...] = DETECTION_STAGES,
    ) -> None:
        self._min_text_length = min_text_length
        self._stages = stages

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize(
        self,
        text: str,
        config: AnonymizationConfig | None = None,
    ) -> AnonymizationResult:
        """Replace PII in *text* with typed placeholder tokens.

        Args:
            text: Free-form text, at least ``min_text_length`` chars once trimmed.
            config: Per-class switches; built-in defaults when omitted.

        Returns:
            AnonymizationResult with anonymized text, mappings in creation
            order, and stats.
        """
        validate_text(text, self._min_text_length)
        try:
            return self._run(text, config or AnonymizationConfig())
        except AnonymizationError:
            raise
        except Exception as exc:
            raise AnonymizationError(f"Anonymization failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _run(self, text: str, config: AnonymizationConfig) -> AnonymizationResult:
        started = time.perf_counter()
        store = MappingStore()

        processed = text
        for stage in self._stages:
            if not stage.is_enabled(config):
                Log.debug(f"Stage '{stage.name}' disabled, skipping")
                continue
            before = len(store)
            processed = stage.apply(processed, store)
            Log.debug(f"Stage '{stage.name}': {len(store) - before} new entities")

        elapsed_ms = round((time.perf_counter() - started) * 1000)
        return self._aggregate(processed, store, elapsed_ms)

    # ------------------------------------------------------------------
    # Result aggregation
    # ------------------------------------------------------------------

    def _aggregate(
        self,
        processed: str,
        store: MappingStore,
        elapsed_ms: int,
    ) -> AnonymizationResult:
        stats = AnonymizationStats(
            entities_found=len(store),
            processing_time_ms=elapsed_ms,
            entity_breakdown=store.count_by_type(),
        )
        Log.info(
            f"Anonymized: {stats.entities_found} entities in {stats.processing_time_ms}ms"
        )
        return AnonymizationResult(
            anonymized_text=processed,
            mappings=store.mappings(),
            stats=stats,
        )
