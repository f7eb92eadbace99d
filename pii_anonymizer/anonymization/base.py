from abc import ABC, abstractmethod

from pii_anonymizer.anonymization.models import AnonymizationConfig, AnonymizationResult


class BaseAnonymizer(ABC):
    """Contract for all anonymizers."""

    @abstractmethod
    def anonymize(
        self,
        text: str,
        config: AnonymizationConfig | None = None,
    ) -> AnonymizationResult:
        """Replace PII in text with typed placeholder tokens.

        Args:
            text: Free-form text; trimmed length must reach the minimum.
            config: Per-class switches. Falls back to the anonymizer defaults.

        Returns:
            AnonymizationResult with anonymized text, mappings and stats.

        Raises:
            AnonymizationValidationError: if the text fails the preconditions.
            AnonymizationError: on any other failure.
        """
