from pii_anonymizer.anonymization.anonymizer import Anonymizer
from pii_anonymizer.anonymization.base import BaseAnonymizer
from pii_anonymizer.anonymization.exceptions import (
    AnonymizationError,
    AnonymizationValidationError,
)
from pii_anonymizer.anonymization.factory import AnonymizerFactory
from pii_anonymizer.anonymization.models import AnonymizationConfig, AnonymizationResult

__all__ = [
    "AnonymizationConfig",
    "AnonymizationError",
    "AnonymizationResult",
    "AnonymizationValidationError",
    "Anonymizer",
    "AnonymizerFactory",
    "BaseAnonymizer",
]
