from pii_anonymizer.anonymization.anonymizer import Anonymizer
from pii_anonymizer.anonymization.base import BaseAnonymizer
from pii_anonymizer.anonymization.models import AnonymizationConfig
from pii_anonymizer.config.settings import Settings


class AnonymizerFactory:
    """Creates the configured anonymizer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseAnonymizer:
        """Create a rule-based anonymizer."""
        return Anonymizer(min_text_length=settings.min_text_length)

    @classmethod
    def default_config(cls, settings: Settings) -> AnonymizationConfig:
        """Process-wide default flags, applied by the request handler."""
        return AnonymizationConfig(
            names=settings.anonymize_names,
            emails=settings.anonymize_emails,
            phones=settings.anonymize_phones,
            ids=settings.anonymize_ids,
            cards=settings.anonymize_cards,
            addresses=settings.anonymize_addresses,
            companies=settings.anonymize_companies,
            locations=settings.anonymize_locations,
        )
