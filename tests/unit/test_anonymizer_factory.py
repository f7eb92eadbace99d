from unittest.mock import Mock

from pii_anonymizer.anonymization.anonymizer import Anonymizer
from pii_anonymizer.anonymization.factory import AnonymizerFactory
from pii_anonymizer.anonymization.models import AnonymizationConfig
from pii_anonymizer.config.settings import Settings


def _settings(**overrides: object) -> Mock:
    values: dict[str, object] = {
        "min_text_length": 10,
        "anonymize_names": True,
        "anonymize_emails": True,
        "anonymize_phones": True,
        "anonymize_ids": True,
        "anonymize_cards": True,
        "anonymize_addresses": True,
        "anonymize_companies": False,
        "anonymize_locations": False,
    }
    values.update(overrides)
    return Mock(spec=Settings, **values)


class TestAnonymizerFactory:
    def test_returns_anonymizer_instance(self) -> None:
        anonymizer = AnonymizerFactory.create(_settings())
        assert isinstance(anonymizer, Anonymizer)

    def test_default_config_mirrors_settings(self) -> None:
        config = AnonymizerFactory.default_config(
            _settings(anonymize_phones=False, anonymize_locations=True)
        )
        assert config == AnonymizationConfig(phones=False, locations=True)

    def test_anonymizer_uses_min_text_length(self) -> None:
        anonymizer = AnonymizerFactory.create(_settings(min_text_length=3))
        assert anonymizer.anonymize("abc").anonymized_text == "abc"

    def test_settings_flags_are_left_to_the_handler(self) -> None:
        anonymizer = AnonymizerFactory.create(_settings(anonymize_emails=False))
        result = anonymizer.anonymize("Escriba a ana@example.com hoy")
        assert result.anonymized_text == "Escriba a [EMAIL_1] hoy"
