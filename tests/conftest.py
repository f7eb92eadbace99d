import pytest

from pii_anonymizer.anonymization.anonymizer import Anonymizer


@pytest.fixture()
def anonymizer() -> Anonymizer:
    return Anonymizer()


@pytest.fixture()
def greeting_text() -> str:
    """Name, email and phone in one message."""
    return (
        "Hola, soy Juan Pérez, mi correo es juan.perez@example.com "
        "y mi teléfono es 9987-6543."
    )
