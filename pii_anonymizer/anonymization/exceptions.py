class AnonymizationError(Exception):
    """Raised when anonymization fails."""


class AnonymizationValidationError(AnonymizationError):
    """Raised when the input does not satisfy the anonymization preconditions."""
