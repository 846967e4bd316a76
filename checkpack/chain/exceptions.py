"""Validation chain exceptions."""


class ValidatorError(Exception):
    """Base class for validator errors."""


class ValidationError(ValidatorError):
    """Raised by ``Validator.get()`` when a value fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidatorUsageError(ValidatorError):
    """Raised when a validation chain is built or configured incorrectly."""
