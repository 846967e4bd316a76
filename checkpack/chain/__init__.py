"""Validation chain subsystem for checkpack."""

from checkpack.chain.exceptions import ValidationError, ValidatorError, ValidatorUsageError
from checkpack.chain.models import (
    ErrorFactory,
    ErrorOverride,
    Step,
    ValidatorOptions,
    ensure_error_override,
)
from checkpack.chain.validator import Validator

__all__ = [
    "ValidatorError",
    "ValidationError",
    "ValidatorUsageError",
    "ErrorFactory",
    "ErrorOverride",
    "Step",
    "ValidatorOptions",
    "Validator",
    "ensure_error_override",
]
