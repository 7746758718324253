from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    IllegalTransitionError,
    InvalidIntervalError,
    MissingRateError,
    NegativeAmountError,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "InvalidIntervalError",
    "MissingRateError",
    "IllegalTransitionError",
    "NegativeAmountError",
]
