"""Domain-specific exceptions"""

from dataclasses import dataclass
from typing import List


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


@dataclass(frozen=True)
class FieldError:
    """Single problem with one input field"""

    field: str
    message: str


class PurchaseValidationError(DomainException):
    """Purchase input is malformed or out of domain"""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Invalid purchase request: {summary}")
