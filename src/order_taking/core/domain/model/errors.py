from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceOrderError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class ValidationError(PlaceOrderError):
    field: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class AddressValidationError(enum.Enum):
    INVALID_FORMAT = "invalid_format"
    ADDRESS_NOT_FOUND = "address_not_found"
