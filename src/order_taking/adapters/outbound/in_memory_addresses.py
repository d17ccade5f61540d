from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Optional

from returns.result import Failure, Success

from order_taking.core.domain.model.errors import AddressValidationError
from order_taking.core.domain.model.order import CheckedAddress, UnvalidatedAddress
from order_taking.core.ports.outbound.address import CheckAddressResult

_ZIP = re.compile(r"\d{5}")


@dataclass
class InMemoryAddressBook:
    """Accepts well-formed addresses, optionally restricted to known zip codes."""

    known_zip_codes: Optional[FrozenSet[str]] = None

    def check_address_exists(self, address: UnvalidatedAddress) -> CheckAddressResult:
        if not address.address_line1.strip() or not _ZIP.fullmatch(address.zip_code):
            return Failure(AddressValidationError.INVALID_FORMAT)
        if self.known_zip_codes is not None and address.zip_code not in self.known_zip_codes:
            return Failure(AddressValidationError.ADDRESS_NOT_FOUND)
        return Success(CheckedAddress(address))
