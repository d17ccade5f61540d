from __future__ import annotations

from typing import Awaitable, Callable, Union

from returns.result import Result

from order_taking.core.domain.model.errors import AddressValidationError
from order_taking.core.domain.model.order import CheckedAddress, UnvalidatedAddress

CheckAddressResult = Result[CheckedAddress, AddressValidationError]

CheckAddressExists = Callable[
    [UnvalidatedAddress], Union[CheckAddressResult, Awaitable[CheckAddressResult]]
]
