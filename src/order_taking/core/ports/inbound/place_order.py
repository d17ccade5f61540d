from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Tuple

from returns.result import Result

from order_taking.core.domain.model.errors import ValidationError
from order_taking.core.domain.model.events import PlaceOrderEvent
from order_taking.core.domain.model.order import UnvalidatedOrder
from order_taking.core.ports.outbound.acknowledgement import (
    CreateOrderAcknowledgementLetter,
    SendOrderAcknowledgement,
)
from order_taking.core.ports.outbound.address import CheckAddressExists
from order_taking.core.ports.outbound.catalog import (
    CheckProductCodeExists,
    GetProductPrice,
)

ValidationErrors = Tuple[ValidationError, ...]
PlaceOrderEvents = Tuple[PlaceOrderEvent, ...]


@dataclass(frozen=True)
class PlaceOrderDeps:
    check_product_code_exists: CheckProductCodeExists
    check_address_exists: CheckAddressExists
    get_product_price: GetProductPrice
    create_order_acknowledgement_letter: CreateOrderAcknowledgementLetter
    send_order_acknowledgement: SendOrderAcknowledgement


PlaceOrder = Callable[
    [UnvalidatedOrder], Awaitable[Result[PlaceOrderEvents, ValidationErrors]]
]
