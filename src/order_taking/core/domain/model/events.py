from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from order_taking.core.domain.model.order import Address, PricedOrder
from order_taking.core.domain.model.simple_types import (
    BillingAmount,
    EmailAddress,
    OrderId,
)


@dataclass(frozen=True)
class OrderPlaced:
    order: PricedOrder


@dataclass(frozen=True)
class BillableOrderPlaced:
    order_id: OrderId | None
    billing_address: Address
    amount_to_bill: BillingAmount


@dataclass(frozen=True)
class OrderAcknowledgementSent:
    order_id: OrderId | None
    email_address: EmailAddress


PlaceOrderEvent = Union[OrderPlaced, BillableOrderPlaced, OrderAcknowledgementSent]
