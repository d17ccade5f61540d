from __future__ import annotations

from typing import List, TypeVar

from returns.maybe import Maybe, Nothing, Some

from order_taking.core.domain.model.events import (
    BillableOrderPlaced,
    OrderAcknowledgementSent,
    OrderPlaced,
    PlaceOrderEvent,
)
from order_taking.core.domain.model.order import PricedOrder
from order_taking.core.ports.inbound.place_order import PlaceOrderEvents

T = TypeVar("T")


def _to_list(option: Maybe[T]) -> List[T]:
    return option.map(lambda value: [value]).value_or([])


def create_billing_event(order: PricedOrder) -> Maybe[BillableOrderPlaced]:
    """Only orders with something to bill produce a billing event."""
    if not order.amount_to_bill.is_billable():
        return Nothing
    return Some(
        BillableOrderPlaced(
            order_id=order.id,
            billing_address=order.billing_address,
            amount_to_bill=order.amount_to_bill,
        )
    )


def create_events(
    order: PricedOrder,
    acknowledgement: Maybe[OrderAcknowledgementSent],
) -> PlaceOrderEvents:
    events: List[PlaceOrderEvent] = [
        OrderPlaced(order),
        *_to_list(acknowledgement),
        *_to_list(create_billing_event(order)),
    ]
    return tuple(events)
