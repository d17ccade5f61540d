from __future__ import annotations

import json
from typing import Any, Dict, Sequence

from order_taking.core.domain.model.events import (
    BillableOrderPlaced,
    OrderAcknowledgementSent,
    OrderPlaced,
    PlaceOrderEvent,
)
from order_taking.core.domain.model.order import Address, PricedOrder
from order_taking.core.domain.model.simple_types import OrderId, UnitQuantity


def _order_id(order_id: OrderId | None) -> str | None:
    return order_id.value if order_id is not None else None


def _address(address: Address) -> Dict[str, Any]:
    return {
        "address_line1": address.address_line1.value,
        "city": address.city.value,
        "zip_code": address.zip_code.value,
    }


def _order(order: PricedOrder) -> Dict[str, Any]:
    return {
        "order_id": _order_id(order.id),
        "email_address": order.customer_info.email_address.value,
        "shipping_address": _address(order.shipping_address),
        "lines": [
            {
                "product_code": ln.product_code.value,
                "quantity": str(ln.quantity.value),
                "unit": "units" if isinstance(ln.quantity, UnitQuantity) else "kg",
                "line_price": str(ln.line_price.amount),
            }
            for ln in order.lines
        ],
        "amount_to_bill": str(order.amount_to_bill.amount),
    }


def event_to_dict(event: PlaceOrderEvent) -> Dict[str, Any]:
    if isinstance(event, OrderPlaced):
        return {"type": "order_placed", **_order(event.order)}
    if isinstance(event, BillableOrderPlaced):
        return {
            "type": "billable_order_placed",
            "order_id": _order_id(event.order_id),
            "billing_address": _address(event.billing_address),
            "amount_to_bill": str(event.amount_to_bill.amount),
        }
    if isinstance(event, OrderAcknowledgementSent):
        return {
            "type": "acknowledgement_sent",
            "order_id": _order_id(event.order_id),
            "email_address": event.email_address.value,
        }
    raise TypeError(f"unknown event: {event!r}")


def stdout_publish_events(events: Sequence[PlaceOrderEvent]) -> None:
    for event in events:
        print(json.dumps(event_to_dict(event)))
