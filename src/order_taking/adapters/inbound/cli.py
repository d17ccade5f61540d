from __future__ import annotations

import asyncio
import json
from decimal import Decimal

from pydantic import BaseModel, Field
from returns.pipeline import is_successful

from order_taking.bootstrap import App
from order_taking.core.domain.model.order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)

# ---- Input DTOs ------------------------------------------------------------


class CustomerInfoIn(BaseModel):
    first_name: str
    last_name: str
    email_address: str


class AddressIn(BaseModel):
    address_line1: str
    address_line2: str | None = None
    address_line3: str | None = None
    address_line4: str | None = None
    city: str
    zip_code: str


class OrderLineIn(BaseModel):
    product_code: str = Field(examples=["W1234"])
    quantity: Decimal = Field(examples=["3"])


class OrderIn(BaseModel):
    customer_info: CustomerInfoIn
    shipping_address: AddressIn
    billing_address: AddressIn | None = None
    lines: list[OrderLineIn] = Field(default_factory=list)


# ---- Mapping helpers -------------------------------------------------------


def _to_address(address: AddressIn) -> UnvalidatedAddress:
    return UnvalidatedAddress(**address.model_dump())


def to_unvalidated_order(req: OrderIn) -> UnvalidatedOrder:
    shipping = _to_address(req.shipping_address)
    return UnvalidatedOrder(
        customer_info=UnvalidatedCustomerInfo(**req.customer_info.model_dump()),
        shipping_address=shipping,
        # billing defaults to the shipping address
        billing_address=(
            _to_address(req.billing_address) if req.billing_address else shipping
        ),
        lines=tuple(
            UnvalidatedOrderLine(product_code=ln.product_code, quantity=ln.quantity)
            for ln in req.lines
        ),
    )


def run_cli(app: App, raw: str) -> int:
    """
    raw: JSON string.
    Example:
      {"customer_info":{"first_name":"Ada","last_name":"Lovelace",
                        "email_address":"ada@example.com"},
       "shipping_address":{"address_line1":"1 Main St","city":"London",
                           "zip_code":"12345"},
       "lines":[{"product_code":"W1234","quantity":3}]}
    """
    try:
        order = to_unvalidated_order(OrderIn.model_validate(json.loads(raw)))
    except ValueError as e:
        print(f"invalid_input: {e}")
        return 2

    result = asyncio.run(app.place_order(order))

    if is_successful(result):
        app.publish_events(result.unwrap())
        return 0

    for err in result.failure():
        print("[ng]", str(err))
    return 1
