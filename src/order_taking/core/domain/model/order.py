from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from order_taking.core.domain.model.simple_types import (
    BillingAmount,
    EmailAddress,
    NonEmptyTuple,
    OrderId,
    OrderQuantity,
    Price,
    ProductCode,
    String50,
    ZipCode,
)

# ---- Unvalidated (raw input) -----------------------------------------------


@dataclass(frozen=True)
class UnvalidatedCustomerInfo:
    first_name: str
    last_name: str
    email_address: str


@dataclass(frozen=True)
class UnvalidatedAddress:
    address_line1: str
    city: str
    zip_code: str
    address_line2: str | None = None
    address_line3: str | None = None
    address_line4: str | None = None


@dataclass(frozen=True)
class UnvalidatedOrderLine:
    product_code: str
    quantity: Decimal | int | str


@dataclass(frozen=True)
class UnvalidatedOrder:
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    lines: Tuple[UnvalidatedOrderLine, ...]


# ---- Validated -------------------------------------------------------------


@dataclass(frozen=True)
class PersonalName:
    first_name: String50
    last_name: String50


@dataclass(frozen=True)
class CustomerInfo:
    name: PersonalName
    email_address: EmailAddress


@dataclass(frozen=True)
class CheckedAddress:
    """An address the address-existence service has confirmed.

    Only that service creates these; the workflow never asserts one into
    existence from raw input.
    """

    address: UnvalidatedAddress


@dataclass(frozen=True)
class Address:
    address_line1: String50
    city: String50
    zip_code: ZipCode
    address_line2: String50 | None = None
    address_line3: String50 | None = None
    address_line4: String50 | None = None


@dataclass(frozen=True)
class ValidatedOrderLine:
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True)
class ValidatedOrder:
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: NonEmptyTuple[ValidatedOrderLine]


# ---- Priced ----------------------------------------------------------------


@dataclass(frozen=True)
class PricedOrderLine:
    product_code: ProductCode
    quantity: OrderQuantity
    unit_price: Price
    line_price: Price


@dataclass(frozen=True)
class PricedOrder:
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: NonEmptyTuple[PricedOrderLine]
    amount_to_bill: BillingAmount
    # identity is assigned downstream, never by the workflow
    id: OrderId | None = None
