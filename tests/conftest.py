"""Shared pytest fixtures and fake collaborators for order-taking tests."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytest
from returns.result import Failure, Success

from order_taking.config.logging import configure_logging
from order_taking.core.domain.model.errors import AddressValidationError
from order_taking.core.domain.model.order import (
    CheckedAddress,
    PricedOrder,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from order_taking.core.domain.model.simple_types import Price, ProductCode
from order_taking.core.ports.inbound.place_order import PlaceOrderDeps
from order_taking.core.ports.outbound.acknowledgement import (
    Letter,
    OrderAcknowledgement,
    SendResult,
)
from order_taking.core.ports.outbound.address import CheckAddressResult


@pytest.fixture(scope="session", autouse=True)
def _debug_logging() -> None:
    configure_logging(level="DEBUG")


@dataclass
class FakeServices:
    """Synchronous collaborators that record every call made to them."""

    prices: Dict[str, Price]
    send_result: SendResult = SendResult.SENT
    address_error: Optional[AddressValidationError] = None
    calls: List[str] = field(default_factory=list)
    sent: List[OrderAcknowledgement] = field(default_factory=list)

    def check_product_code_exists(self, product_code: ProductCode) -> bool:
        self.calls.append("check_product_code_exists")
        return product_code.value in self.prices

    def check_address_exists(self, address: UnvalidatedAddress) -> CheckAddressResult:
        self.calls.append("check_address_exists")
        if self.address_error is not None:
            return Failure(self.address_error)
        return Success(CheckedAddress(address))

    def get_product_price(self, product_code: ProductCode) -> Price:
        self.calls.append("get_product_price")
        return self.prices[product_code.value]

    def create_order_acknowledgement_letter(self, order: PricedOrder) -> Letter:
        self.calls.append("create_order_acknowledgement_letter")
        return Letter(f"total {order.amount_to_bill.amount}")

    def send_order_acknowledgement(self, acknowledgement: OrderAcknowledgement) -> SendResult:
        self.calls.append("send_order_acknowledgement")
        self.sent.append(acknowledgement)
        return self.send_result

    def deps(self) -> PlaceOrderDeps:
        return PlaceOrderDeps(
            check_product_code_exists=self.check_product_code_exists,
            check_address_exists=self.check_address_exists,
            get_product_price=self.get_product_price,
            create_order_acknowledgement_letter=self.create_order_acknowledgement_letter,
            send_order_acknowledgement=self.send_order_acknowledgement,
        )


class AsyncFakeServices(FakeServices):
    """Same behaviour as FakeServices, but every collaborator suspends first."""

    async def check_product_code_exists(self, product_code):  # type: ignore[override]
        await asyncio.sleep(0)
        return super().check_product_code_exists(product_code)

    async def check_address_exists(self, address):  # type: ignore[override]
        await asyncio.sleep(0)
        return super().check_address_exists(address)

    async def get_product_price(self, product_code):  # type: ignore[override]
        await asyncio.sleep(0)
        return super().get_product_price(product_code)

    async def create_order_acknowledgement_letter(self, order):  # type: ignore[override]
        await asyncio.sleep(0)
        return super().create_order_acknowledgement_letter(order)

    async def send_order_acknowledgement(self, acknowledgement):  # type: ignore[override]
        await asyncio.sleep(0)
        return super().send_order_acknowledgement(acknowledgement)


def _prices() -> Dict[str, Price]:
    return {"W1234": Price.of(10), "W5678": Price.of("2.50"), "G123": Price.of(4)}


@pytest.fixture
def services() -> FakeServices:
    return FakeServices(prices=_prices())


@pytest.fixture
def async_services() -> AsyncFakeServices:
    return AsyncFakeServices(prices=_prices())


OrderFactory = Callable[..., UnvalidatedOrder]


def make_address(zip_code: str = "12345", **overrides: str) -> UnvalidatedAddress:
    values = {"address_line1": "1 Main Street", "city": "Springfield", "zip_code": zip_code}
    values.update(overrides)
    return UnvalidatedAddress(**values)


@pytest.fixture
def order_factory() -> OrderFactory:
    """Build an unvalidated order from (product_code, quantity) pairs."""

    def build(
        lines: Sequence[Tuple[str, object]] = (("W1234", 3),),
        *,
        first_name: str = "Ada",
        last_name: str = "Lovelace",
        email_address: str = "ada@example.com",
        shipping_address: Optional[UnvalidatedAddress] = None,
        billing_address: Optional[UnvalidatedAddress] = None,
    ) -> UnvalidatedOrder:
        return UnvalidatedOrder(
            customer_info=UnvalidatedCustomerInfo(first_name, last_name, email_address),
            shipping_address=shipping_address or make_address(),
            billing_address=billing_address or make_address(zip_code="54321"),
            lines=tuple(
                UnvalidatedOrderLine(code, Decimal(str(qty))) for code, qty in lines
            ),
        )

    return build


@pytest.fixture
def address_factory() -> Callable[..., UnvalidatedAddress]:
    return make_address
