"""Tests for pricing a validated order."""

from decimal import Decimal

import pytest

from order_taking.core.domain.model.simple_types import Price
from order_taking.core.domain.service.pricing import price_order
from order_taking.core.domain.service.validation import validate_order


async def _validated(services, order):
    validate = validate_order(services.check_product_code_exists, services.check_address_exists)
    return (await validate(order)).unwrap()


@pytest.mark.asyncio
async def test_single_widget_line(services, order_factory) -> None:
    validated = await _validated(services, order_factory([("W1234", 3)]))

    priced = await price_order(services.get_product_price)(validated)

    assert priced.amount_to_bill.amount == Decimal(30)
    (line,) = priced.lines
    assert line.unit_price == Price.of(10)
    assert line.line_price == Price.of(30)


@pytest.mark.asyncio
async def test_amount_is_sum_of_price_times_quantity(services, order_factory) -> None:
    validated = await _validated(
        services, order_factory([("W1234", 3), ("W5678", 4), ("G123", "1.25")])
    )

    priced = await price_order(services.get_product_price)(validated)

    expected = sum(
        (
            services.prices[ln.product_code.value].amount * ln.quantity.value
            for ln in validated.lines
        ),
        Decimal(0),
    )
    assert priced.amount_to_bill.amount == expected == Decimal(45)


@pytest.mark.asyncio
async def test_zero_quantities_price_to_zero(services, order_factory) -> None:
    validated = await _validated(services, order_factory([("W1234", 0), ("G123", 0)]))

    priced = await price_order(services.get_product_price)(validated)

    assert priced.amount_to_bill.amount == 0
    assert not priced.amount_to_bill.is_billable()


@pytest.mark.asyncio
async def test_priced_order_has_no_identity(services, order_factory) -> None:
    validated = await _validated(services, order_factory())

    priced = await price_order(services.get_product_price)(validated)

    assert priced.id is None
    assert priced.customer_info == validated.customer_info
    assert priced.billing_address == validated.billing_address


@pytest.mark.asyncio
async def test_async_price_lookup(async_services, order_factory) -> None:
    validated = await _validated(async_services, order_factory([("W5678", 2)]))

    priced = await price_order(async_services.get_product_price)(validated)

    assert priced.amount_to_bill.amount == Decimal("5.00")
