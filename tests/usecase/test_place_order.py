"""End-to-end tests for the place-order workflow."""

from dataclasses import replace
from decimal import Decimal

import pytest
from returns.pipeline import is_successful

from order_taking.core.domain.model.errors import ValidationError
from order_taking.core.domain.model.events import (
    BillableOrderPlaced,
    OrderAcknowledgementSent,
    OrderPlaced,
)
from order_taking.core.domain.model.simple_types import EmailAddress
from order_taking.core.ports.outbound.acknowledgement import SendResult
from order_taking.core.usecase.place_order import place_order


@pytest.mark.asyncio
async def test_single_widget_order(services, order_factory) -> None:
    result = await place_order(services.deps())(order_factory([("W1234", 3)]))

    assert is_successful(result)
    placed, ack, billing = result.unwrap()
    assert isinstance(placed, OrderPlaced)
    assert placed.order.amount_to_bill.amount == Decimal(30)
    assert ack == OrderAcknowledgementSent(None, EmailAddress("ada@example.com"))
    assert isinstance(billing, BillableOrderPlaced)
    assert billing.amount_to_bill == placed.order.amount_to_bill
    assert billing.billing_address == placed.order.billing_address


@pytest.mark.asyncio
async def test_steps_run_in_order(services, order_factory) -> None:
    await place_order(services.deps())(order_factory([("W1234", 1), ("G123", 2)]))

    assert services.calls == [
        "check_address_exists",
        "check_address_exists",
        "check_product_code_exists",
        "check_product_code_exists",
        "get_product_price",
        "get_product_price",
        "create_order_acknowledgement_letter",
        "send_order_acknowledgement",
    ]


@pytest.mark.asyncio
async def test_steps_run_in_order_with_async_collaborators(
    async_services, services, order_factory
) -> None:
    order = order_factory([("W1234", 1), ("G123", 2)])

    async_result = await place_order(async_services.deps())(order)
    sync_result = await place_order(services.deps())(order)

    assert async_services.calls == services.calls
    assert async_result == sync_result


@pytest.mark.asyncio
async def test_unknown_product_short_circuits(services, order_factory) -> None:
    result = await place_order(services.deps())(order_factory([("W0000", 1)]))

    assert result.failure() == (
        ValidationError("product code 'W0000' does not exist", "lines[0].product_code"),
    )
    assert "get_product_price" not in services.calls
    assert "create_order_acknowledgement_letter" not in services.calls
    assert "send_order_acknowledgement" not in services.calls


@pytest.mark.asyncio
async def test_empty_order_fails(services, order_factory) -> None:
    result = await place_order(services.deps())(order_factory([]))

    assert not is_successful(result)
    assert services.calls == []


@pytest.mark.asyncio
async def test_zero_quantity_has_no_billing_event(services, order_factory) -> None:
    result = await place_order(services.deps())(order_factory([("W1234", 0), ("G123", 0)]))

    events = result.unwrap()
    assert [type(e) for e in events] == [OrderPlaced, OrderAcknowledgementSent]


@pytest.mark.asyncio
async def test_not_sent_keeps_order_placed(services, order_factory) -> None:
    services.send_result = SendResult.NOT_SENT

    result = await place_order(services.deps())(order_factory([("W1234", 3)]))

    events = result.unwrap()
    assert [type(e) for e in events] == [OrderPlaced, BillableOrderPlaced]
    assert sum(isinstance(e, BillableOrderPlaced) for e in events) == 1


@pytest.mark.asyncio
async def test_collaborator_exceptions_propagate(services, order_factory) -> None:
    def broken_price_lookup(_):
        raise TimeoutError("catalog timed out")

    deps = replace(services.deps(), get_product_price=broken_price_lookup)

    with pytest.raises(TimeoutError):
        await place_order(deps)(order_factory())
