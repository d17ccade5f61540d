from __future__ import annotations

from typing import Awaitable, Callable, List

import structlog

from order_taking.core.domain.model.order import (
    PricedOrder,
    PricedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from order_taking.core.domain.model.simple_types import BillingAmount, NonEmptyTuple
from order_taking.core.domain.service._collaborators import call
from order_taking.core.ports.outbound.catalog import GetProductPrice

logger = structlog.get_logger(__name__)

PriceOrder = Callable[[ValidatedOrder], Awaitable[PricedOrder]]


def price_order(get_product_price: GetProductPrice) -> PriceOrder:
    """Attach a price to every line and total them into the amount to bill.

    Line price is unit price times the quantity's numeric value whatever its
    unit; the amount to bill is the plain sum of line prices.
    """

    async def to_priced_line(line: ValidatedOrderLine) -> PricedOrderLine:
        unit_price = await call(get_product_price, line.product_code)
        return PricedOrderLine(
            product_code=line.product_code,
            quantity=line.quantity,
            unit_price=unit_price,
            line_price=unit_price.multiply(line.quantity),
        )

    async def price(order: ValidatedOrder) -> PricedOrder:
        lines: List[PricedOrderLine] = []
        for line in order.lines:
            lines.append(await to_priced_line(line))

        amount_to_bill = BillingAmount.sum_prices(ln.line_price for ln in lines)
        logger.debug("order priced", amount_to_bill=str(amount_to_bill.amount))
        return PricedOrder(
            customer_info=order.customer_info,
            shipping_address=order.shipping_address,
            billing_address=order.billing_address,
            lines=NonEmptyTuple(lines),
            amount_to_bill=amount_to_bill,
        )

    return price
