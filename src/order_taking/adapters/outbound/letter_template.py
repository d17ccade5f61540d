from __future__ import annotations

from order_taking.core.domain.model.order import PricedOrder, PricedOrderLine
from order_taking.core.domain.model.simple_types import UnitQuantity
from order_taking.core.ports.outbound.acknowledgement import Letter


def _describe_line(line: PricedOrderLine) -> str:
    if isinstance(line.quantity, UnitQuantity):
        quantity = f"{line.quantity.count} unit(s)"
    else:
        quantity = f"{line.quantity.kilograms} kg"
    return (
        f"  {line.product_code.value}  {quantity} x {line.unit_price.amount}"
        f" = {line.line_price.amount}"
    )


def render_acknowledgement_letter(order: PricedOrder) -> Letter:
    name = order.customer_info.name
    body = "\n".join(
        [
            f"Dear {name.first_name.value} {name.last_name.value},",
            "",
            "Thank you for your order:",
            *(_describe_line(line) for line in order.lines),
            "",
            f"Total: {order.amount_to_bill.amount}",
        ]
    )
    return Letter(body)
