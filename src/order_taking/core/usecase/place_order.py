from __future__ import annotations

import structlog
from returns.pipeline import is_successful
from returns.result import Result, Success

from order_taking.core.domain.model.order import UnvalidatedOrder
from order_taking.core.domain.service.acknowledgement import acknowledge_order
from order_taking.core.domain.service.events import create_events
from order_taking.core.domain.service.pricing import price_order
from order_taking.core.domain.service.validation import validate_order
from order_taking.core.ports.inbound.place_order import (
    PlaceOrder,
    PlaceOrderDeps,
    PlaceOrderEvents,
    ValidationErrors,
)

logger = structlog.get_logger(__name__)


def place_order(deps: PlaceOrderDeps) -> PlaceOrder:
    validate = validate_order(deps.check_product_code_exists, deps.check_address_exists)
    price = price_order(deps.get_product_price)
    acknowledge = acknowledge_order(
        deps.create_order_acknowledgement_letter, deps.send_order_acknowledgement
    )

    async def handle(
        unvalidated_order: UnvalidatedOrder,
    ) -> Result[PlaceOrderEvents, ValidationErrors]:
        # 1. validation failure short-circuits the rest of the workflow
        validated = await validate(unvalidated_order)
        if not is_successful(validated):
            return validated

        # 2. pricing and acknowledgement are total once validated
        priced = await price(validated.unwrap())
        acknowledgement = await acknowledge(priced)

        events = create_events(priced, acknowledgement)
        logger.info(
            "order placed",
            events=[type(e).__name__ for e in events],
            amount_to_bill=str(priced.amount_to_bill.amount),
        )
        return Success(events)

    return handle
