from __future__ import annotations

from typing import Awaitable, Callable

import structlog
from returns.maybe import Maybe, Nothing, Some

from order_taking.core.domain.model.events import OrderAcknowledgementSent
from order_taking.core.domain.model.order import PricedOrder
from order_taking.core.domain.service._collaborators import call
from order_taking.core.ports.outbound.acknowledgement import (
    CreateOrderAcknowledgementLetter,
    OrderAcknowledgement,
    SendOrderAcknowledgement,
    SendResult,
)

logger = structlog.get_logger(__name__)

AcknowledgeOrder = Callable[[PricedOrder], Awaitable[Maybe[OrderAcknowledgementSent]]]


def acknowledge_order(
    create_order_acknowledgement_letter: CreateOrderAcknowledgementLetter,
    send_order_acknowledgement: SendOrderAcknowledgement,
) -> AcknowledgeOrder:
    async def acknowledge(order: PricedOrder) -> Maybe[OrderAcknowledgementSent]:
        email_address = order.customer_info.email_address
        letter = await call(create_order_acknowledgement_letter, order)
        sent = await call(
            send_order_acknowledgement, OrderAcknowledgement(email_address, letter)
        )

        if sent is SendResult.SENT:
            return Some(OrderAcknowledgementSent(order.id, email_address))

        # not delivering the letter is not a workflow failure
        logger.info("order acknowledgement not sent", email_address=email_address.value)
        return Nothing

    return acknowledge
