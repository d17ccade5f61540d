from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

import structlog

from order_taking.core.ports.outbound.acknowledgement import (
    OrderAcknowledgement,
    SendResult,
)

logger = structlog.get_logger(__name__)


@dataclass
class LoggingAcknowledgementSender:
    """Stands in for an email service by logging the letter it would send."""

    undeliverable: FrozenSet[str] = field(default_factory=frozenset)

    async def send(self, acknowledgement: OrderAcknowledgement) -> SendResult:
        recipient = acknowledgement.email_address.value
        if recipient in self.undeliverable:
            logger.warning("acknowledgement undeliverable", recipient=recipient)
            return SendResult.NOT_SENT
        logger.info(
            "acknowledgement sent", recipient=recipient, letter=acknowledgement.letter.body
        )
        return SendResult.SENT
