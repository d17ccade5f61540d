from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Awaitable, Callable, Union

from order_taking.core.domain.model.order import PricedOrder
from order_taking.core.domain.model.simple_types import EmailAddress


@dataclass(frozen=True)
class Letter:
    body: str


@dataclass(frozen=True)
class OrderAcknowledgement:
    email_address: EmailAddress
    letter: Letter


class SendResult(enum.Enum):
    SENT = "sent"
    NOT_SENT = "not_sent"


CreateOrderAcknowledgementLetter = Callable[
    [PricedOrder], Union[Letter, Awaitable[Letter]]
]
SendOrderAcknowledgement = Callable[
    [OrderAcknowledgement], Union[SendResult, Awaitable[SendResult]]
]
