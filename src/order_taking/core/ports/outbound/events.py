from __future__ import annotations

from typing import Callable, Sequence

from order_taking.core.domain.model.events import PlaceOrderEvent

PublishEvents = Callable[[Sequence[PlaceOrderEvent]], None]
