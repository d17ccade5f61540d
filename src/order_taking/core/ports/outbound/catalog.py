from __future__ import annotations

from typing import Awaitable, Callable, Union

from order_taking.core.domain.model.simple_types import Price, ProductCode

CheckProductCodeExists = Callable[[ProductCode], Union[bool, Awaitable[bool]]]
GetProductPrice = Callable[[ProductCode], Union[Price, Awaitable[Price]]]
