from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, TypeVar, Union

T = TypeVar("T")


async def call(collaborator: Callable[..., Union[T, Awaitable[T]]], *args: Any) -> T:
    """Call a sync or async collaborator and return its resolved value."""
    result = collaborator(*args)
    if inspect.isawaitable(result):
        return await result
    return result
