from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import MAX_PREC, Decimal, InvalidOperation, localcontext
from typing import Callable, Generic, Iterable, TypeVar, Union

from returns.result import Failure, Result, Success

T = TypeVar("T")

_WIDGET_CODE = re.compile(r"W\d{4}")
_GIZMO_CODE = re.compile(r"G\d{3}")
_ZIP_CODE = re.compile(r"\d{5}")
_EMAIL = re.compile(r".+@.+")

MAX_UNIT_QUANTITY = 1000
MAX_KILOGRAM_QUANTITY = Decimal("100")


def _parse(factory: Callable[[], T]) -> Result[T, str]:
    """Run a validating constructor, turning its ValueError into a Failure."""
    try:
        return Success(factory())
    except ValueError as exc:
        return Failure(str(exc))


def to_decimal(raw: Decimal | int | float | str) -> Result[Decimal, str]:
    try:
        value = Decimal(str(raw))
    except InvalidOperation:
        return Failure(f"{raw!r} is not a number")
    if not value.is_finite():
        return Failure(f"{raw!r} is not a finite number")
    return Success(value)


# ---- Strings ---------------------------------------------------------------


@dataclass(frozen=True)
class String50:
    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValueError("must not be blank")
        if len(self.value) > 50:
            raise ValueError("must not be more than 50 characters")

    @staticmethod
    def create(raw: str) -> Result["String50", str]:
        return _parse(lambda: String50(raw))

    @staticmethod
    def create_optional(raw: str | None) -> Result["String50 | None", str]:
        if raw is None or not raw.strip():
            return Success(None)
        return String50.create(raw)


@dataclass(frozen=True)
class EmailAddress:
    value: str

    def __post_init__(self) -> None:
        if not _EMAIL.fullmatch(self.value):
            raise ValueError(f"{self.value!r} is not an email address")

    @staticmethod
    def create(raw: str) -> Result["EmailAddress", str]:
        return _parse(lambda: EmailAddress(raw))


@dataclass(frozen=True)
class ZipCode:
    value: str

    def __post_init__(self) -> None:
        if not _ZIP_CODE.fullmatch(self.value):
            raise ValueError(f"{self.value!r} must be 5 digits")

    @staticmethod
    def create(raw: str) -> Result["ZipCode", str]:
        return _parse(lambda: ZipCode(raw))


# ---- Product codes ---------------------------------------------------------


@dataclass(frozen=True)
class WidgetCode:
    """Counted product: 'W' followed by 4 digits."""

    value: str

    def __post_init__(self) -> None:
        if not _WIDGET_CODE.fullmatch(self.value):
            raise ValueError(f"{self.value!r}: widget code must be 'W' followed by 4 digits")


@dataclass(frozen=True)
class GizmoCode:
    """Weighed product: 'G' followed by 3 digits."""

    value: str

    def __post_init__(self) -> None:
        if not _GIZMO_CODE.fullmatch(self.value):
            raise ValueError(f"{self.value!r}: gizmo code must be 'G' followed by 3 digits")


ProductCode = Union[WidgetCode, GizmoCode]


def parse_product_code(raw: str) -> Result[ProductCode, str]:
    if not raw:
        return Failure("must not be blank")
    if raw.startswith("W"):
        return _parse(lambda: WidgetCode(raw))
    if raw.startswith("G"):
        return _parse(lambda: GizmoCode(raw))
    return Failure(f"{raw!r}: unrecognised product code format")


# ---- Quantities ------------------------------------------------------------


@dataclass(frozen=True)
class UnitQuantity:
    count: int

    def __post_init__(self) -> None:
        if not 0 <= self.count <= MAX_UNIT_QUANTITY:
            raise ValueError(f"unit quantity must be between 0 and {MAX_UNIT_QUANTITY}")

    @property
    def value(self) -> Decimal:
        return Decimal(self.count)


@dataclass(frozen=True)
class KilogramQuantity:
    kilograms: Decimal

    def __post_init__(self) -> None:
        if not Decimal(0) <= self.kilograms <= MAX_KILOGRAM_QUANTITY:
            raise ValueError(
                f"kilogram quantity must be between 0 and {MAX_KILOGRAM_QUANTITY}"
            )

    @property
    def value(self) -> Decimal:
        return self.kilograms


OrderQuantity = Union[UnitQuantity, KilogramQuantity]


def _to_unit_quantity(amount: Decimal) -> Result[OrderQuantity, str]:
    # range first: int() of a huge exponent never finishes
    if not Decimal(0) <= amount <= MAX_UNIT_QUANTITY:
        return Failure(f"unit quantity must be between 0 and {MAX_UNIT_QUANTITY}")
    if amount != amount.to_integral_value():
        return Failure(f"{amount} is not a whole number of units")
    return _parse(lambda: UnitQuantity(int(amount)))


def _to_kilogram_quantity(amount: Decimal) -> Result[OrderQuantity, str]:
    return _parse(lambda: KilogramQuantity(amount))


def parse_order_quantity(
    product_code: ProductCode, raw: Decimal | int | float | str
) -> Result[OrderQuantity, str]:
    """Widgets are counted in units, gizmos are weighed in kilograms."""
    if isinstance(product_code, WidgetCode):
        return to_decimal(raw).bind(_to_unit_quantity)
    return to_decimal(raw).bind(_to_kilogram_quantity)


# ---- Money -----------------------------------------------------------------


@dataclass(frozen=True)
class Price:
    amount: Decimal

    def __post_init__(self) -> None:
        if not self.amount.is_finite() or self.amount < 0:
            raise ValueError(f"price must be a non-negative number: {self.amount}")

    @staticmethod
    def of(amount: Decimal | int | str) -> "Price":
        return Price(Decimal(str(amount)))

    def multiply(self, quantity: OrderQuantity) -> "Price":
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            return Price(self.amount * quantity.value)


@dataclass(frozen=True)
class BillingAmount:
    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"billing amount must not be negative: {self.amount}")

    @staticmethod
    def sum_prices(prices: Iterable[Price]) -> "BillingAmount":
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            return BillingAmount(sum((p.amount for p in prices), Decimal(0)))

    def is_billable(self) -> bool:
        return self.amount > 0


# ---- Identity / collections ------------------------------------------------


@dataclass(frozen=True)
class OrderId:
    value: str


class NonEmptyTuple(tuple, Generic[T]):
    """A tuple that cannot be constructed without at least one item."""

    def __new__(cls, items: Iterable[T]) -> "NonEmptyTuple[T]":
        values = tuple(items)
        if not values:
            raise ValueError("at least one item is required")
        return super().__new__(cls, values)
