from __future__ import annotations

from typing import Awaitable, Callable, List

import structlog
from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import (
    AddressValidationError,
    ValidationError,
)
from order_taking.core.domain.model.order import (
    Address,
    CheckedAddress,
    CustomerInfo,
    PersonalName,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from order_taking.core.domain.model.simple_types import (
    EmailAddress,
    NonEmptyTuple,
    String50,
    ZipCode,
    parse_order_quantity,
    parse_product_code,
)
from order_taking.core.domain.service._collaborators import call
from order_taking.core.ports.inbound.place_order import ValidationErrors
from order_taking.core.ports.outbound.address import CheckAddressExists
from order_taking.core.ports.outbound.catalog import CheckProductCodeExists

logger = structlog.get_logger(__name__)

ValidateOrder = Callable[
    [UnvalidatedOrder], Awaitable[Result[ValidatedOrder, ValidationErrors]]
]

_ADDRESS_ERRORS = {
    AddressValidationError.INVALID_FORMAT: "address is not in a valid format",
    AddressValidationError.ADDRESS_NOT_FOUND: "address not found",
}


def _error_at(field: str) -> Callable[[str], ValidationError]:
    return lambda message: ValidationError(message, field)


def to_customer_info(
    info: UnvalidatedCustomerInfo,
) -> Result[CustomerInfo, ValidationError]:
    return Result.do(
        CustomerInfo(PersonalName(first, last), email)
        for first in String50.create(info.first_name).alt(
            _error_at("customer_info.first_name")
        )
        for last in String50.create(info.last_name).alt(
            _error_at("customer_info.last_name")
        )
        for email in EmailAddress.create(info.email_address).alt(
            _error_at("customer_info.email_address")
        )
    )


def to_address(checked: CheckedAddress, field: str) -> Result[Address, ValidationError]:
    raw = checked.address
    return Result.do(
        Address(line1, city, zip_code, line2, line3, line4)
        for line1 in String50.create(raw.address_line1).alt(
            _error_at(f"{field}.address_line1")
        )
        for line2 in String50.create_optional(raw.address_line2).alt(
            _error_at(f"{field}.address_line2")
        )
        for line3 in String50.create_optional(raw.address_line3).alt(
            _error_at(f"{field}.address_line3")
        )
        for line4 in String50.create_optional(raw.address_line4).alt(
            _error_at(f"{field}.address_line4")
        )
        for city in String50.create(raw.city).alt(_error_at(f"{field}.city"))
        for zip_code in ZipCode.create(raw.zip_code).alt(_error_at(f"{field}.zip_code"))
    )


async def _resolve_address(
    check_address_exists: CheckAddressExists,
    address: UnvalidatedAddress,
    field: str,
) -> Result[Address, ValidationError]:
    checked = await call(check_address_exists, address)
    return checked.alt(
        lambda err: ValidationError(_ADDRESS_ERRORS[err], field)
    ).bind(lambda ok: to_address(ok, field))


async def _to_validated_line(
    check_product_code_exists: CheckProductCodeExists,
    line: UnvalidatedOrderLine,
    index: int,
) -> Result[ValidatedOrderLine, ValidationError]:
    field = f"lines[{index}]"
    code_result = parse_product_code(line.product_code).alt(
        _error_at(f"{field}.product_code")
    )
    if not is_successful(code_result):
        return code_result
    code = code_result.unwrap()

    if not await call(check_product_code_exists, code):
        return Failure(
            ValidationError(f"product code {code.value!r} does not exist", f"{field}.product_code")
        )

    return (
        parse_order_quantity(code, line.quantity)
        .alt(_error_at(f"{field}.quantity"))
        .map(lambda quantity: ValidatedOrderLine(code, quantity))
    )


def validate_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
) -> ValidateOrder:
    async def _validate(
        order: UnvalidatedOrder,
    ) -> Result[ValidatedOrder, ValidationError]:
        if not order.lines:
            return Failure(ValidationError("at least one order line is required", "lines"))

        customer_info = to_customer_info(order.customer_info)
        if not is_successful(customer_info):
            return customer_info

        shipping_address = await _resolve_address(
            check_address_exists, order.shipping_address, "shipping_address"
        )
        if not is_successful(shipping_address):
            return shipping_address

        billing_address = await _resolve_address(
            check_address_exists, order.billing_address, "billing_address"
        )
        if not is_successful(billing_address):
            return billing_address

        lines: List[ValidatedOrderLine] = []
        for index, line in enumerate(order.lines):
            validated = await _to_validated_line(check_product_code_exists, line, index)
            if not is_successful(validated):
                return validated
            lines.append(validated.unwrap())

        return Success(
            ValidatedOrder(
                customer_info=customer_info.unwrap(),
                shipping_address=shipping_address.unwrap(),
                billing_address=billing_address.unwrap(),
                lines=NonEmptyTuple(lines),
            )
        )

    async def validate(
        order: UnvalidatedOrder,
    ) -> Result[ValidatedOrder, ValidationErrors]:
        result = await _validate(order)
        if is_successful(result):
            logger.debug("order validated", lines=len(order.lines))
        else:
            logger.warning("order validation failed", error=str(result.failure()))
        return result.alt(lambda error: (error,))

    return validate
