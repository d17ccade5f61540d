from __future__ import annotations

from dataclasses import dataclass

from order_taking.adapters.outbound.in_memory_addresses import InMemoryAddressBook
from order_taking.adapters.outbound.in_memory_catalog import InMemoryProductCatalog
from order_taking.adapters.outbound.letter_template import render_acknowledgement_letter
from order_taking.adapters.outbound.logging_sender import LoggingAcknowledgementSender
from order_taking.adapters.outbound.stdout_events import stdout_publish_events
from order_taking.config.logging import configure_logging
from order_taking.config.settings import OrderTakingSettings
from order_taking.core.domain.model.simple_types import Price
from order_taking.core.ports.inbound.place_order import PlaceOrder, PlaceOrderDeps
from order_taking.core.ports.outbound.events import PublishEvents
from order_taking.core.usecase.place_order import place_order


@dataclass(frozen=True)
class App:
    place_order: PlaceOrder
    publish_events: PublishEvents


def build_deps(settings: OrderTakingSettings) -> PlaceOrderDeps:
    catalog = InMemoryProductCatalog(
        prices={code: Price.of(amount) for code, amount in settings.catalog.items()}
    )
    addresses = InMemoryAddressBook(
        known_zip_codes=(
            frozenset(settings.known_zip_codes)
            if settings.known_zip_codes is not None
            else None
        )
    )
    sender = LoggingAcknowledgementSender(
        undeliverable=frozenset(settings.undeliverable_emails)
    )

    # collaborators are injected as plain callables
    return PlaceOrderDeps(
        check_product_code_exists=catalog.check_product_code_exists,
        check_address_exists=addresses.check_address_exists,
        get_product_price=catalog.get_product_price,
        create_order_acknowledgement_letter=render_acknowledgement_letter,
        send_order_acknowledgement=sender.send,
    )


def build_app(settings: OrderTakingSettings | None = None) -> App:
    settings = settings or OrderTakingSettings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)
    return App(
        place_order=place_order(build_deps(settings)),
        publish_events=stdout_publish_events,
    )
