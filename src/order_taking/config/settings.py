"""Settings for the order-taking composition root.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the caller
  2. Env vars     — ``ORDER_TAKING_*`` prefix (dicts and lists as JSON)
  3. Code defaults

The workflow core never reads these; only :mod:`order_taking.bootstrap`
turns them into collaborators.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings


def _default_catalog() -> dict[str, Decimal]:
    return {"W1234": Decimal("10"), "G123": Decimal("25.5")}


class OrderTakingSettings(BaseSettings):
    """Unified settings for running the workflow against in-memory services.

    Attributes:
        catalog: Product code to unit price. Codes missing here do not exist.
        known_zip_codes: When set, only addresses in these zip codes exist.
        undeliverable_emails: Recipients the acknowledgement sender rejects.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ORDER_TAKING_",
    }

    log_level: str = "WARNING"
    log_json: bool = False

    catalog: dict[str, Decimal] = Field(default_factory=_default_catalog)
    known_zip_codes: list[str] | None = None
    undeliverable_emails: list[str] = Field(default_factory=list)
