from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from order_taking.core.domain.model.simple_types import Price, ProductCode


@dataclass
class InMemoryProductCatalog:
    prices: Dict[str, Price]

    def check_product_code_exists(self, product_code: ProductCode) -> bool:
        return product_code.value in self.prices

    def get_product_price(self, product_code: ProductCode) -> Price:
        # only called for codes that passed check_product_code_exists
        return self.prices[product_code.value]
