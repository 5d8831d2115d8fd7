from __future__ import annotations

from typing import Protocol

from returns.result import Result

from artflow_client.core.domain.model.cart import Cart
from artflow_client.core.domain.model.catalog import CatalogItem
from artflow_client.core.domain.model.errors import StorefrontError


class AddToCartUseCase(Protocol):
    def add_to_cart(self, item: CatalogItem) -> Result[Cart, StorefrontError]: ...
