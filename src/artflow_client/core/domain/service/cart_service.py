from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from artflow_client.core.domain.model.cart import Cart
from artflow_client.core.domain.model.catalog import CatalogItem, Supply
from artflow_client.core.domain.model.errors import NotPurchasable, StorefrontError
from artflow_client.core.domain.model.state import with_item_in_cart
from artflow_client.core.ports.inbound.add_to_cart import AddToCartUseCase
from artflow_client.core.ports.outbound.state import StateStore


@dataclass(frozen=True)
class CartDeps:
    state: StateStore


@dataclass(frozen=True)
class CartService(AddToCartUseCase):
    deps: CartDeps

    def add_to_cart(self, item: CatalogItem) -> Result[Cart, StorefrontError]:
        if not isinstance(item, Supply):
            return Failure(
                NotPurchasable(message="artworks are sold by inquiry", item_id=item.id)
            )
        state = self.deps.state.update(lambda s: with_item_in_cart(s, item))
        return Success(state.cart)
