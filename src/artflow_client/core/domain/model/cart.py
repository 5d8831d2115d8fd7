from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from artflow_client.core.domain.model.catalog import ItemId, Supply


@dataclass(frozen=True)
class CartLine:
    item: Supply
    quantity: int

    @property
    def item_id(self) -> ItemId:
        return self.item.id


Cart = Tuple[CartLine, ...]


def add_line(cart: Cart, item: Supply) -> Cart:
    """Merge ``item`` into ``cart`` keyed by item id.

    An id already in the cart gets its quantity bumped by one in place;
    an unknown id is appended with quantity 1. Relative order of the
    existing lines never changes.
    """
    if any(line.item_id == item.id for line in cart):
        return tuple(
            replace(line, quantity=line.quantity + 1) if line.item_id == item.id else line
            for line in cart
        )
    return cart + (CartLine(item=item, quantity=1),)


def total_quantity(cart: Cart) -> int:
    return sum(line.quantity for line in cart)
