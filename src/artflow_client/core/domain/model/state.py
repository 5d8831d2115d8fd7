from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from artflow_client.core.domain.model.cart import Cart, CartLine, add_line
from artflow_client.core.domain.model.catalog import Artwork, Catalog, ItemId, Post, Supply


def _same_id(left: ItemId, right: ItemId) -> bool:
    # 7 from the wire and "7" from a command line name the same item
    return str(left) == str(right)


@dataclass(frozen=True)
class StorefrontState:
    artworks: Tuple[Artwork, ...] = ()
    supplies: Tuple[Supply, ...] = ()
    posts: Tuple[Post, ...] = ()
    cart: Tuple[CartLine, ...] = ()
    loading: bool = True

    def find_artwork(self, artwork_id: ItemId) -> Artwork | None:
        return next((a for a in self.artworks if _same_id(a.id, artwork_id)), None)

    def find_supply(self, supply_id: ItemId) -> Supply | None:
        return next((s for s in self.supplies if _same_id(s.id, supply_id)), None)

    def find_post(self, post_id: ItemId) -> Post | None:
        return next((p for p in self.posts if _same_id(p.id, post_id)), None)


# ---- transitions (old snapshot -> new snapshot) ----------------------------


def with_loading(state: StorefrontState, loading: bool) -> StorefrontState:
    if state.loading == loading:
        return state
    return replace(state, loading=loading)


def with_catalog(state: StorefrontState, catalog: Catalog) -> StorefrontState:
    return replace(
        state,
        artworks=catalog.artworks,
        supplies=catalog.supplies,
        posts=catalog.posts,
    )


def with_item_in_cart(state: StorefrontState, item: Supply) -> StorefrontState:
    return replace(state, cart=add_line(state.cart, item))


def with_empty_cart(state: StorefrontState) -> StorefrontState:
    empty: Cart = ()
    return replace(state, cart=empty)


def with_like(state: StorefrontState, post_id: ItemId) -> StorefrontState:
    if state.find_post(post_id) is None:
        return state
    return replace(
        state,
        posts=tuple(
            replace(p, likes=p.likes + 1) if _same_id(p.id, post_id) else p
            for p in state.posts
        ),
    )
