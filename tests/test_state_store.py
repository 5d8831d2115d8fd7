from __future__ import annotations

from support import post, supply

from artflow_client.core.domain.model.catalog import Catalog
from artflow_client.core.domain.model.state import (
    StorefrontState,
    with_catalog,
    with_empty_cart,
    with_item_in_cart,
    with_like,
    with_loading,
)


def test_initial_snapshot_is_empty_and_loading(state):
    snap = state.current()

    assert snap == StorefrontState()
    assert snap.loading is True
    assert snap.cart == ()


def test_update_swaps_snapshot_and_notifies(state):
    seen = []
    state.subscribe(seen.append)

    new = state.update(lambda s: with_item_in_cart(s, supply("a")))

    assert state.current() is new
    assert seen == [new]


def test_no_op_transition_does_not_notify(state):
    seen = []
    state.subscribe(seen.append)

    state.update(lambda s: with_like(s, "missing"))

    assert seen == []


def test_unsubscribe_stops_notifications(state):
    seen = []
    unsubscribe = state.subscribe(seen.append)
    unsubscribe()

    state.update(lambda s: with_loading(s, False))

    assert seen == []


def test_like_only_touches_the_target_post():
    s = with_catalog(
        StorefrontState(), Catalog((), (), (post("p1", likes=3), post("p2")))
    )

    liked = with_like(s, "p2")

    assert [p.likes for p in liked.posts] == [3, 1]
    assert liked.posts[0] is s.posts[0]


def test_empty_cart_keeps_collections():
    s = with_item_in_cart(
        with_catalog(StorefrontState(), Catalog((), (supply("a"),), ())), supply("a")
    )

    cleared = with_empty_cart(s)

    assert cleared.cart == ()
    assert cleared.supplies == s.supplies
