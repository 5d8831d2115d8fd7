from __future__ import annotations

from typing import Any, Callable, Sequence

from returns.io import IOFailure, IOResult
from returns.unsafe import unsafe_perform_io

from artflow_client.bootstrap import UseCases
from artflow_client.core.domain.model.cart import total_quantity
from artflow_client.core.domain.model.catalog import Artwork, Post, Supply
from artflow_client.core.domain.model.errors import StorefrontError
from artflow_client.core.domain.model.state import StorefrontState

Write = Callable[[str], None]

COMMANDS = ("browse", "buy", "inquire", "like")


# ---- rendering -------------------------------------------------------------


def render_artwork(item: Artwork) -> str:
    head = f"{item.title} [{item.id}]"
    meta = item.medium or "Mixed media"
    if item.year:
        meta += f" • {item.year}"
    lines = [head, f"  {meta}"]
    if item.price is not None:
        lines.append(f"  Guide: {item.currency} {item.price}")
    if item.cover_image:
        lines.append(f"  {item.cover_image}")
    return "\n".join(lines)


def render_supply(item: Supply) -> str:
    return "\n".join(
        [
            f"{item.title} [{item.id}]",
            f"  {item.brand or 'Generic'} • {item.category}",
            f"  {item.currency} {item.price}",
        ]
    )


def render_post(post: Post) -> str:
    lines = [f"{post.author_name} [{post.id}]"]
    if post.tags:
        lines.append(f"  {' • '.join(post.tags)}")
    lines.append(f"  {post.content}")
    lines.append(f"  ❤️ {post.likes}")
    return "\n".join(lines)


def _section(title: str, loading: bool, cards: Sequence[str]) -> str:
    body = "Loading..." if loading else "\n".join(cards)
    return f"== {title} ==\n{body}"


def render_state(state: StorefrontState) -> str:
    return "\n\n".join(
        [
            f"ArtFlow    Cart ({total_quantity(state.cart)})",
            _section(
                "Curated Showcases",
                state.loading,
                [render_artwork(a) for a in state.artworks],
            ),
            _section(
                "Art Supplies",
                state.loading,
                [render_supply(s) for s in state.supplies],
            ),
            _section("Community", state.loading, [render_post(p) for p in state.posts]),
        ]
    )


def render_cart(state: StorefrontState) -> str:
    lines = [f"Cart ({total_quantity(state.cart)})"]
    for line in state.cart:
        lines.append(
            f"  {line.quantity} x {line.item.title} [{line.item_id}] "
            f"@ {line.item.currency} {line.item.price}"
        )
    return "\n".join(lines)


# ---- commands --------------------------------------------------------------


def _failed(result: IOResult[Any, StorefrontError], write: Write) -> bool:
    if isinstance(result, IOFailure):
        write(f"[ng] {unsafe_perform_io(result.failure())}")
        return True
    return False


async def run_cli(
    usecases: UseCases, command: str, ids: Sequence[str], write: Write = print
) -> int:
    if command not in COMMANDS:
        write(f"unknown command: {command}")
        return 2

    loaded = await usecases.load_catalog.load()
    if _failed(loaded, write):
        return 1
    state = usecases.state.current()

    if command == "browse":
        write(render_state(state))
        return 0

    if command == "buy":
        return await _buy(usecases, state, ids, write)

    if command == "inquire":
        artwork = state.find_artwork(ids[0]) if ids else None
        if artwork is None:
            write(f"unknown artwork: {ids[0] if ids else '<missing>'}")
            return 2
        sent = await usecases.inquire.inquire(artwork)
        if _failed(sent, write):
            return 1
        write(f"[ok] inquiry sent for {artwork.id}")
        return 0

    post = state.find_post(ids[0]) if ids else None
    if post is None:
        write(f"unknown post: {ids[0] if ids else '<missing>'}")
        return 2
    liked = await usecases.like_post.like_post(post)
    if _failed(liked, write):
        return 1
    updated = unsafe_perform_io(liked.unwrap())
    likes = updated.likes if updated is not None else "?"
    write(f"[ok] {post.id} likes={likes}")
    return 0


async def _buy(
    usecases: UseCases, state: StorefrontState, ids: Sequence[str], write: Write
) -> int:
    supplies = [state.find_supply(i) for i in ids]
    missing = [i for i, s in zip(ids, supplies) if s is None]
    if missing:
        write(f"unknown supply: {', '.join(missing)}")
        return 2

    for supply in supplies:
        usecases.cart.add_to_cart(supply)
    write(render_cart(usecases.state.current()))

    placed = await usecases.checkout.checkout()
    if _failed(placed, write):
        return 1
    confirmation = unsafe_perform_io(placed.unwrap())
    write(
        f"[ok] order sent: lines={confirmation.line_count} "
        f"subtotal={confirmation.subtotal} status={confirmation.status_code}"
    )
    return 0
